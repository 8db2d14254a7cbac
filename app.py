# app.py
"""
Thin entrypoint for the API.

Usage examples:
    uvicorn app:app --reload
    python app.py
"""

import uvicorn

from schools_api.config import get_settings
from schools_api.main import app  # re-export FastAPI instance

if __name__ == "__main__":
    settings = get_settings()
    # uvicorn stops accepting connections on SIGTERM/SIGINT and waits for
    # in-flight requests before exiting.
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
