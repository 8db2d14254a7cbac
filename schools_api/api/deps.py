# schools_api/api/deps.py

import logging
from pathlib import Path

from fastapi import Request


def get_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


def get_data_file(request: Request) -> Path:
    return Path(request.app.state.settings.data_file_path)
