# schools_api/data/loader.py

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

Record = Dict[str, Any]


def _reject_constant(name: str):
    # NaN and Infinity are accepted by json but are not valid JSON
    raise ValueError(f"invalid JSON constant {name}")


class DataLoadError(Exception):
    """The dataset file could not be read or is not a JSON array."""

    status_code = 500


def load_records(path: Union[str, Path]) -> List[Record]:
    """
    Read and parse the dataset file. No caching: every call hits the disk,
    so edits to the file show up on the next request.
    """
    file_path = Path(path).resolve()

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f, parse_constant=_reject_constant)
    except (OSError, ValueError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        raise DataLoadError(f"Failed to load data file: {e}") from e

    if not isinstance(data, list):
        raise DataLoadError(
            f"Failed to load data file: expected a JSON array in {file_path}, "
            f"got {type(data).__name__}"
        )

    return data


def find_record(records: List[Record], guid: str) -> Optional[Record]:
    # Exact string match, first one wins; duplicates are not rejected.
    for record in records:
        if isinstance(record, dict) and record.get("guid") == guid:
            return record
    return None
