# schools_api/api/schools.py

import logging
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends

from schools_api.api.deps import get_data_file, get_logger
from schools_api.data.loader import Record, find_record, load_records
from schools_api.errors import not_found_error, validation_error
from schools_api.models.errors import ErrorOut
from schools_api.validation import is_valid_guid

router = APIRouter(tags=["schools"])


@router.get(
    "/",
    response_model=None,
    responses={500: {"model": ErrorOut}},
)
def list_schools(
    data_file: Path = Depends(get_data_file),
    logger: logging.Logger = Depends(get_logger),
) -> List[Record]:
    """
    Return every record in the dataset, in file order.
    """
    records = load_records(data_file)
    logger.debug("Loaded %d records from %s", len(records), data_file)
    return records


@router.get(
    "/{guid}",
    response_model=None,
    responses={
        400: {"model": ErrorOut},
        404: {"model": ErrorOut},
        500: {"model": ErrorOut},
    },
)
def get_school(
    guid: str,
    data_file: Path = Depends(get_data_file),
    logger: logging.Logger = Depends(get_logger),
) -> Record:
    """
    Look up a single record by its guid.

    The format check ignores letter case but the lookup itself is an exact
    string comparison against the stored guid.
    """
    if not is_valid_guid(guid):
        raise validation_error(f"Invalid GUID format: {guid}")

    records = load_records(data_file)
    logger.debug("Searching %d records for %s", len(records), guid)

    record = find_record(records, guid)
    if record is None:
        raise not_found_error(f"Item not found: {guid}")

    return record
