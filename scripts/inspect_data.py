# scripts/inspect_data.py

import logging

from schools_api.config import get_settings
from schools_api.data.loader import load_records
from schools_api.validation import is_valid_guid

logger = logging.getLogger(__name__)

MAX_EXAMPLES = 5


def summarize_dataset(file_path: str):
    """
    Load the dataset the same way the API does and report records whose guid
    is malformed or repeated. Lookups return the first of any duplicates.
    """
    records = load_records(file_path)

    n_invalid = 0
    invalid_examples = []

    seen_guids: set[str] = set()
    duplicate_guid_count = 0
    duplicate_guid_examples: list[str] = []

    for index, record in enumerate(records):
        guid = record.get("guid") if isinstance(record, dict) else None

        if not is_valid_guid(guid):
            n_invalid += 1
            if len(invalid_examples) < MAX_EXAMPLES:
                invalid_examples.append({"index": index, "guid": guid})
            continue

        if guid in seen_guids:
            duplicate_guid_count += 1
            if len(duplicate_guid_examples) < MAX_EXAMPLES:
                duplicate_guid_examples.append(f"Duplicate guid {guid!r} at index {index}")
        else:
            seen_guids.add(guid)

    return {
        "n_records": len(records),
        "n_unique_guids": len(seen_guids),
        "n_invalid_guids": n_invalid,
        "invalid_examples": invalid_examples,
        "n_duplicate_guids": duplicate_guid_count,
        "duplicate_guid_examples": duplicate_guid_examples,
    }


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    file_path = get_settings().data_file_path
    stats = summarize_dataset(file_path)

    logger.info(f"Data file:             {file_path}")
    logger.info(f"Records read:          {stats['n_records']}")
    logger.info(f"Unique guids:          {stats['n_unique_guids']}")
    logger.info(f"Records with bad guid: {stats['n_invalid_guids']}")
    logger.info("Duplicate guids: %s", stats["n_duplicate_guids"])
    for example in stats["duplicate_guid_examples"]:
        logger.warning("Duplicate guid example: %s", example)

    if stats["invalid_examples"]:
        logger.warning("Example bad guids:")
        for ex in stats["invalid_examples"]:
            logger.warning("Index %s: %r", ex["index"], ex["guid"])


if __name__ == "__main__":
    main()
