# parse_data.py
"""
Parse the schools dataset and print basic stats.

Usage:
    python parse_data.py                 # uses DATA_FILE_PATH / data.json
    python parse_data.py other.json
"""

import sys

from schools_api.config import get_settings
from scripts.inspect_data import summarize_dataset


def main():
    file_path = sys.argv[1] if len(sys.argv) > 1 else get_settings().data_file_path
    stats = summarize_dataset(file_path)

    print(f"Records read:          {stats['n_records']}")
    print(f"Unique guids:          {stats['n_unique_guids']}")
    print(f"Records with bad guid: {stats['n_invalid_guids']}")
    print(f"Duplicate guids:       {stats['n_duplicate_guids']}")

    if stats["invalid_examples"]:
        print("\nExample bad guids:")
        for ex in stats["invalid_examples"]:
            print(f"- Index {ex['index']}: {ex['guid']!r}")

    if stats["duplicate_guid_examples"]:
        print("\nExample duplicates:")
        for ex in stats["duplicate_guid_examples"]:
            print(f"- {ex}")


if __name__ == "__main__":
    main()
