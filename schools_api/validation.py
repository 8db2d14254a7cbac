# schools_api/validation.py

import re

GUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_guid(value) -> bool:
    """
    True if value is a string in the 8-4-4-4-12 hex layout (any letter case).
    """
    return isinstance(value, str) and GUID_PATTERN.fullmatch(value) is not None
