# Standard library imports
from typing import Any, Optional

# External package imports
from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse a storage identity, None when the value is not a valid ObjectId."""
    if isinstance(value, ObjectId):
        return value
    if not value:
        return None
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None
