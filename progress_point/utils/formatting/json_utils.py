"""Response formatting for batch and restriction documents read from MongoDB"""
from datetime import date, datetime
from typing import Any, Mapping
from bson import ObjectId

def to_json_value(value: Any) -> Any:
    """
    Make a stored value safe for a JSON response.

    ObjectIds become strings. Datetimes and dates (marksLastUpdated,
    lastUpdatedAt) become ISO strings. Sets such as department batch names
    become sorted lists.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {key: to_json_value(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted((to_json_value(item) for item in value), key=str)
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    return value

def sanitize_mongo_document(doc):
    if doc is None:
        return None
    return to_json_value(doc)
