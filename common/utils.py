# common/utils.py
from datetime import datetime
from bson import ObjectId


def is_valid_object_id(value) -> bool:
    return isinstance(value, (str, ObjectId)) and ObjectId.is_valid(value)


def to_object_id(value):
    return value if isinstance(value, ObjectId) else ObjectId(value)


def serialize(value):
    """Make store documents JSON friendly: ObjectIds become strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return value


def utcnow():
    return datetime.utcnow()
