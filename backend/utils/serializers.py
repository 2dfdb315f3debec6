from datetime import datetime

from bson import ObjectId


def serialize_value(value):
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def serialize_record(doc: dict, hidden: tuple = ()) -> dict:
    doc = dict(doc)
    record_id = doc.pop("_id", None)
    for field in hidden:
        doc.pop(field, None)

    return {
        "id": str(record_id) if record_id is not None else None,
        "data": serialize_value(doc),
    }


def serialize_records(docs, hidden: tuple = ()) -> list[dict]:
    return [serialize_record(d, hidden) for d in docs]
