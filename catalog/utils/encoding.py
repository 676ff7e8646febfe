from typing import Any
from bson import ObjectId
from fastapi.encoders import jsonable_encoder

def to_jsonable(doc: Any) -> Any:
    """Mongo document(s) -> JSON-safe data. ObjectId becomes its hex string, datetimes ISO-8601."""
    return jsonable_encoder(doc, custom_encoder={ObjectId: str})
