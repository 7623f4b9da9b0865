# monarch/shared/live/snapshots.py
from typing import Any, Dict, Iterable, List, Type
from pydantic import BaseModel

from .hub import live_collections


def to_records(objects: Iterable[Any], schema: Type[BaseModel]) -> List[Dict[str, Any]]:
    """
    Serialize ORM objects into JSON-ready records, keeping their order
    """
    return [schema.model_validate(obj).model_dump(mode="json") for obj in objects]


def publish_collection(collection: str, objects: Iterable[Any], schema: Type[BaseModel]):
    live_collections.publish(collection, to_records(objects, schema))
