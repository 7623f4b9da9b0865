from .hub import COLLECTIONS, LiveCollections, UnknownCollectionError, live_collections
from .snapshots import publish_collection, to_records

__all__ = [
    "COLLECTIONS",
    "LiveCollections",
    "UnknownCollectionError",
    "live_collections",
    "publish_collection",
    "to_records"
]
