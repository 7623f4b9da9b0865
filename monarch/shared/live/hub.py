# monarch/shared/live/hub.py
import logging
import threading
from typing import Any, Callable, Dict, List, Sequence

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Listener = Callable[[List[Record]], None]

COLLECTIONS = ("shops", "brands", "orders", "expenses", "routes", "settings")


class UnknownCollectionError(KeyError):
    """Raised for a collection name outside COLLECTIONS"""


class LiveCollections:
    """
    Latest ordered records per collection, plus the listeners that want them.

    Services publish a fresh snapshot after every write; each listener then
    receives the full, insertion-ordered list for that collection.
    """

    def __init__(self, collections: Sequence[str] = COLLECTIONS):
        self._lock = threading.Lock()
        self._snapshots: Dict[str, List[Record]] = {}
        self._listeners: Dict[str, List[Listener]] = {name: [] for name in collections}

    def _check(self, collection: str):
        if collection not in self._listeners:
            raise UnknownCollectionError(collection)

    def snapshot(self, collection: str) -> List[Record]:
        self._check(collection)
        with self._lock:
            return list(self._snapshots.get(collection, []))

    def subscribe(
        self,
        collection: str,
        listener: Listener,
        replay: bool = True
    ) -> Callable[[], None]:
        """
        Register a listener and return the function that removes it.

        With ``replay`` a listener subscribing after a publish receives the
        current records straight away.
        """
        self._check(collection)
        with self._lock:
            self._listeners[collection].append(listener)
            current = self._snapshots.get(collection)

        if replay and current is not None:
            self._deliver(collection, listener, list(current))

        def unsubscribe():
            with self._lock:
                if listener in self._listeners[collection]:
                    self._listeners[collection].remove(listener)

        return unsubscribe

    def publish(self, collection: str, records: Sequence[Record]):
        self._check(collection)
        with self._lock:
            self._snapshots[collection] = list(records)
            listeners = list(self._listeners[collection])
            current = self._snapshots[collection]

        logger.debug(f"{collection}: {len(current)} records -> {len(listeners)} listeners")
        for listener in listeners:
            self._deliver(collection, listener, list(current))

    def listener_count(self, collection: str) -> int:
        self._check(collection)
        with self._lock:
            return len(self._listeners[collection])

    def _deliver(self, collection: str, listener: Listener, records: List[Record]):
        try:
            listener(records)
        except Exception:
            logger.exception(f"Listener for '{collection}' failed")


live_collections = LiveCollections()
