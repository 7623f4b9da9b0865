# monarch/api/v1/live.py
import asyncio
import logging
from typing import Any, Callable, Dict, List
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from monarch.config.database import get_db
from monarch.shared.live import live_collections
from monarch.modules.catalog.service import CatalogService
from monarch.modules.orders.service import OrdersService
from monarch.modules.expenses.service import ExpensesService
from monarch.modules.profile.service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/live", tags=["Live collections"])

SNAPSHOT_LOADERS: Dict[str, Callable[[Session], List[Dict[str, Any]]]] = {
    "shops": lambda db: CatalogService(db).shops_snapshot(),
    "brands": lambda db: CatalogService(db).brands_snapshot(),
    "routes": lambda db: CatalogService(db).routes_snapshot(),
    "orders": lambda db: OrdersService(db).orders_snapshot(),
    "expenses": lambda db: ExpensesService(db).expenses_snapshot(),
    "settings": lambda db: ProfileService(db).settings_snapshot(),
}

async def _forward(websocket: WebSocket, collection: str, queue: asyncio.Queue):
    while True:
        records = await queue.get()
        await websocket.send_json({"collection": collection, "records": records})

@router.websocket("/{collection}")
async def stream_collection(websocket: WebSocket, collection: str, db: Session = Depends(get_db)):
    """
    Current records of a collection, then the full list again after every change
    """
    loader = SNAPSHOT_LOADERS.get(collection)
    if loader is None:
        await websocket.close(code=4404)
        return

    await websocket.accept()

    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    # Publishes may come from any thread
    def on_change(records: List[Dict[str, Any]]):
        loop.call_soon_threadsafe(queue.put_nowait, records)

    # Subscribe before loading so no change is missed between the read and the push
    unsubscribe = live_collections.subscribe(collection, on_change, replay=False)
    sender = None

    try:
        records = await run_in_threadpool(loader, db)
        # A change published while loading is already newer than this snapshot
        if queue.empty():
            queue.put_nowait(records)
        sender = asyncio.create_task(_forward(websocket, collection, queue))
        logger.info(f"Live subscriber joined '{collection}'")

        while True:
            # Keep-alive; clients are not expected to send anything
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info(f"Live subscriber left '{collection}'")
    finally:
        unsubscribe()
        if sender:
            sender.cancel()
            try:
                await sender
            except asyncio.CancelledError:
                pass
            except Exception:
                logger.exception(f"Live sender for '{collection}' failed")
