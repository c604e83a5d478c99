"""
Health endpoint server.
"""

from aiohttp import web

from cachebot.core.logging import get_logger
from cachebot.services.dispatcher import BatchDispatcher
from cachebot.state.pending import PendingStore

logger = get_logger(__name__)

PENDING_STORE_KEY = web.AppKey("pending_store", PendingStore)
DISPATCHER_KEY = web.AppKey("dispatcher", BatchDispatcher)


async def handle_health(request: web.Request) -> web.Response:
    """Report pending confirmations and queued purge jobs."""
    store = request.app[PENDING_STORE_KEY]
    dispatcher = request.app[DISPATCHER_KEY]
    return web.json_response(
        {
            "status": "ok" if dispatcher.running else "degraded",
            "pending": len(store),
            "queued": dispatcher.queued,
        }
    )


def create_status_app(store: PendingStore, dispatcher: BatchDispatcher) -> web.Application:
    """Build the aiohttp application serving /health."""
    app = web.Application()
    app[PENDING_STORE_KEY] = store
    app[DISPATCHER_KEY] = dispatcher
    app.router.add_get("/health", handle_health)
    return app


async def start_status_server(
    store: PendingStore,
    dispatcher: BatchDispatcher,
    host: str = "0.0.0.0",
    port: int = 8081,
) -> web.AppRunner:
    """
    Start the health endpoint server.

    Args:
        store: Pending confirmation store
        dispatcher: Batch dispatcher
        host: Host to bind to
        port: Port to bind to

    Returns:
        The runner, for cleanup on shutdown
    """
    runner = web.AppRunner(create_status_app(store, dispatcher))
    await runner.setup()

    site = web.TCPSite(runner, host, port)
    await site.start()

    logger.info(f"Status server started on {host}:{port}")
    return runner
