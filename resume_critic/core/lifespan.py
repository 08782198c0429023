import contextlib
from contextlib import asynccontextmanager
import asyncio
import logging

import httpx

from resume_critic.ai.config import load_ai_config
from resume_critic.ai.factory import get_ai_client
from resume_critic.core.config import settings

logger = logging.getLogger(__name__)


async def ping_health(client: httpx.AsyncClient, base_url: str) -> bool:
    try:
        response = await client.get(f"{base_url}/api/health")
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning("keep_alive_ping_failed: %s", exc)
        return False
    logger.info("keep_alive_ping_sent status=%s", response.status_code)
    return True


async def keep_alive(
    base_url: str,
    interval_s: float,
    stop_event: asyncio.Event,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    async with httpx.AsyncClient(timeout=30.0, transport=transport) as client:
        while not stop_event.is_set():
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=interval_s)
            except asyncio.TimeoutError:
                await ping_health(client, base_url)


@asynccontextmanager
async def lifespan(app):
    app.state.ai_client_error = None
    try:
        app.state.ai_client = get_ai_client(load_ai_config(settings))
    except (RuntimeError, ValueError) as exc:
        app.state.ai_client = None
        app.state.ai_client_error = str(exc)
        logger.warning("ai_client_unavailable provider=%s: %s", settings.ai_provider, exc)

    stop_event = asyncio.Event()
    ping_task = None
    if settings.keep_alive_url:
        ping_task = asyncio.create_task(
            keep_alive(settings.keep_alive_url, settings.keep_alive_interval_s, stop_event)
        )
        logger.info(
            "keep_alive_started url=%s interval_s=%s",
            settings.keep_alive_url,
            settings.keep_alive_interval_s,
        )

    yield

    stop_event.set()
    if ping_task is not None and not ping_task.done():
        ping_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await ping_task
