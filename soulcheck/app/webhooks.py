import asyncio
import json
import logging
from typing import Any, Dict, List

import httpx

from .config import settings

logger = logging.getLogger(__name__)


async def _deliver(client: httpx.AsyncClient, url: str, body: bytes, timeout: float) -> bool:
    r = await client.post(
        url,
        content=body,
        headers={"Content-Type": "application/json"},
        timeout=timeout,
    )
    return r.is_success


async def dispatch_report(client: httpx.AsyncClient, report: Dict[str, Any], urls: List[str],
                          timeout: float | None = None) -> int:
    """POST the report to every URL at once and wait for all of them.

    Individual failures are dropped; the return value is only the number of
    2xx answers.
    """
    if not urls:
        return 0
    body = json.dumps(report, ensure_ascii=False).encode("utf-8")
    timeout = settings.WEBHOOK_TIMEOUT_S if timeout is None else timeout
    outcomes = await asyncio.gather(
        *(_deliver(client, url, body, timeout) for url in urls),
        return_exceptions=True,
    )
    delivered = sum(1 for o in outcomes if o is True)
    logger.info(f"webhook dispatch finished: {delivered}/{len(urls)} delivered")
    return delivered
