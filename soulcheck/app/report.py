import asyncio
import datetime
import json
import logging
import time
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx

from .config import settings
from .probes import PROBES
from .status import ProbeResult, classify
from .targets import Target, load_service_groups
from .webhooks import dispatch_report

logger = logging.getLogger(__name__)

# group key in the sites document -> key in the report
SECTIONS = (
    ("internos", "internos"),
    ("sitios_empresa", "empresa"),
    ("externos", "externos"),
)


def utc_timestamp() -> str:
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def run_probe(client: httpx.AsyncClient, target: Target) -> Tuple[Union[int, str], str]:
    """(status field, state field) for one target.

    Generic probes keep the raw code in the status field; every other kind
    puts the same descriptive string in both.
    """
    outcome = await PROBES[target.kind](client, target.address)
    if isinstance(outcome, ProbeResult):
        text = outcome.render(settings.STATUS_EMOJI)
        status: Union[int, str] = text
        health = outcome.health
    else:
        result = classify(outcome)
        text = result.render(settings.STATUS_EMOJI)
        status = outcome
        health = result.health
    logger.info(json.dumps({
        "name": target.name,
        "kind": target.kind.value,
        "url": target.address,
        "health": health.label,
        "status": status,
    }, ensure_ascii=False))
    return status, text


async def build_section(client: httpx.AsyncClient, targets: List[Target],
                        max_concurrency: int = 1) -> Dict[str, Any]:
    if max_concurrency > 1:
        sem = asyncio.Semaphore(max_concurrency)

        async def bounded(t: Target):
            async with sem:
                return await run_probe(client, t)

        outcomes = await asyncio.gather(*(bounded(t) for t in targets))
    else:
        outcomes = [await run_probe(client, t) for t in targets]

    output: Dict[str, Any] = {}
    for target, (status, state) in zip(targets, outcomes):
        output[f"{target.name}_status"] = status
        output[f"{target.name}_state"] = state
        output[f"{target.name}_url"] = target.address
    return output


async def build_report(client: httpx.AsyncClient, groups: Dict[str, List[Target]], started: float,
                       max_concurrency: int = 1) -> Dict[str, Any]:
    """Three sections plus timing. `started` is a time.monotonic() reading."""
    sections = {}
    for group_key, report_key in SECTIONS:
        sections[report_key] = await build_section(client, groups.get(group_key, []), max_concurrency)
    return {
        "timestamp": utc_timestamp(),
        **sections,
        "execution_time_seconds": round(time.monotonic() - started, 2),
    }


async def run_health_checker(sites_path: Optional[str] = None,
                             webhook_urls: Optional[List[str]] = None,
                             client: Optional[httpx.AsyncClient] = None) -> Dict[str, Any]:
    """Load the sites document, probe everything, forward the report.

    Raises ConfigError when the document cannot be used; nothing else escapes.
    """
    started = time.monotonic()
    groups = load_service_groups(sites_path or settings.SITES_PATH)
    urls = settings.webhook_urls if webhook_urls is None else webhook_urls

    if client is not None:
        report = await build_report(client, groups, started, settings.MAX_CONCURRENCY)
        await dispatch_report(client, report, urls)
        return report

    limits = httpx.Limits(max_connections=None, max_keepalive_connections=5)
    async with httpx.AsyncClient(limits=limits) as own_client:
        report = await build_report(own_client, groups, started, settings.MAX_CONCURRENCY)
        await dispatch_report(own_client, report, urls)
    return report
