import logging
from typing import Any, Awaitable, Callable, Dict, Union

import httpx

from .config import settings
from .status import Health, ProbeResult, classify
from .targets import ProbeKind

logger = logging.getLogger(__name__)

STATUSPAGE_SUMMARY_PATH = "/api/v2/summary.json"
INCIDENT_KEYWORDS = ("gemini", "vertex", "generative")

# Anything httpx can throw for a single request, including malformed addresses.
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def _dig(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


async def check_url(client: httpx.AsyncClient, url: str) -> int:
    """Plain GET; the HTTP status, or 0 when nothing usable came back."""
    try:
        r = await client.get(
            url,
            headers={"User-Agent": settings.UA},
            follow_redirects=settings.FOLLOW_REDIRECTS,
            timeout=settings.DEFAULT_TIMEOUT_S,
        )
        return r.status_code
    except REQUEST_ERRORS as e:
        logger.debug(f"GET {url} failed: {e}")
        return 0


async def check_vps_health_endpoint(client: httpx.AsyncClient, url: str) -> ProbeResult:
    try:
        r = await client.get(url, timeout=settings.DEFAULT_TIMEOUT_S)
        if r.status_code != 200:
            return ProbeResult(Health.DOWN, f"endpoint status: {r.status_code}", r.status_code)
        data = r.json()
    except (*REQUEST_ERRORS, ValueError) as e:
        return ProbeResult(Health.DOWN, f"connection error: {e}")
    # A body without the field counts as "not alive".
    if _dig(data, "checks", "vps_ping", "alive"):
        return ProbeResult(Health.OK, "VPS reachable", 200)
    return ProbeResult(Health.DOWN, "VPS reports alive: false", 200)


async def check_formbricks_health(client: httpx.AsyncClient, url: str) -> ProbeResult:
    try:
        r = await client.get(url, timeout=settings.VENDOR_TIMEOUT_S)
    except REQUEST_ERRORS:
        return ProbeResult(Health.DOWN, "network error")
    if r.status_code != 200:
        return ProbeResult(Health.DOWN, f"code {r.status_code}", r.status_code)
    try:
        data = r.json()
    except ValueError:
        data = None
    status = _dig(data, "status")
    if status == "ok":
        return ProbeResult(Health.OK, "API health: ok", 200)
    if status:
        return ProbeResult(Health.WARNING, str(status), 200)
    return ProbeResult(Health.WARNING, "no JSON", 200)


async def get_statuspage_status(client: httpx.AsyncClient, base_url: str) -> ProbeResult:
    url = base_url.rstrip("/") + STATUSPAGE_SUMMARY_PATH
    try:
        r = await client.get(url, timeout=settings.VENDOR_TIMEOUT_S)
        if r.status_code != 200:
            return ProbeResult(Health.DOWN, str(r.status_code), r.status_code)
        data = r.json()
    except (*REQUEST_ERRORS, ValueError):
        return ProbeResult(Health.DOWN, "verification error")

    indicator = _dig(data, "status", "indicator")
    description = _dig(data, "status", "description") or "no status description"
    if indicator == "none":
        return ProbeResult(Health.OK, str(description), 200)
    return ProbeResult(Health.WARNING, str(description), 200)


def _is_active_ai_incident(incident: Any) -> bool:
    if not isinstance(incident, dict) or incident.get("end"):
        return False
    service_name = incident.get("service_name") or ""
    if not isinstance(service_name, str):
        return False
    service_name = service_name.lower()
    return any(kw in service_name for kw in INCIDENT_KEYWORDS)


async def get_gemini_status(client: httpx.AsyncClient, display_url: str) -> ProbeResult:
    """Active Google AI incidents from the public feed, not the target itself.

    Falls back to a plain GET of display_url when the feed is unavailable.
    """
    try:
        r = await client.get(settings.INCIDENTS_URL, timeout=settings.VENDOR_TIMEOUT_S)
        if r.status_code == 200:
            incidents = r.json()
            if not isinstance(incidents, list):
                raise ValueError("incident feed is not a list")
            active = [i for i in incidents if _is_active_ai_incident(i)]
            if not active:
                return ProbeResult(Health.OK, "no active Google AI incidents", 200)
            return ProbeResult(Health.WARNING, f"{len(active)} active incidents", 200)
        logger.info(f"incident feed answered {r.status_code}, falling back to {display_url}")
        return classify(await check_url(client, display_url))
    except Exception as e:
        logger.debug(f"incident feed check failed: {e}")
        return ProbeResult(Health.DOWN, "connection error")


ProbeFunc = Callable[[httpx.AsyncClient, str], Awaitable[Union[int, ProbeResult]]]

PROBES: Dict[ProbeKind, ProbeFunc] = {
    ProbeKind.GENERIC: check_url,
    ProbeKind.SELF_CHECK: check_vps_health_endpoint,
    ProbeKind.STATUS_PAGE: get_statuspage_status,
    ProbeKind.INCIDENT_FEED: get_gemini_status,
    ProbeKind.JSON_STATUS: check_formbricks_health,
}
