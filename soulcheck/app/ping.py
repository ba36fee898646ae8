import asyncio
import logging

logger = logging.getLogger(__name__)


async def ping_host(host: str, timeout_s: int = 1) -> bool:
    """One ICMP echo via the system ping binary; True only on exit code 0."""
    try:
        proc = await asyncio.create_subprocess_exec(
            "ping", "-c", "1", "-W", str(timeout_s), host,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        code = await proc.wait()
    except OSError as e:
        logger.warning(f"ping {host} could not run: {e}")
        return False
    return code == 0
