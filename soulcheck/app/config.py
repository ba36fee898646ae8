import os
from dataclasses import dataclass
from typing import List


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    UA: str = os.getenv("SC_UA", "HealthCheckMonitor/1.0")
    SITES_PATH: str = os.getenv("SC_SITES_PATH", "data/sites.json")
    DEFAULT_TIMEOUT_S: float = float(os.getenv("SC_DEFAULT_TIMEOUT_S", "10"))
    VENDOR_TIMEOUT_S: float = float(os.getenv("SC_VENDOR_TIMEOUT_S", "8"))
    WEBHOOK_TIMEOUT_S: float = float(os.getenv("SC_WEBHOOK_TIMEOUT_S", "10"))
    WEBHOOK_URLS: str = os.getenv("WEBHOOK_URLS", "")
    MAX_CONCURRENCY: int = int(os.getenv("SC_MAX_CONCURRENCY", "1"))
    FOLLOW_REDIRECTS: bool = _flag("SC_FOLLOW_REDIRECTS", "true")
    STATUS_EMOJI: bool = _flag("SC_STATUS_EMOJI", "false")
    INCIDENTS_URL: str = os.getenv("SC_INCIDENTS_URL", "https://status.cloud.google.com/incidents.json")
    VPS_IP: str = os.getenv("SC_VPS_IP", "31.97.41.188")
    STATIC_DIR: str = os.getenv("SC_STATIC_DIR", "static")
    PORT: int = int(os.getenv("PORT", "3001"))

    @property
    def webhook_urls(self) -> List[str]:
        return parse_webhook_urls(self.WEBHOOK_URLS)


def parse_webhook_urls(value: str) -> List[str]:
    """Comma separated list -> ordered URLs, blanks dropped."""
    return [u.strip() for u in (value or "").split(",") if u.strip()]


settings = Settings()
