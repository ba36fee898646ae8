from dataclasses import dataclass
from enum import Enum
from typing import Optional

REDIRECT_CODES = frozenset({301, 302, 307, 308})
WARNING_CODES = frozenset({401, 403, 404})


class Health(Enum):
    OK = ("OK", "🟢")
    WARNING = ("Warning", "🟡")
    DOWN = ("Down", "🔴")

    def __init__(self, label: str, emoji: str):
        self.label = label
        self.emoji = emoji


@dataclass(frozen=True)
class ProbeResult:
    health: Health
    detail: str
    code: Optional[int] = None

    def render(self, emoji: bool = False) -> str:
        text = f"{self.health.label} ({self.detail})"
        return f"{self.health.emoji} {text}" if emoji else text


def classify(code: int) -> ProbeResult:
    """Map a raw HTTP status (0 = no response) to a health label."""
    if code == 200:
        return ProbeResult(Health.OK, str(code), code)
    if code in REDIRECT_CODES:
        return ProbeResult(Health.OK, f"Redirect {code}", code)
    if code in WARNING_CODES:
        return ProbeResult(Health.WARNING, str(code), code)
    return ProbeResult(Health.DOWN, str(code), code)
