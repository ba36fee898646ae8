import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

import yaml

GROUP_KEYS = ("internos", "sitios_empresa", "externos")


class ConfigError(Exception):
    """The service group document could not be read or understood."""


class ProbeKind(str, Enum):
    GENERIC = "generic"
    SELF_CHECK = "self_check"
    STATUS_PAGE = "status_page"
    INCIDENT_FEED = "incident_feed"
    JSON_STATUS = "json_status"


# Kinds for bare "name: address" entries, resolved once at load time.
LEGACY_KINDS: Dict[str, ProbeKind] = {
    "vps_soul23": ProbeKind.SELF_CHECK,
    "openai": ProbeKind.STATUS_PAGE,
    "canva": ProbeKind.STATUS_PAGE,
    "cloudflare": ProbeKind.STATUS_PAGE,
    "google_gemini": ProbeKind.INCIDENT_FEED,
    "formbricks": ProbeKind.JSON_STATUS,
}


@dataclass(frozen=True)
class Target:
    name: str
    address: str
    kind: ProbeKind = ProbeKind.GENERIC


def _target(group: str, name: Any, entry: Any) -> Target:
    name = str(name)
    if isinstance(entry, str):
        return Target(name, entry, LEGACY_KINDS.get(name, ProbeKind.GENERIC))
    if isinstance(entry, dict):
        address = entry.get("url") or entry.get("address")
        if not address:
            raise ConfigError(f"{group}.{name}: missing url")
        raw_kind = entry.get("kind")
        if raw_kind is None:
            kind = LEGACY_KINDS.get(name, ProbeKind.GENERIC)
        else:
            try:
                kind = ProbeKind(raw_kind)
            except ValueError:
                raise ConfigError(f"{group}.{name}: unknown probe kind {raw_kind!r}") from None
        return Target(name, str(address), kind)
    raise ConfigError(f"{group}.{name}: expected an address or a mapping, got {type(entry).__name__}")


def parse_service_groups(data: Any) -> Dict[str, List[Target]]:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("service group document must be a mapping")
    groups: Dict[str, List[Target]] = {}
    for key in GROUP_KEYS:
        section = data.get(key) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"{key}: expected a mapping of name -> address")
        groups[key] = [_target(key, name, entry) for name, entry in section.items()]
    return groups


def load_service_groups(path: str | Path) -> Dict[str, List[Target]]:
    """Read the sites document: JSON for .json files, YAML otherwise."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
        if p.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot load {p}: {e}") from e
    return parse_service_groups(data)
