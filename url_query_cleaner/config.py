from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, List, Optional

import yaml

from .tracking import AllowedMarketingTracking, to_filters


def _env_list(name: str, default: List[str]) -> List[str]:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return [item.strip() for item in v.split(",") if item.strip()]


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None or v == "" else v


def _as_list(v: Any) -> List[str]:
    if v is None:
        return []
    if isinstance(v, str):
        return [v]
    return [str(item) for item in v]


@dataclass
class Settings:
    # Tracker names (see tracking.TRACKERS) kept in the output.
    allow: List[str] = field(default_factory=list)
    # Raw prefixes removed on top of the tracking policy.
    extra_filters: List[str] = field(default_factory=list)

    # Logging / UX
    log_level: str = "INFO"
    no_color: bool = False
    quiet: bool = False

    def policy(self) -> AllowedMarketingTracking:
        return AllowedMarketingTracking.allowing(*self.allow)

    def filters(self) -> List[str]:
        return to_filters(self.policy()) + list(self.extra_filters)

    @staticmethod
    def from_env() -> "Settings":
        s = Settings()
        s.allow = _env_list("UQC_ALLOW", s.allow)
        s.extra_filters = _env_list("UQC_EXTRA_FILTERS", s.extra_filters)
        s.log_level = _env_str("UQC_LOG_LEVEL", s.log_level)
        s.no_color = _env_bool("UQC_NO_COLOR", s.no_color)
        s.quiet = _env_bool("UQC_QUIET", s.quiet)
        return s

    @staticmethod
    def from_file(path: Path) -> "Settings":
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        s = Settings.from_env()
        known = {f.name for f in fields(s)}
        for k, v in data.items():
            if k in ("allow", "extra_filters"):
                setattr(s, k, _as_list(v))
            elif k in known:
                setattr(s, k, v)
        return s


def load_settings(config_path: Optional[str]) -> Settings:
    if config_path:
        return Settings.from_file(Path(config_path))
    return Settings.from_env()
