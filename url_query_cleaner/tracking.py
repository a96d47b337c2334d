from __future__ import annotations

from dataclasses import dataclass, fields
from typing import List, Optional, Tuple

from .query import query_filter

# (flag, filter prefix, tracker family). Order is the order of to_filters().
TRACKERS: Tuple[Tuple[str, str, str], ...] = (
    ("utm", "utm_", "Urchin Tracking Module (Google Analytics campaign tags)"),
    ("gclid", "gclid", "Google Click Identifier"),
    ("gclsrc", "gclsrc", "Google Ads source tag"),
    ("dclid", "dclid", "DoubleClick click identifier, now Google"),
    ("fbclid", "fbclid", "Facebook click identifier"),
    ("mscklid", "mscklid", "Microsoft Bing Ads click identifier"),
    ("zanpid", "zanpid", "zanox click identifier, now Awin"),
)


@dataclass(frozen=True)
class AllowedMarketingTracking:
    """Trackers that `untrack` should leave alone. Everything defaults to removed."""

    utm: bool = False
    gclid: bool = False
    gclsrc: bool = False
    dclid: bool = False
    fbclid: bool = False
    mscklid: bool = False
    zanpid: bool = False

    @classmethod
    def allowing(cls, *names: str) -> "AllowedMarketingTracking":
        known = {f.name for f in fields(cls)}
        flags = {}
        for raw in names:
            name = raw.strip().lower()
            if name not in known:
                raise ValueError(
                    f"Unknown tracker {raw!r} (known: {', '.join(t[0] for t in TRACKERS)})"
                )
            flags[name] = True
        return cls(**flags)


def to_filters(policy: Optional[AllowedMarketingTracking] = None) -> List[str]:
    if policy is None:
        policy = AllowedMarketingTracking()
    return [prefix for flag, prefix, _desc in TRACKERS if not getattr(policy, flag)]


def untrack(url: str, policy: Optional[AllowedMarketingTracking] = None) -> str:
    """Remove all tracking query parameters from `url`, except the ones allowed by `policy`."""
    return query_filter(url, to_filters(policy))
