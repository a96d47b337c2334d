"""url_query_cleaner: strip tracking query parameters from URLs."""

from pathlib import Path

from .query import query_filter
from .tracking import TRACKERS, AllowedMarketingTracking, to_filters, untrack


def _read_version() -> str:
    p = Path(__file__).resolve().parents[1] / "VERSION"
    try:
        return p.read_text(encoding="utf-8").strip()
    except OSError:
        # Installed without the source tree next to the package.
        return "0.3.0"


__version__ = _read_version()

__all__ = [
    "TRACKERS",
    "AllowedMarketingTracking",
    "query_filter",
    "to_filters",
    "untrack",
    "__version__",
]
