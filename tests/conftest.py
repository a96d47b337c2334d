import logging
import sys
from pathlib import Path

import pytest

# Allow `import url_query_cleaner` without installing the package.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """cli.main() replaces the root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("UQC_ALLOW", "UQC_EXTRA_FILTERS", "UQC_LOG_LEVEL", "UQC_NO_COLOR", "UQC_QUIET"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
