from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class LogConfig:
    level: str = "INFO"
    no_color: bool = False
    # Only malformed-URL errors reach stderr; used when piping URL lists.
    quiet: bool = False

    def effective_level(self) -> int:
        if self.quiet:
            return logging.ERROR
        return getattr(logging, self.level.upper(), logging.INFO)

    def use_rich(self) -> bool:
        if self.no_color or os.getenv("NO_COLOR") is not None:
            return False
        return sys.stderr.isatty()


def setup_logging(cfg: LogConfig) -> None:
    """Route all logging to stderr; stdout is reserved for cleaned URLs."""
    level = cfg.effective_level()

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler: logging.Handler
    if cfg.use_rich():
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    handler.setLevel(level)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
