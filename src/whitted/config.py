"""Render configuration read from environment variables.

Settings:
    WHITTED_MAX_DEPTH: Recursion budget for reflection/refraction (default 5)
    WHITTED_WORKERS: Worker processes used by Camera.render (default: CPU count)
    WHITTED_LOG_LEVEL: Logging level name (default INFO)

Example:
    >>> from src.whitted.config import RenderConfig
    >>> config = RenderConfig.from_env()
    >>> config.max_depth
    5
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_MAX_DEPTH = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _default_workers() -> int:
    return os.cpu_count() or 1


@dataclass(frozen=True)
class RenderConfig:
    """Settings shared by the camera and the command-line tools.

    Attributes:
        max_depth: Recursion budget passed to ``World.color_at``.
        workers: Number of processes tracing rows in parallel.
        log_level: Name of the logging level, e.g. "INFO".
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    workers: int = field(default_factory=_default_workers)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RenderConfig":
        """Build a configuration from ``WHITTED_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            ValueError: If a variable is set to an invalid value.
        """
        env = os.environ if environ is None else environ

        def _int(name: str, default: int) -> int:
            raw = env.get(name)
            if raw is None or raw == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{name} must be an integer, got {raw!r}") from None

        return cls(
            max_depth=_int("WHITTED_MAX_DEPTH", DEFAULT_MAX_DEPTH),
            workers=_int("WHITTED_WORKERS", _default_workers()),
            log_level=env.get("WHITTED_LOG_LEVEL", "INFO"),
        )
