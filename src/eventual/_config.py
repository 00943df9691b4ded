"""Library configuration: EventualConfig, configure() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from eventual._logging import configure_logging, get_logger

__all__ = [
    'EventualConfig',
    'configure',
    'get_config',
    'reset_config',
]

logger = get_logger(__name__)

MAX_PENDING_DEPTH_LIMIT = 4096

_FALSE_VALUES = ('0', 'false', 'no', 'off')
_TRUE_VALUES = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class EventualConfig:
    """Configuration for eventual containers.

    Attributes:
        collapse_sentinels: If True, ``Some(None)``, ``Some(nan)`` and
            ``Some(inf)`` build Nothing. If False they build Some.
        max_pending_depth: How many times a pending computation may resolve
            to yet another pending computation before PendingDepthError.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave
            logging untouched.
    """

    collapse_sentinels: bool = True
    max_pending_depth: int = 64
    log_level: str | None = None


_config: EventualConfig | None = None


def _detect_collapse_sentinels() -> bool:
    """Read EVENTUAL_COLLAPSE_SENTINELS, defaulting to True."""
    raw = os.environ.get('EVENTUAL_COLLAPSE_SENTINELS', '').strip().lower()
    if raw in _FALSE_VALUES:
        return False
    if raw and raw not in _TRUE_VALUES:
        logging.warning("Unknown EVENTUAL_COLLAPSE_SENTINELS value '%s', defaulting to true", raw)
    return True


def _detect_max_pending_depth() -> int:
    """Read EVENTUAL_MAX_PENDING_DEPTH, defaulting to 64."""
    raw = os.environ.get('EVENTUAL_MAX_PENDING_DEPTH', '').strip()
    if not raw:
        return EventualConfig.max_pending_depth
    try:
        return _clamp_depth(int(raw))
    except ValueError:
        logging.warning("Invalid EVENTUAL_MAX_PENDING_DEPTH value '%s', defaulting to 64", raw)
        return EventualConfig.max_pending_depth


def _clamp_depth(depth: int) -> int:
    return max(1, min(MAX_PENDING_DEPTH_LIMIT, depth))


def configure(
    collapse_sentinels: bool | None = None,
    max_pending_depth: int | None = None,
    log_level: str | None = None,
) -> EventualConfig:
    """Set the configuration used by every container.

    Args:
        collapse_sentinels: Sentinel policy. Read from the environment if None.
        max_pending_depth: Pending-of-pending bound, clamped to 1..4096.
            Read from the environment if None.
        log_level: Logging level. Read from EVENTUAL_LOG_LEVEL if None;
            logging is configured only when a level is known. Only this
            explicit call installs handlers, never the lazy get_config().

    Returns:
        The EventualConfig that was set.

    Example:
        ```python
        from eventual import Some, configure

        configure(collapse_sentinels=False)
        assert Some(None).is_some()
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is None:
        log_level = os.environ.get('EVENTUAL_LOG_LEVEL') or None

    _config = _build_config(collapse_sentinels, max_pending_depth, log_level)

    # Configure logging if level specified
    if log_level is not None:
        configure_logging(log_level)

    logger.debug(
        'eventual_configured',
        collapse_sentinels=_config.collapse_sentinels,
        max_pending_depth=_config.max_pending_depth,
    )
    return _config


def _build_config(
    collapse_sentinels: bool | None,
    max_pending_depth: int | None,
    log_level: str | None,
) -> EventualConfig:
    if collapse_sentinels is None:
        collapse_sentinels = _detect_collapse_sentinels()

    if max_pending_depth is None:
        max_pending_depth = _detect_max_pending_depth()
    else:
        max_pending_depth = _clamp_depth(max_pending_depth)

    return EventualConfig(
        collapse_sentinels=collapse_sentinels,
        max_pending_depth=max_pending_depth,
        log_level=log_level,
    )


def get_config() -> EventualConfig:
    """Get the current configuration, building it from the environment on first use.

    The lazily built config never touches logging: handlers are only
    installed by an explicit configure() call.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _build_config(None, None, None)
    return _config


def reset_config() -> None:
    """Forget the current configuration; the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
