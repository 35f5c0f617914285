"""Optional loguru sink for applications embedding the engine.

Nothing is configured on import; a library should not decide where logs go."""

from __future__ import annotations

import sys
from typing import Any, Optional

from loguru import logger

_handler_id: Optional[int] = None


def _only_object_view(record) -> bool:
    return record["name"].startswith("ObjectViewEngine")


def setup_logging(level: Optional[str] = None, sink: Any = None) -> int:
    """Route ObjectViewEngine records to ``sink`` (stderr by default) at ``level``.

    Calling it again replaces the handler added by the previous call instead of
    stacking a second one."""
    global _handler_id
    from .config import get_settings

    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            pass
    _handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=(level or get_settings().OBJECT_VIEW_LOG_LEVEL).upper(),
        filter=_only_object_view,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
    )
    logger.debug(f"Added log handler (ID: {_handler_id})")
    return _handler_id


__all__ = ["setup_logging"]
