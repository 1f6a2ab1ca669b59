"""API call logging for the standings dashboard data and service layers."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.path.join(os.path.dirname(__file__), "..", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        _logger = logging.getLogger("league_dashboard.api")
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _result_count(result: Any) -> int:
    """Number of items a call produced; standings payloads count their lists."""
    if isinstance(result, (list, tuple)):
        return len(result)
    standings = getattr(result, "standings", None)
    if isinstance(standings, list):
        return len(standings)
    return 1


_MAX_ARG_REPR = 80


def _short_repr(value: Any) -> str:
    text = repr(value)
    if len(text) > _MAX_ARG_REPR:
        return text[: _MAX_ARG_REPR - 3] + "..."
    return text


def _arg_summary(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # skip 'self'
    arg_parts = [_short_repr(a) for a in args[1:]]
    arg_parts += [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _logged(fn: F, prefix: str, count_items: bool) -> F:
    """Wrap *fn* so each call logs CALL, then OK or FAIL with elapsed time."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        call = f"{fn.__qualname__}({_arg_summary(args, kwargs)})"
        logger.info("%sCALL: %s", prefix, call)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "%sFAIL: %s -> %s: %s (%.3fs)",
                prefix, call, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise

        elapsed = time.monotonic() - start
        if count_items:
            logger.info("%sOK: %s -> %d items (%.3fs)", prefix, call, _result_count(result), elapsed)
        else:
            logger.info("%sOK: %s (%.3fs)", prefix, call, elapsed)
        return result

    return wrapper  # type: ignore[return-value]


def log_api_call(fn: F) -> F:
    """Decorator that logs data-layer method calls with their result size."""
    return _logged(fn, "", count_items=True)


def log_service_call(fn: F) -> F:
    """Decorator that logs service-layer method calls."""
    return _logged(fn, "SERVICE ", count_items=False)


def log_event(message: str, *args: Any, level: int = logging.INFO) -> None:
    """Write a free-form line to the API log (used by async code paths)."""
    _get_logger().log(level, message, *args)
