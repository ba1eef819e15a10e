"""Timing and structured log events around generative-model calls."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from wearorithm_app.logging_config import ensure_correlation_id, get_logger, log_event

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _mode(args: tuple) -> str:
    owner = args[0] if args else None
    return "gemini" if getattr(owner, "ai_enabled", False) else "mock"


def instrument_call(name: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log ``gateway_call_*`` events with duration for a gateway method.

    The wrapped method's owner decides the ``mode`` field (``gemini`` when it
    reports ``ai_enabled``, else ``mock``). Exceptions are logged as a WARNING
    naming the error type and re-raised unchanged; the traceback belongs to
    the owner's own failure log.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            context = {"call": name, "mode": _mode(args), "correlation_id": ensure_correlation_id()}
            started = time.perf_counter()
            log_event(LOGGER, logging.DEBUG, "gateway_call_started", **context)
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                log_event(
                    LOGGER,
                    logging.WARNING,
                    "gateway_call_aborted",
                    error=type(exc).__name__,
                    elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
                    **context,
                )
                raise
            log_event(
                LOGGER,
                logging.INFO,
                "gateway_call_finished",
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
                **context,
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_call"]
