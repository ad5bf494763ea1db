"""
HTTP handler instrumentation.

    @app.get("/status")
    @track_http_latency("status")
    async def status(request: Request):
        ...

Each call is timed and recorded, in seconds, into a histogram labelled with
the request method and the handler name.
"""

import functools
import inspect
import time
from typing import Any, Callable, Optional

from prometheus_client import Histogram

HTTP_LATENCY = Histogram(
    "http_handler_latency_seconds",
    "Latency of HTTP request handlers",
    labelnames=("method", "handler"),
)


def _request_method(args: tuple, kwargs: dict) -> str:
    """Find the request among handler arguments and return its HTTP method."""
    request = kwargs.get("request")
    if request is None:
        request = next((a for a in args if hasattr(a, "method")), None)
    return getattr(request, "method", None) or "UNKNOWN"


def track_http_latency(name: str, histogram: Optional[Histogram] = None) -> Callable:
    """
    Decorator recording handler latency.

    Args:
        name: Handler name used as the "handler" label
        histogram: Histogram with ("method", "handler") labels; defaults to
            http_handler_latency_seconds in the default registry

    Works for sync and async handlers. The latency is recorded even when the
    handler raises; the exception is not caught.
    """
    hist = histogram if histogram is not None else HTTP_LATENCY

    def _record(method: str, start: int) -> None:
        elapsed = time.perf_counter_ns() - start
        hist.labels(method=method, handler=name).observe(elapsed / 1e9)

    def decorator(handler: Callable) -> Callable:
        if inspect.iscoroutinefunction(handler):
            @functools.wraps(handler)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                start = time.perf_counter_ns()
                try:
                    return await handler(*args, **kwargs)
                finally:
                    _record(_request_method(args, kwargs), start)
            return async_wrapper

        @functools.wraps(handler)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start = time.perf_counter_ns()
            try:
                return handler(*args, **kwargs)
            finally:
                _record(_request_method(args, kwargs), start)
        return wrapper

    return decorator
