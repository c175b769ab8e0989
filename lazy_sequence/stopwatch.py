import functools
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "block"


@dataclass
class Timing:
    label: str = DEFAULT_LABEL
    elapsed_ms: float = 0.0
    success: bool = True
    error: Optional[str] = None
    result: Any = None


@contextmanager
def stopwatch(label: str = DEFAULT_LABEL, echo: bool = False) -> Iterator[Timing]:
    """Time the enclosed block.

    The yielded ``Timing`` is filled in when the block exits. Failures are
    logged, recorded on the timing and re-raised.
    """
    timing = Timing(label=label)
    start_time = time.perf_counter()
    try:
        yield timing
    except Exception as e:
        timing.success = False
        timing.error = str(e)
        logger.error(f"❌ Exception in {label}: {type(e).__name__}: {e}")
        raise
    finally:
        timing.elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"⏱ {label} took {timing.elapsed_ms:.0f} ms")
        if echo:
            print(f"\nExecution took {timing.elapsed_ms:.0f} ms")


def time_call(block: Callable[..., Any], *args, label: Optional[str] = None,
              echo: bool = False, **kwargs) -> Timing:
    """Run ``block`` (a lambda or a function reference) under a stopwatch."""
    with stopwatch(label or _callable_name(block), echo=echo) as timing:
        timing.result = block(*args, **kwargs)
    return timing


def timed(label: Optional[str] = None):
    """Decorator to time and log every call of the wrapped function"""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with stopwatch(label or _callable_name(func)):
                return func(*args, **kwargs)
        return wrapper
    return decorator


def _callable_name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or getattr(func, "__name__", None) or repr(func)
