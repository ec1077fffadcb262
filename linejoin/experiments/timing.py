import time
from typing import Any, Callable, Tuple


def time_call(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Tuple[Any, float]:
    """Call func and return (result, elapsed microseconds)."""
    start = time.perf_counter_ns()
    result = func(*args, **kwargs)
    elapsed_us = (time.perf_counter_ns() - start) / 1000.0
    return result, elapsed_us
