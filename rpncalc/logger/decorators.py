import functools
import time
from typing import Any, Callable, TypeVar, cast

from rpncalc.logger import session_logger

F = TypeVar("F", bound=Callable[..., Any])

_MAX_ARG_LENGTH = 1000


def _truncate(value: Any) -> str:
    s = str(value)
    if len(s) > _MAX_ARG_LENGTH:
        return s[:_MAX_ARG_LENGTH] + "...(truncated)"
    return s


def log_execution_time(func: F) -> F:
    """Decorator to log execution time and arguments of a function.

    Logs:
    - Start of execution with arguments (truncated if too large)
    - End of execution with duration
    - Exceptions if they occur
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        func_name = func.__name__

        safe_args = [_truncate(arg) for arg in args]
        safe_kwargs = {k: _truncate(v) for k, v in kwargs.items()}

        session_logger.debug(f"Starting {func_name}", args=safe_args, kwargs=safe_kwargs)

        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            duration = time.perf_counter() - start_time
            session_logger.error(
                f"Failed {func_name}",
                duration_seconds=round(duration, 4),
                error=str(e),
                error_type=type(e).__name__,
                success=False,
            )
            raise

        duration = time.perf_counter() - start_time
        session_logger.info(
            f"Completed {func_name}",
            duration_seconds=round(duration, 4),
            success=True,
        )
        return result

    return cast(F, wrapper)
