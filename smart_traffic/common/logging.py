import logging
import time
from functools import wraps
from typing import Callable, Union

# Ticks run once a second; anything past this is worth a warning
DEFAULT_TICK_BUDGET_SECONDS = 0.01

def setup_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Sets up a controller logger with the standard format.
    Level may be given as a number or a name ("DEBUG", "warning", ...).
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger

def log_tick_time(logger: logging.Logger, budget_seconds: float = DEFAULT_TICK_BUDGET_SECONDS):
    """
    Decorator timing a control step.

    Calls slower than budget_seconds are logged at WARNING, the rest at DEBUG.
    Failures are logged with traceback and re-raised.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} failed: {e}", exc_info=True)
                raise

            elapsed = time.perf_counter() - start
            if elapsed > budget_seconds:
                logger.warning(
                    f"{func.__name__} took {elapsed:.4f}s (budget {budget_seconds:.4f}s)"
                )
            else:
                logger.debug(f"{func.__name__} executed in {elapsed:.4f}s")
            return result
        return wrapper
    return decorator
