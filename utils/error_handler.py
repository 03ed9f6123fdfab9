"""
Error handling utilities for MapMeasure.

Provides decorators and functions for consistent error handling,
logging, and user feedback.
"""

import functools
from typing import Callable, Type
from utils.logger import get_logger, log_exception
from utils.error_messages import get_error_message
from core.exceptions import MapMeasureError


logger = get_logger(__name__)


def handle_errors(
    error_type: Type[Exception] = Exception,
    user_message: str = None,
    log_level: str = "ERROR",
    reraise: bool = False,
    default_return=None
):
    """
    Decorator for consistent error handling.

    Args:
        error_type: Type of exception to catch (default: Exception for all)
        user_message: Custom user message (overrides default)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        reraise: Whether to re-raise the exception after handling
        default_return: Value to return if exception occurs and not reraising

    Example:
        @handle_errors(
            error_type=ProjectionFailure,
            user_message="Could not convert the coordinates",
            log_level="ERROR"
        )
        def to_geographic(...):
            # function code
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except error_type as e:
                log_func = getattr(logger, log_level.lower(), logger.error)
                log_func(
                    f"Error in {func.__name__}: {type(e).__name__}: {str(e)}",
                    exc_info=True
                )

                error_info = get_error_message(e)
                if user_message:
                    error_info['message'] = user_message

                # Attach error info to exception for UI to use
                if isinstance(e, MapMeasureError):
                    e.user_message = error_info['message']
                    e.suggestions = error_info.get('suggestions', [])

                if reraise:
                    raise

                return default_return

        return wrapper
    return decorator


def log_and_report(exception: Exception, context: str = None) -> dict:
    """
    Log an error and prepare it for display by the host.

    Args:
        exception: The exception that occurred
        context: Additional context about where the error occurred

    Returns:
        Dictionary with title, message, suggestions (and details)
    """
    log_exception(logger, exception, context)
    return get_error_message(exception)


def safe_execute(func: Callable, *args, **kwargs) -> tuple:
    """
    Safely execute a function and return (success, result_or_error).

    Args:
        func: Function to execute
        *args: Positional arguments for function
        **kwargs: Keyword arguments for function

    Returns:
        Tuple of (success: bool, result or exception)

    Example:
        success, result = safe_execute(surface.clear_features)
        if not success:
            logger.warning(f"Surface not cleared: {result}")
    """
    try:
        result = func(*args, **kwargs)
        return True, result
    except Exception as e:
        logger.error(f"Error executing {func.__name__}: {str(e)}", exc_info=True)
        return False, e
