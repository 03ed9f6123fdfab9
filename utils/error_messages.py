"""
User-friendly error messages for MapMeasure.

Maps exception types to helpful error messages for the status display.
"""

from core.exceptions import (
    MapMeasureError,
    InvalidGeometryState,
    IncompleteGeometry,
    ProjectionFailure,
    SessionDisposedError
)


# Error message templates
ERROR_MESSAGES = {
    InvalidGeometryState: {
        "title": "Invalid Drawing State",
        "message": "The vertex could not be added to the current drawing.",
        "suggestions": [
            "A point only takes a single click",
            "Finish or discard the current drawing before starting a new one"
        ]
    },

    IncompleteGeometry: {
        "title": "Drawing Not Finished",
        "message": "The drawing does not have enough vertices yet.",
        "suggestions": [
            "Lines require at least 2 points",
            "Polygons require at least 3 distinct points"
        ]
    },

    ProjectionFailure: {
        "title": "Measurement Unavailable",
        "message": "The drawing could not be converted to geographic coordinates.",
        "suggestions": [
            "Keep the drawing inside the map extent",
            "Zoom in and draw the shape again"
        ]
    },

    SessionDisposedError: {
        "title": "Drawing Closed",
        "message": "The drawing tool has been shut down.",
        "suggestions": [
            "Reload the map to start drawing again"
        ]
    },

    MapMeasureError: {
        "title": "Drawing Error",
        "message": "The drawing operation failed.",
        "suggestions": [
            "Try the operation again"
        ]
    },

    # Generic fallback
    Exception: {
        "title": "Unexpected Error",
        "message": "An unexpected error occurred.",
        "suggestions": [
            "Try the operation again",
            "If the problem persists, check the application log"
        ]
    }
}


def get_error_message(exception: Exception) -> dict:
    """
    Get user-friendly error message for an exception.

    Args:
        exception: The exception that occurred

    Returns:
        Dictionary with title, message, and suggestions
    """
    # Most specific registered class first
    for exc_class in type(exception).__mro__:
        if exc_class in ERROR_MESSAGES:
            error_info = dict(ERROR_MESSAGES[exc_class])
            break
    else:
        error_info = dict(ERROR_MESSAGES[Exception])

    error_info['suggestions'] = list(error_info['suggestions'])

    if getattr(exception, 'details', None):
        error_info['details'] = exception.details
    elif str(exception):
        error_info['details'] = str(exception)

    return error_info


def format_error_message(exception: Exception) -> str:
    """
    Format error message as a string for display.

    Args:
        exception: The exception that occurred

    Returns:
        Formatted error message string
    """
    error_info = get_error_message(exception)

    message = f"{error_info['message']}\n"

    if 'details' in error_info:
        message += f"\nDetails: {error_info['details']}\n"

    if error_info['suggestions']:
        message += "\nSuggestions:\n"
        for suggestion in error_info['suggestions']:
            message += f"• {suggestion}\n"

    return message.strip()
