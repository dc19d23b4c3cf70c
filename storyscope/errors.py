"""Exceptions raised by StoryScope"""


class StoryScopeError(Exception):
    """Base class for all StoryScope errors"""


class InvalidInputError(StoryScopeError, ValueError):
    """Caller passed text that is not a string (usually None)"""


class WorkflowError(StoryScopeError, ValueError):
    """Stage graph cannot be resolved into an execution order"""


def require_text(value, name: str) -> str:
    """Return value unchanged if it is a string, otherwise fail fast"""
    if value is None:
        raise InvalidInputError(f"{name} must not be None")
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a string, got {type(value).__name__}")
    return value
