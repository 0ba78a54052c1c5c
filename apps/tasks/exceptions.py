"""Domain exceptions for tasks app."""


class TaskServiceError(Exception):
    """Base exception for task service errors."""
    pass


class TaskNotFoundError(TaskServiceError):
    """Raised when a task does not exist."""
    pass


class InvalidTaskError(TaskServiceError):
    """Raised when the task title is blank."""
    pass
