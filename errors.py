"""Errors raised by the task service and the method dispatcher.

Each error carries a machine-readable ``code``, a human-readable
``message`` and the HTTP status the API answers with.
"""

from typing import Optional


class TaskError(Exception):
    """Base class for task API errors"""

    code = "error"
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class NotAuthorized(TaskError):
    """Caller is not logged in, or does not own the task"""

    code = "not-authorized"
    status_code = 403
    default_message = "Not authorized"


class TaskNotFound(TaskError):
    code = "not-found"
    status_code = 404
    default_message = "Task not found"


class MethodNotFound(TaskError):
    code = "method-not-found"
    status_code = 404
    default_message = "Method not found"


class BadRequest(TaskError):
    code = "bad-request"
    status_code = 400
    default_message = "Invalid method parameters"
