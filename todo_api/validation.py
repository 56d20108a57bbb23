"""Business rules applied to todos before they are added to the store."""

from datetime import UTC, datetime

from todo_api.models import Todo

PAST_DUE_DATE = "Cannot have due date in the past."
ALREADY_COMPLETED = "Cannot add completed todo."


class TodoApiError(Exception):
    """Base class for errors raised by the Todo API."""


class TodoValidationError(TodoApiError):
    """Raised when a new todo breaks one or more creation rules."""

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(f"Invalid todo: {', '.join(errors)}")
        self.errors = errors


def as_aware(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; aware ones are returned untouched.

    Aware values are never converted, so dates at the edges of the datetime
    range can still be compared.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def validate_new_todo(todo: Todo, now: datetime | None = None) -> dict[str, list[str]]:
    """Return field errors for a todo about to be created, keyed by JSON field name.

    An empty mapping means the todo may be added.
    """
    now = as_aware(now) if now is not None else datetime.now(UTC)
    errors: dict[str, list[str]] = {}
    if as_aware(todo.due_date) < now:
        errors["dueDate"] = [PAST_DUE_DATE]
    if todo.is_completed:
        errors["isCompleted"] = [ALREADY_COMPLETED]
    return errors
