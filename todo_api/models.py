"""Pydantic models for the Todo API.

Field names on the wire are camelCase (``dueDate``, ``isCompleted``); the
Python attributes are snake_case and either form is accepted on input.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """A todo item held by the task store."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Caller-supplied identifier")
    name: str = Field(..., description="The todo label")
    due_date: datetime = Field(..., alias="dueDate", description="When the todo is due")
    is_completed: bool = Field(
        default=False,
        alias="isCompleted",
        description="Whether the todo has been completed",
    )


class HealthResponse(BaseModel):
    """Liveness report with the number of todos currently held in memory."""

    status: str = "ok"
    version: str
    todos: int = Field(..., ge=0, description="Todos in the store")
