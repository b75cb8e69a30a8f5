from datetime import date, datetime, time, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from tasktracker.models.task import TaskStatus


def _coerce_due_date(v: Any) -> Any:
    """Accept a bare ISO date and store everything as naive UTC."""
    if isinstance(v, str) and len(v) == 10:
        try:
            v = datetime.combine(date.fromisoformat(v), time())
        except ValueError:
            return v
    if isinstance(v, datetime) and v.tzinfo is not None:
        v = v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


class _TaskFields(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _TaskInput(_TaskFields):
    model_config = ConfigDict(extra="forbid")


class TaskCreate(_TaskInput):
    title: str = Field(min_length=1, max_length=255)
    description: str
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_date(cls, v: Any) -> Any:
        return _coerce_due_date(v)

    @field_validator("due_date")
    @classmethod
    def _due_date_naive(cls, v: datetime) -> datetime:
        return _coerce_due_date(v)


class TaskUpdate(_TaskInput):
    """Partial update; only fields present in the payload are applied."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_date(cls, v: Any) -> Any:
        return _coerce_due_date(v)

    @field_validator("due_date")
    @classmethod
    def _due_date_naive(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _coerce_due_date(v)

    @field_validator("title", "description", "status", "due_date")
    @classmethod
    def _not_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("may not be null")
        return v

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class TaskRead(_TaskFields):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    status: TaskStatus
    due_date: datetime
    user_id: int
    created_at: datetime
    updated_at: datetime
