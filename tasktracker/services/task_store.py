from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sqlmodel import Session, select

from tasktracker.models.task import Task, TaskStatus


class SortField(str, Enum):
    TITLE = "title"
    DUE_DATE = "dueDate"
    CREATED_AT = "createdAt"
    STATUS = "status"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


# ids are 32-bit INTEGER columns
MAX_ID = 2**31 - 1

_SORT_COLUMNS = {
    SortField.TITLE: Task.title,
    SortField.DUE_DATE: Task.due_date,
    SortField.CREATED_AT: Task.created_at,
    SortField.STATUS: Task.status,
}


@dataclass(frozen=True)
class TaskQuery:
    owner_id: int
    status: Optional[TaskStatus] = None
    sort_field: SortField = SortField.CREATED_AT
    sort_direction: SortDirection = SortDirection.DESC

    @classmethod
    def build(
        cls,
        owner_id: int,
        status: Optional[TaskStatus] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> "TaskQuery":
        """Apply the sort allow-list.

        No ``sort_by``, or one outside the allow-list, gives ``createdAt DESC``.
        An allowed ``sort_by`` sorts ascending unless ``sort_order`` is exactly
        ``"DESC"``.
        """
        allowed = {f.value: f for f in SortField}
        if not sort_by or sort_by not in allowed:
            return cls(owner_id=owner_id, status=status)

        direction = (
            SortDirection.DESC
            if sort_order == SortDirection.DESC.value
            else SortDirection.ASC
        )
        return cls(
            owner_id=owner_id,
            status=status,
            sort_field=allowed[sort_by],
            sort_direction=direction,
        )


class TaskStore:
    """Task persistence; every lookup is scoped to an owner."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, task: Task) -> Task:
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def list(self, query: TaskQuery) -> list[Task]:
        stmt = select(Task).where(Task.user_id == query.owner_id)
        if query.status is not None:
            stmt = stmt.where(Task.status == query.status)

        column = _SORT_COLUMNS[query.sort_field]
        if query.sort_direction is SortDirection.DESC:
            stmt = stmt.order_by(column.desc(), Task.id.desc())
        else:
            stmt = stmt.order_by(column.asc(), Task.id.asc())
        return list(self.db.exec(stmt).all())

    def get_for_owner(self, task_id: int, owner_id: int) -> Task | None:
        if not 1 <= task_id <= MAX_ID:
            return None
        stmt = select(Task).where(Task.id == task_id, Task.user_id == owner_id)
        return self.db.exec(stmt).first()

    def save(self, task: Task) -> Task:
        return self.add(task)

    def delete(self, task: Task) -> None:
        self.db.delete(task)
        self.db.commit()
