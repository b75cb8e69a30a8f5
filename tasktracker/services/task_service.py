from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from tasktracker.core.errors import Forbidden, NotFound
from tasktracker.models.task import Task, TaskStatus
from tasktracker.services.task_store import TaskQuery, TaskStore

log = logging.getLogger(__name__)


class TaskService:
    """Per-owner task CRUD."""

    def __init__(self, store: TaskStore):
        self.store = store

    def create(self, fields: Mapping[str, Any], owner_id: int) -> Task:
        data = {k: v for k, v in fields.items() if k != "user_id"}
        task = Task(**data, user_id=owner_id)
        task = self.store.add(task)
        log.info("task created id=%s user_id=%s", task.id, owner_id)
        return task

    def find_all(
        self,
        owner_id: int,
        status: Optional[TaskStatus] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> list[Task]:
        query = TaskQuery.build(owner_id, status=status, sort_by=sort_by, sort_order=sort_order)
        return self.store.list(query)

    def find_one(self, task_id: int, owner_id: int) -> Task:
        # another owner's task looks exactly like a missing one
        task = self.store.get_for_owner(task_id, owner_id)
        if task is None:
            raise NotFound("Task not found")
        return task

    def update(self, task_id: int, owner_id: int, changes: Mapping[str, Any]) -> Task:
        task = self.find_one(task_id, owner_id)
        # unreachable while find_one is owner-scoped
        if task.user_id != owner_id:
            raise Forbidden("You can only update your own tasks")

        for key, value in changes.items():
            if key in ("id", "user_id", "created_at", "updated_at"):
                continue
            setattr(task, key, value)
        task.updated_at = datetime.utcnow()

        task = self.store.save(task)
        log.info("task updated id=%s fields=%s", task.id, sorted(changes))
        return task

    def remove(self, task_id: int, owner_id: int) -> None:
        task = self.find_one(task_id, owner_id)
        if task.user_id != owner_id:
            raise Forbidden("You can only delete your own tasks")

        self.store.delete(task)
        log.info("task deleted id=%s user_id=%s", task_id, owner_id)
