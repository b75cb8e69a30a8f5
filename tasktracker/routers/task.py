# tasktracker/routers/task.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from tasktracker.dependencies.auth import get_current_user
from tasktracker.dependencies.services import get_task_service
from tasktracker.models.task import TaskStatus
from tasktracker.models.user import User
from tasktracker.schemas.task import TaskCreate, TaskRead, TaskUpdate
from tasktracker.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreate,
    service: TaskService = Depends(get_task_service),
    user: User = Depends(get_current_user),
):
    return service.create(body.model_dump(), user.id)


@router.get("", response_model=list[TaskRead])
def get_all_tasks(
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    service: TaskService = Depends(get_task_service),
    user: User = Depends(get_current_user),
):
    return service.find_all(user.id, status=task_status, sort_by=sort_by, sort_order=sort_order)


@router.get("/{task_id}", response_model=TaskRead)
def get_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
    user: User = Depends(get_current_user),
):
    return service.find_one(task_id, user.id)


@router.put("/{task_id}", response_model=TaskRead)
def update_task(
    task_id: int,
    body: TaskUpdate,
    service: TaskService = Depends(get_task_service),
    user: User = Depends(get_current_user),
):
    return service.update(task_id, user.id, body.changes())


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
    user: User = Depends(get_current_user),
):
    service.remove(task_id, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
