"""Centralized SQLModel imports to ensure metadata is populated."""

from tasktracker.models import task as _task  # noqa: F401
from tasktracker.models import user as _user  # noqa: F401
