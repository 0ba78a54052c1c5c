"""Daily task operations."""

import logging
from datetime import date
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from .exceptions import TaskNotFoundError, InvalidTaskError
from .models import DailyTask

logger = logging.getLogger(__name__)


def tasks_for_date(*, task_date: date) -> QuerySet:
    """Tasks of one day in creation order."""
    return DailyTask.objects.filter(task_date=task_date).order_by('created_at')


def create_task(*, title: str, task_date: date = None) -> DailyTask:
    """
    Add a task to a day (today by default).

    Raises:
        InvalidTaskError: If the title is blank
    """
    title = (title or '').strip()
    if not title:
        raise InvalidTaskError("El título es obligatorio")

    return DailyTask.objects.create(
        title=title,
        task_date=task_date or timezone.localdate(),
    )


@transaction.atomic
def toggle_task(*, task_id: UUID) -> DailyTask:
    """Flip completion of a task."""
    try:
        task = DailyTask.objects.select_for_update().get(id=task_id)
    except DailyTask.DoesNotExist:
        raise TaskNotFoundError(f"Task {task_id} not found")

    task.is_completed = not task.is_completed
    task.save(update_fields=['is_completed'])
    return task


def delete_task(*, task_id: UUID) -> None:
    deleted, _ = DailyTask.objects.filter(id=task_id).delete()
    if not deleted:
        raise TaskNotFoundError(f"Task {task_id} not found")
    logger.info("Task %s deleted", task_id)
