from django.db import models
import uuid


class DailyTask(models.Model):
    """Simple to-do item for one day."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    task_date = models.DateField()
    is_completed = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'tasks'
        indexes = [
            models.Index(fields=['task_date'], name='tasks_date_idx'),
        ]
        ordering = ['task_date', 'created_at']

    def __str__(self):
        return f"{self.title} ({self.task_date})"
