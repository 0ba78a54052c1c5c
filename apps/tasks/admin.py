from django.contrib import admin
from .models import DailyTask


@admin.register(DailyTask)
class DailyTaskAdmin(admin.ModelAdmin):
    list_display = ['title', 'task_date', 'is_completed', 'created_at']
    list_filter = ['is_completed', 'task_date']
    search_fields = ['title']
