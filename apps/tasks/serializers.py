from rest_framework import serializers
from .models import DailyTask


class TaskDateQuerySerializer(serializers.Serializer):
    """Validate the optional ``date`` query parameter."""

    date = serializers.DateField(required=False)


class DailyTaskCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    task_date = serializers.DateField(required=False)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError('El título es obligatorio')
        return value.strip()


class DailyTaskSerializer(serializers.ModelSerializer):
    class Meta:
        model = DailyTask
        fields = ['id', 'title', 'task_date', 'is_completed', 'created_at']
        read_only_fields = fields
