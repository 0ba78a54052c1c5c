import pytest
import uuid
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.tasks.models import DailyTask


@pytest.mark.django_db
class TestTaskList:
    """Tests for GET/POST /api/tasks/"""

    def test_list_today(self, admin_client, today_task, tomorrow_task):
        url = reverse('tasks:task-list')
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [task['title'] for task in response.data] == ['Limpiar plancha']

    def test_list_by_date(self, admin_client, today_task, tomorrow_task):
        url = reverse('tasks:task-list')
        response = admin_client.get(url, {'date': str(tomorrow_task.task_date)})

        assert [task['title'] for task in response.data] == ['Pedir refrescos']

    def test_create_defaults_to_today(self, admin_client):
        url = reverse('tasks:task-list')
        response = admin_client.post(url, {'title': '  Revisar gas '}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['title'] == 'Revisar gas'
        assert response.data['task_date'] == str(timezone.localdate())

    def test_create_blank_title(self, admin_client):
        url = reverse('tasks:task-list')
        response = admin_client.post(url, {'title': '   '}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert DailyTask.objects.count() == 0

    def test_cook_forbidden(self, cook_client):
        url = reverse('tasks:task-list')
        response = cook_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestTaskActions:
    """Tests for toggle and delete."""

    def test_toggle_twice(self, admin_client, today_task):
        url = reverse('tasks:task-toggle', kwargs={'pk': today_task.id})

        assert admin_client.post(url).data['is_completed'] is True
        assert admin_client.post(url).data['is_completed'] is False

    def test_toggle_missing(self, admin_client):
        url = reverse('tasks:task-toggle', kwargs={'pk': uuid.uuid4()})
        response = admin_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete(self, admin_client, today_task):
        url = reverse('tasks:task-delete', kwargs={'pk': today_task.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not DailyTask.objects.exists()

    def test_delete_missing(self, admin_client):
        url = reverse('tasks:task-delete', kwargs={'pk': uuid.uuid4()})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
