from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django.utils import timezone
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdminRole
from .exceptions import TaskNotFoundError, InvalidTaskError
from .serializers import (
    TaskDateQuerySerializer,
    DailyTaskCreateSerializer,
    DailyTaskSerializer,
)
from .services import tasks_for_date, create_task, toggle_task, delete_task


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('date', OpenApiTypes.DATE, description='Task date (YYYY-MM-DD), default today'),
    ],
    responses={200: DailyTaskSerializer(many=True)},
    tags=['tasks'],
)
@extend_schema(
    methods=['POST'],
    request=DailyTaskCreateSerializer,
    responses={201: DailyTaskSerializer},
    tags=['tasks'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def task_list(request):
    """List the tasks of a day or add one."""
    if request.method == 'GET':
        query_serializer = TaskDateQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        task_date = query_serializer.validated_data.get('date') or timezone.localdate()
        return Response(DailyTaskSerializer(tasks_for_date(task_date=task_date), many=True).data)

    serializer = DailyTaskCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        task = create_task(**serializer.validated_data)
    except InvalidTaskError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(DailyTaskSerializer(task).data, status=status.HTTP_201_CREATED)


@extend_schema(request=None, responses={200: DailyTaskSerializer}, tags=['tasks'])
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def task_toggle(request, pk):
    """Flip completion of a task."""
    try:
        task = toggle_task(task_id=pk)
    except TaskNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    return Response(DailyTaskSerializer(task).data)


@extend_schema(responses={204: None}, tags=['tasks'])
@api_view(['DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole])
def task_delete(request, pk):
    try:
        delete_task(task_id=pk)
    except TaskNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    return Response(status=status.HTTP_204_NO_CONTENT)
