from django.urls import path
from . import views

app_name = 'tasks'

urlpatterns = [
    path('', views.task_list, name='task-list'),
    path('<uuid:pk>/', views.task_delete, name='task-delete'),
    path('<uuid:pk>/toggle/', views.task_toggle, name='task-toggle'),
]
