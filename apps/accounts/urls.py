from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('login/', views.login, name='login'),
    path('me/', views.get_current_user, name='current-user'),

    # User management (admin)
    path('users/', views.cooks, name='cook-list'),
    path('users/<uuid:pk>/', views.delete_user, name='user-delete'),
]
