from django.urls import path
from . import views

app_name = 'capital'

urlpatterns = [
    # GET /api/capital/  - Current balance
    # PUT /api/capital/  - Manual correction (admin)
    path('', views.capital_detail, name='capital-detail'),
]
