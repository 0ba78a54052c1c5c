from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Movements feed
    path('movements/', views.movements, name='movements'),

    # Dashboard
    path('dashboard/', views.dashboard, name='dashboard'),

    # Spending
    path('summary/', views.spending_summary, name='spending-summary'),
    path('period/', views.period_breakdown, name='period-breakdown'),
]
