from django.urls import path
from . import views

app_name = 'payroll'

urlpatterns = [
    path('', views.payment_list, name='payment-list'),
    path('mine/', views.my_payments, name='my-payments'),
    path('<uuid:pk>/', views.payment_delete, name='payment-delete'),
]
