from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'purchases'

# Router for ViewSets
router = DefaultRouter()
router.register(r'items', views.PurchaseItemViewSet, basename='item')

urlpatterns = [
    # Shopping list routes
    # GET    /api/purchases/items/?date=       - Items of a date with totals
    # POST   /api/purchases/items/             - Add item
    # PATCH  /api/purchases/items/{id}/        - Rename / reprice
    # DELETE /api/purchases/items/{id}/        - Delete item
    # POST   /api/purchases/items/{id}/toggle/ - Flip completion
    # GET    /api/purchases/items/history/     - Grouped by date

    # Include router URLs
    path('', include(router.urls)),
]
