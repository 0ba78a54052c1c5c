from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'kitchen'

router = DefaultRouter()
router.register(r'lists', views.KitchenListViewSet, basename='list')

urlpatterns = [
    # POST   /api/kitchen/lists/               - Submit list
    # GET    /api/kitchen/lists/mine/          - Own lists
    # GET    /api/kitchen/lists/recent/        - Own recent lists
    # GET    /api/kitchen/lists/pending/       - Pending review (admin)
    # POST   /api/kitchen/lists/{id}/approve/  - Approve (admin)
    # POST   /api/kitchen/lists/{id}/reject/   - Reject (admin)
    # POST   /api/kitchen/lists/{id}/hide/     - Hide own pending list (cook)
    # DELETE /api/kitchen/lists/{id}/          - Hard delete (admin)
    path('', include(router.urls)),
]
