from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'night_sales'

router = SimpleRouter()
router.register(r'', views.NightSaleViewSet, basename='sale')

urlpatterns = [
    # POST   /api/night-sales/              - Report cash (cook)
    # GET    /api/night-sales/mine/         - Own history (cook)
    # GET    /api/night-sales/overview/     - Pending + accepted last week (admin)
    # POST   /api/night-sales/{id}/accept/  - Accept, credits capital (admin)
    # POST   /api/night-sales/{id}/reject/  - Reject (admin)
    # DELETE /api/night-sales/{id}/         - Delete, reverses credit if accepted (admin)
    path('', include(router.urls)),
]
