from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import DashboardView, LeadViewSet, SummaryView

router = DefaultRouter()
router.register(r'lead', LeadViewSet, basename="lead")

urlpatterns = [
    path('summary/', SummaryView.as_view(), name="analytics-summary"),
    path('dashboard/', DashboardView.as_view(), name="dashboard"),
    path('', include(router.urls)),
]
