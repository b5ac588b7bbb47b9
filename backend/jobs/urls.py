from rest_framework.routers import DefaultRouter
from django.urls import path, include
from .views import JobViewSet, NoticeboardView

router = DefaultRouter()
router.register(r'job', JobViewSet, basename="job")

urlpatterns = [
    path('noticeboard/', NoticeboardView.as_view(), name="noticeboard"),
    path('', include(router.urls)),
]
