from rest_framework.routers import DefaultRouter
from django.urls import path, include
from .views import ActiveAdsView, AdBookingQueueViewSet, AdBookingViewSet, FbPostView

router = DefaultRouter()
router.register(r'ad-booking', AdBookingViewSet, basename="ad-booking")
router.register(r'ad-booking-queue', AdBookingQueueViewSet, basename="ad-booking-queue")

urlpatterns = [
    path('ads/active/', ActiveAdsView.as_view(), name="ads-active"),
    path('fb-post/', FbPostView.as_view(), name="fb-post"),
    path('', include(router.urls)),
]
