from rest_framework.routers import DefaultRouter
from django.urls import path, include
from .views import (
    CompanyViewSet, ReviewViewSet, QuoteRequestViewSet,
    ReceivedReviewViewSet, ReceivedQuoteViewSet, PendingCompanyViewSet,
)

router = DefaultRouter()
router.register(r'company', CompanyViewSet, basename="company")
router.register(r'review', ReviewViewSet, basename="review")
router.register(r'quote', QuoteRequestViewSet, basename="quote")
router.register(r'received-reviews', ReceivedReviewViewSet, basename="received-review")
router.register(r'received-quotes', ReceivedQuoteViewSet, basename="received-quote")
router.register(r'pending', PendingCompanyViewSet, basename="pending-company")

urlpatterns = [path('', include(router.urls))]
