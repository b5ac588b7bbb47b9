from rest_framework.routers import DefaultRouter
from django.urls import path, include
from .views import FavouriteViewSet, RecentViewViewSet, SavedSearchViewSet

router = DefaultRouter()
router.register(r'favourite', FavouriteViewSet, basename="favourite")
router.register(r'recent-view', RecentViewViewSet, basename="recent-view")
router.register(r'saved-search', SavedSearchViewSet, basename="saved-search")

urlpatterns = [path('', include(router.urls))]
