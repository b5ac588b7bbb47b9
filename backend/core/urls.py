from django.urls import path

from .views import healthz, VersionView, WhoAmIView, OptionsView, DeepHealthView

urlpatterns = [
    path('healthz/', healthz, name="healthz"),
    path('version/', VersionView.as_view(), name="version"),
    path('whoami/', WhoAmIView.as_view(), name="whoami"),
    path('options/', OptionsView.as_view(), name="options"),
    path('deep-health/', DeepHealthView.as_view(), name="deep-health"),
]
