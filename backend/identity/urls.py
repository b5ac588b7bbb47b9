from django.urls import path

from .views import RegisterView, GoogleLoginView, MeView

urlpatterns = [
    path("register/", RegisterView.as_view(), name="register"),
    path("google/", GoogleLoginView.as_view(), name="google_login"),
    path("me/", MeView.as_view(), name="me"),
]
