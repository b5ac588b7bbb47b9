from django.urls import path

from .views import ChatSearchView, DirectoryView

urlpatterns = [
    path("directory/", DirectoryView.as_view(), name="directory"),
    path("chat/", ChatSearchView.as_view(), name="chat-search"),
]
