from django.contrib import admin
from django.apps import apps
from django.contrib.admin.sites import AlreadyRegistered

# favourites, recent views and saved searches need no custom admin
app_config = apps.get_app_config('seekers')
for model in app_config.get_models():
    try:
        admin.site.register(model)
    except AlreadyRegistered:
        pass
