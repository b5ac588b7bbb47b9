from django.contrib import admin

from .models import Job


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ("title", "job_type", "region", "user", "posted_at")
    list_filter = ("job_type",)
    search_fields = ("title", "description")
