from django.contrib import admin

from .models import Lead


@admin.register(Lead)
class LeadAdmin(admin.ModelAdmin):
    list_display = ("query", "company", "timestamp")
    search_fields = ("query",)
    list_filter = ("timestamp",)
