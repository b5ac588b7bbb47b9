from django.contrib import admin

from .models import Company, QuoteRequest, Review


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ("name", "abn", "region", "subscription_tier", "verified", "created_at")
    list_filter = ("verified", "subscription_tier", "region")
    search_fields = ("name", "abn", "user__email")
    actions = ["mark_verified"]

    @admin.action(description="Approve selected companies")
    def mark_verified(self, request, queryset):
        queryset.update(verified=True)


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("company", "user", "rating", "created_at")
    list_filter = ("rating",)


@admin.register(QuoteRequest)
class QuoteRequestAdmin(admin.ModelAdmin):
    list_display = ("company", "user", "status", "created_at")
    list_filter = ("status",)
