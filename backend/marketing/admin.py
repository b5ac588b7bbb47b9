from django.contrib import admin

from .models import Ad, AdBooking
from .services import approve_booking


@admin.register(Ad)
class AdAdmin(admin.ModelAdmin):
    list_display = ("spot", "company", "active", "created_at")
    list_filter = ("active", "spot")


@admin.register(AdBooking)
class AdBookingAdmin(admin.ModelAdmin):
    list_display = ("spot", "company", "status", "created_at")
    list_filter = ("status", "spot")
    actions = ["approve_selected"]

    @admin.action(description="Approve selected bookings")
    def approve_selected(self, request, queryset):
        for booking in queryset.filter(status=AdBooking.Status.PENDING):
            approve_booking(booking)
