from django.contrib import admin
from .models import License


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    list_display = ['salon', 'plan', 'status', 'valid_until', 'booking_limit', 'report_level']
    list_filter = ['plan', 'status', 'has_waiting_list', 'report_level']
    search_fields = ['salon__name', 'key']
    readonly_fields = ['key', 'created_at', 'updated_at']
