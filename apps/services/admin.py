from django.contrib import admin
from .models import Service


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ['name', 'salon', 'price', 'duration_minutes', 'is_active']
    search_fields = ['name', 'salon__name']
    list_filter = ['is_active']
