"""
Authentication admin configuration
"""
from django.contrib import admin
from .models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    """
    Admin configuration for Account model
    """
    list_display = ['email', 'name', 'role', 'salon', 'is_active', 'created_at']
    list_filter = ['role', 'is_active', 'created_at']
    search_fields = ['email', 'name', 'salon__name']
    ordering = ['-created_at']

    fieldsets = (
        ('Account', {
            'fields': ('email', 'name')
        }),
        ('Role & Salon', {
            'fields': ('role', 'salon', 'created_by', 'is_active', 'is_staff')
        }),
        ('Timestamps', {
            'fields': ('last_login', 'created_at', 'updated_at')
        }),
    )

    readonly_fields = ['email', 'created_by', 'last_login', 'created_at', 'updated_at']
