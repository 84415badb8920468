from django.contrib import admin
from .models import Salon


@admin.register(Salon)
class SalonAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'email', 'is_active', 'created_at']
    search_fields = ['name', 'slug', 'email']
    list_filter = ['is_active', 'created_at']
    readonly_fields = ['slug', 'created_at', 'updated_at']
