from django.contrib import admin
from .models import Professional


@admin.register(Professional)
class ProfessionalAdmin(admin.ModelAdmin):
    list_display = ['name', 'salon', 'specialty', 'is_active']
    search_fields = ['name', 'salon__name']
    list_filter = ['is_active']
