from django.contrib import admin
from .models import Client


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ['name', 'loyalty_id', 'phone', 'salon', 'created_at']
    search_fields = ['name', 'loyalty_id', 'phone', 'email']
    readonly_fields = ['created_at', 'updated_at']
