from django.contrib import admin
from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ['salon', 'date', 'type', 'category', 'amount', 'payment_method']
    list_filter = ['type', 'payment_method', 'date']
    search_fields = ['description', 'category', 'salon__name']
    readonly_fields = ['created_at', 'updated_at']
