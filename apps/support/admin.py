from django.contrib import admin
from .models import Ticket, TicketMessage


class TicketMessageInline(admin.TabularInline):
    model = TicketMessage
    extra = 0
    readonly_fields = ['author', 'author_role', 'created_at']


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ['subject', 'salon', 'status', 'priority', 'updated_at']
    list_filter = ['status', 'priority']
    search_fields = ['subject', 'salon__name']
    inlines = [TicketMessageInline]
