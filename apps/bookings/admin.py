from django.contrib import admin
from .models import Appointment


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ['client', 'salon', 'professional', 'date', 'start_time', 'end_time', 'status', 'source']
    list_filter = ['status', 'source', 'date']
    search_fields = ['client__name', 'client__loyalty_id', 'salon__name']
    readonly_fields = ['created_at', 'updated_at']
