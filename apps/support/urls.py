"""
Support URL Configuration
"""
from django.urls import path
from . import views

app_name = 'support'

urlpatterns = [
    path('tickets/', views.tickets, name='tickets'),
    path('tickets/<uuid:ticket_id>/', views.ticket_detail, name='ticket-detail'),
    path('tickets/<uuid:ticket_id>/messages/', views.ticket_messages, name='ticket-messages'),
    path('tickets/<uuid:ticket_id>/status/', views.ticket_status, name='ticket-status'),
]
