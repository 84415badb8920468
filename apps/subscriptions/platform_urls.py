"""
Platform administration URL Configuration
"""
from django.urls import path
from . import views

app_name = 'platform'

urlpatterns = [
    path('salons/', views.platform_salons, name='platform-salons'),
    path('salons/<uuid:salon_id>/license/', views.platform_license, name='platform-license'),
    path('salons/<uuid:salon_id>/status/', views.platform_license_status, name='platform-license-status'),
    path('salons/<uuid:salon_id>/activate/', views.platform_activate, name='platform-activate'),
    path('stats/', views.platform_stats, name='platform-stats'),
    path('assistants/', views.platform_assistants, name='platform-assistants'),
    path('bulk-email/', views.platform_bulk_email, name='platform-bulk-email'),
]
