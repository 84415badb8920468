"""
Billing URL Configuration
"""
from django.urls import path
from . import views

app_name = 'billing'

urlpatterns = [
    path('license/', views.current_license_view, name='current-license'),
]
