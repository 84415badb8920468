"""
Authentication URL Configuration
"""
from django.urls import path
from . import views

urlpatterns = [
    path('login/', views.login, name='login'),
    path('register-salon/', views.register_salon, name='register-salon'),
    path('me/', views.get_current_account, name='current-account'),
    path('health/', views.health_check, name='health-check'),
]
