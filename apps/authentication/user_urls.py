"""
Salon user management URL Configuration
"""
from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    path('', views.users, name='users'),
    path('<uuid:account_id>/', views.user_detail, name='user-detail'),
]
