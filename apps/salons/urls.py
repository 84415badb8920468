from django.urls import path
from . import views

app_name = 'salons'

urlpatterns = [
    path('me/', views.salon_settings, name='salon-settings'),
]
