from django.urls import path
from . import views

app_name = 'schedules'

urlpatterns = [
    path('slots/', views.available_slots, name='available-slots'),
    path('professionals/', views.available_professionals, name='available-professionals'),
]
