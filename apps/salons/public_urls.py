"""
Public (unauthenticated) endpoints used by the online booking pages
"""
from django.urls import path

from apps.bookings.views import public_book_appointment
from apps.clients.views import client_lookup
from apps.schedules.views import public_available_professionals, public_available_slots
from . import views

app_name = 'public'

urlpatterns = [
    path('salons/', views.public_salon_list, name='salon-list'),
    path('salons/<uuid:salon_id>/', views.public_salon_detail, name='salon-detail'),
    path('salons/<uuid:salon_id>/slots/', public_available_slots, name='salon-slots'),
    path('salons/<uuid:salon_id>/professionals/', public_available_professionals, name='salon-professionals'),
    path('search-services/', views.public_search_services, name='search-services'),
    path('client-lookup/', client_lookup, name='client-lookup'),
    path('book-appointment/', public_book_appointment, name='book-appointment'),
]
