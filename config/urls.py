"""
URL configuration for the salon management API.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # Public booking pages (not gated)
    path('api/v1/public/', include('apps.salons.public_urls')),

    # API v1 endpoints
    path('api/v1/auth/', include('apps.authentication.urls')),
    path('api/v1/users/', include('apps.authentication.user_urls')),
    path('api/v1/salon/', include('apps.salons.urls')),
    path('api/v1/clients/', include('apps.clients.urls')),
    path('api/v1/services/', include('apps.services.urls')),
    path('api/v1/staff/', include('apps.staff.urls')),
    path('api/v1/appointments/', include('apps.bookings.urls')),
    path('api/v1/schedules/', include('apps.schedules.urls')),
    path('api/v1/finance/', include('apps.finance.urls')),
    path('api/v1/billing/', include('apps.subscriptions.urls')),
    path('api/v1/support/', include('apps.support.urls')),

    # Platform administration
    path('api/v1/platform/', include('apps.subscriptions.platform_urls')),
]

# Serve media files in development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
