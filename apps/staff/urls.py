from rest_framework.routers import DefaultRouter
from . import views

app_name = 'staff'

router = DefaultRouter()
router.register(r'', views.ProfessionalViewSet, basename='professional')

urlpatterns = router.urls
