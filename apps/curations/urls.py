from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'curations'

router = DefaultRouter()
router.register(r'', views.CurationViewSet, basename='curation')

urlpatterns = [
    # GET    /api/curations/          - List curations
    # GET    /api/curations/{id}/     - Get curation
    path('', include(router.urls)),
]
