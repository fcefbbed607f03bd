from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reviews'

router = DefaultRouter()
router.register(r'', views.ReviewViewSet, basename='review')

urlpatterns = [
    # GET    /api/reviews/                - List reviews (at least one filter)
    # POST   /api/reviews/                - Create review
    # GET    /api/reviews/search/         - Search reviews
    # GET    /api/reviews/{id}/           - Get review
    # PATCH  /api/reviews/{id}/           - Update review
    # DELETE /api/reviews/{id}/           - Delete review
    # POST   /api/reviews/{id}/likes/     - Like review
    # DELETE /api/reviews/{id}/likes/     - Unlike review
    path('', include(router.urls)),
]
