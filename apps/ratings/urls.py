from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'ratings'

router = DefaultRouter()
router.register(r'', views.RatingViewSet, basename='rating')

urlpatterns = [
    # GET    /api/ratings/?book={id}          - List ratings of a book
    # GET    /api/ratings/summary/?book={id}  - Count and average score
    # POST   /api/ratings/                    - Rate a book
    # PATCH  /api/ratings/{id}/               - Change own rating
    # DELETE /api/ratings/{id}/               - Remove own rating
    path('', include(router.urls)),
]
