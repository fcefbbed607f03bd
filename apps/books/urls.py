from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'books'

router = DefaultRouter()
router.register(r'', views.BookViewSet, basename='book')

urlpatterns = [
    # GET    /api/books/          - List books
    # GET    /api/books/{id}/     - Get book
    path('', include(router.urls)),
]
