from django.contrib import admin
from .models import Book


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):
    """Admin interface for Books."""

    list_display = ['title', 'authors', 'publisher', 'isbn', 'published_date']
    list_filter = ['publisher', 'published_date']
    search_fields = ['title', 'authors', 'isbn']
    readonly_fields = ['created_at']
