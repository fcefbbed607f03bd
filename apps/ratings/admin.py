from django.contrib import admin
from .models import Rating


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    """Admin interface for book ratings."""

    list_display = ['book', 'user', 'score', 'created_at']
    list_filter = ['score', 'created_at']
    search_fields = ['book__title', 'user__email']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['book', 'user']
    ordering = ['-created_at']
