from django.contrib import admin
from .models import Curation


@admin.register(Curation)
class CurationAdmin(admin.ModelAdmin):
    """Admin interface for Curations."""

    list_display = ['title', 'curator', 'review_count', 'created_at']
    search_fields = ['title', 'contents', 'curator__email']
    filter_horizontal = ['reviews']
    readonly_fields = ['created_at', 'updated_at']

    def review_count(self, obj):
        return obj.reviews.count()
    review_count.short_description = 'Reviews'
