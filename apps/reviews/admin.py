from django.contrib import admin
from django.db.models import Count
from .models import Review, Like


class LikeInline(admin.TabularInline):
    """Inline admin for likes on a review."""
    model = Like
    extra = 0
    fields = ['user', 'created_at']
    readonly_fields = ['created_at']
    raw_id_fields = ['user']


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = [
        'title',
        'author',
        'published',
        'like_count',
        'created_at'
    ]
    list_filter = [
        'published',
        'created_at',
    ]
    search_fields = [
        'title',
        'contents',
        'author__email',
        'books__title',
    ]
    readonly_fields = ['created_at', 'updated_at']
    filter_horizontal = ['books']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    inlines = [LikeInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('title', 'author', 'books', 'published')
        }),
        ('Review Content', {
            'fields': ('contents',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def like_count(self, obj):
        """Show how many users liked the review."""
        return obj.like_total
    like_count.short_description = 'Likes'
    like_count.admin_order_field = 'like_total'

    def get_queryset(self, request):
        """Optimize query with select_related and a like count."""
        qs = super().get_queryset(request)
        return qs.select_related('author').annotate(like_total=Count('likes'))

    actions = ['publish_reviews', 'unpublish_reviews']

    @admin.action(description='Publish selected reviews')
    def publish_reviews(self, request, queryset):
        count = queryset.update(published=True)
        self.message_user(request, f"Published {count} review(s).")

    @admin.action(description='Unpublish selected reviews')
    def unpublish_reviews(self, request, queryset):
        count = queryset.update(published=False)
        self.message_user(request, f"Unpublished {count} review(s).")


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    """Admin interface for Likes."""

    list_display = ['user', 'review', 'created_at']
    search_fields = ['user__email', 'review__title']
    readonly_fields = ['created_at']
    raw_id_fields = ['user', 'review']
    date_hierarchy = 'created_at'
