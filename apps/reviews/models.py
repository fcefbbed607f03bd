from django.db import models
import uuid


class Review(models.Model):
    """A reader's review of one or more books."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    contents = models.TextField()
    books = models.ManyToManyField('books.Book', related_name='reviews')
    published = models.BooleanField(default=False)
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    likers = models.ManyToManyField(
        'accounts.User',
        through='Like',
        related_name='liked_reviews',
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['author', 'created_at'], name='reviews_author_created_idx'),
            models.Index(fields=['published', 'created_at'], name='reviews_published_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.author.get_display_name()})"

    def is_visible_to(self, user) -> bool:
        """Drafts are visible to their author only."""
        return self.published or (user is not None and user.pk == self.author_id)


class Like(models.Model):
    """A user liking a review. At most one per (review, user) pair."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='likes')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='likes')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'review_likes'
        constraints = [
            models.UniqueConstraint(fields=['review', 'user'], name='unique_review_like'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} likes {self.review_id}"
