from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
import uuid

MIN_SCORE = 1
MAX_SCORE = 5


class Rating(models.Model):
    """A reader's score for a book. One per (book, user) pair."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    book = models.ForeignKey('books.Book', on_delete=models.CASCADE, related_name='ratings')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='ratings')
    score = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_SCORE), MaxValueValidator(MAX_SCORE)]
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'book_ratings'
        constraints = [
            models.UniqueConstraint(fields=['book', 'user'], name='unique_book_rating'),
        ]
        indexes = [
            models.Index(fields=['book', 'created_at'], name='ratings_book_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} rated {self.book_id}: {self.score}"
