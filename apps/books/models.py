from django.db import models
import uuid


class Book(models.Model):
    """A book that reviews can refer to."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=300, db_index=True)
    authors = models.CharField(max_length=300, blank=True)
    publisher = models.CharField(max_length=200, blank=True)
    isbn = models.CharField(max_length=32, unique=True, null=True, blank=True)
    thumbnail = models.URLField(max_length=500, blank=True)
    published_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'books'
        ordering = ['title']

    def __str__(self):
        return self.title
