from django.db import models
import uuid


class Curation(models.Model):
    """An editor-picked collection of reviews."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    contents = models.TextField(blank=True)
    curator = models.ForeignKey('accounts.User', on_delete=models.SET_NULL, null=True, related_name='curations')
    reviews = models.ManyToManyField('reviews.Review', blank=True, related_name='curations')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'curations'
        ordering = ['-created_at']

    def __str__(self):
        return self.title
