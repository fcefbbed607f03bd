from rest_framework import serializers
from .models import Book


class BookSerializer(serializers.ModelSerializer):
    """Full book representation."""

    class Meta:
        model = Book
        fields = [
            'id',
            'title',
            'authors',
            'publisher',
            'isbn',
            'thumbnail',
            'published_date',
            'created_at',
        ]
        read_only_fields = fields


class BookMinimalSerializer(serializers.ModelSerializer):
    """Minimal book info for nested serialization."""

    class Meta:
        model = Book
        fields = ['id', 'title', 'authors', 'thumbnail']
        read_only_fields = fields
