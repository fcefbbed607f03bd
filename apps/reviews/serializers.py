from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from apps.books.models import Book
from apps.books.serializers import BookMinimalSerializer
from .models import Review


class StrictBooleanField(serializers.BooleanField):
    """Accepts JSON true/false only, never "true", 1 or "on"."""

    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail('invalid', input=data)
        return data


class ReviewSerializer(serializers.ModelSerializer):
    """Main review serializer."""

    author = UserPublicSerializer(read_only=True)
    books = BookMinimalSerializer(many=True, read_only=True)
    like_count = serializers.SerializerMethodField()
    liked = serializers.SerializerMethodField()

    class Meta:
        model = Review
        fields = [
            'id',
            'title',
            'contents',
            'books',
            'published',
            'author',
            'like_count',
            'liked',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_like_count(self, obj) -> int:
        like_count = getattr(obj, 'like_count', None)
        if like_count is None:
            return obj.likes.count()
        return like_count

    def get_liked(self, obj) -> bool:
        liked = getattr(obj, 'liked', None)
        if liked is not None:
            return bool(liked)
        request = self.context.get('request')
        if request is None or not request.user.is_authenticated:
            return False
        return obj.likes.filter(user=request.user).exists()


class ReviewCreateSerializer(serializers.Serializer):
    """Request body for creating a review. Any ``author`` sent by the client is ignored."""

    books = serializers.PrimaryKeyRelatedField(
        many=True,
        queryset=Book.objects.all(),
        pk_field=serializers.UUIDField(),
        allow_empty=False,
    )
    contents = serializers.CharField()
    published = StrictBooleanField()
    title = serializers.CharField(max_length=200)


class ReviewUpdateSerializer(serializers.Serializer):
    """Request body for updating a review. ``books`` is optional but never empty."""

    books = serializers.PrimaryKeyRelatedField(
        many=True,
        queryset=Book.objects.all(),
        pk_field=serializers.UUIDField(),
        allow_empty=False,
        required=False,
    )
    contents = serializers.CharField()
    published = StrictBooleanField()
    title = serializers.CharField(max_length=200)


class LikeSerializer(serializers.Serializer):
    """Echo returned after liking a review."""

    user = serializers.UUIDField()
    review = serializers.UUIDField()
