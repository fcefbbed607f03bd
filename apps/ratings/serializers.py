from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from apps.books.models import Book
from .models import Rating, MIN_SCORE, MAX_SCORE


class StrictIntegerField(serializers.IntegerField):
    """Accepts JSON integers only, never "4" or 4.0."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, int):
            self.fail('invalid')
        return super().to_internal_value(data)


class RatingSerializer(serializers.ModelSerializer):
    """Rating as returned by the API."""

    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = Rating
        fields = ['id', 'book', 'user', 'score', 'created_at', 'updated_at']
        read_only_fields = fields


class RatingCreateSerializer(serializers.Serializer):
    """Request body for rating a book. The rater is always the session user."""

    book = serializers.PrimaryKeyRelatedField(
        queryset=Book.objects.all(),
        pk_field=serializers.UUIDField(),
    )
    score = StrictIntegerField(min_value=MIN_SCORE, max_value=MAX_SCORE)


class RatingUpdateSerializer(serializers.Serializer):
    score = StrictIntegerField(min_value=MIN_SCORE, max_value=MAX_SCORE)


class RatingSummarySerializer(serializers.Serializer):
    count = serializers.IntegerField()
    average = serializers.FloatField(allow_null=True)
