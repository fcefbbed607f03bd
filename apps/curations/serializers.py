from django.db.models import Q
from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from .models import Curation


class CurationSerializer(serializers.ModelSerializer):
    """Curation with the ids of the reviews the requester may see."""

    curator = UserPublicSerializer(read_only=True)
    reviews = serializers.SerializerMethodField()

    class Meta:
        model = Curation
        fields = ['id', 'title', 'contents', 'curator', 'reviews', 'created_at', 'updated_at']
        read_only_fields = fields

    def get_reviews(self, obj) -> list[str]:
        request = self.context.get('request')
        visible = Q(published=True)
        if request is not None and request.user.is_authenticated:
            visible |= Q(author=request.user)
        return [str(pk) for pk in obj.reviews.filter(visible).values_list('id', flat=True)]
