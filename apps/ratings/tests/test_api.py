import uuid

import pytest
from django.urls import reverse
from rest_framework import status
from apps.ratings.models import Rating


def detail_url(rating_id):
    return reverse('ratings:rating-detail', args=[rating_id])


# =============================================================================
# Listing
# =============================================================================

@pytest.mark.django_db
class TestRatingList:
    """Tests for GET /api/ratings/"""

    def test_list_requires_book(self, api_client, rating):
        response = api_client.get(reverse('ratings:rating-list'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['type'] == 'InvalidQuery'

    def test_list_book_ratings(self, api_client, rating, rated_book, rater):
        response = api_client.get(reverse('ratings:rating-list'), {'book': str(rated_book.id)})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        result = response.data['results'][0]
        assert result['score'] == 4
        assert result['user']['id'] == str(rater.id)

    def test_list_malformed_book(self, api_client, rating):
        response = api_client.get(reverse('ratings:rating-list'), {'book': 'zzz'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 0

    def test_summary(self, api_client, rating, rated_book, other_rater):
        Rating.objects.create(book=rated_book, user=other_rater, score=1)

        response = api_client.get(reverse('ratings:rating-summary'), {'book': str(rated_book.id)})

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'count': 2, 'average': 2.5}

    def test_summary_requires_book(self, api_client):
        response = api_client.get(reverse('ratings:rating-summary'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Create / Update / Delete
# =============================================================================

@pytest.mark.django_db
class TestRatingCreate:
    """Tests for POST /api/ratings/"""

    def test_rate_book(self, rater_client, rater, rated_book):
        data = {'book': str(rated_book.id), 'score': 5}
        response = rater_client.post(reverse('ratings:rating-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['id'] == str(rater.id)
        assert Rating.objects.get(book=rated_book, user=rater).score == 5

    @pytest.mark.parametrize('score', [0, 6, '5', 4.5, None, True])
    def test_invalid_score(self, rater_client, rated_book, score):
        data = {'book': str(rated_book.id), 'score': score}
        response = rater_client.post(reverse('ratings:rating-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['type'] == 'InvalidBody'

    def test_unknown_book(self, rater_client):
        data = {'book': str(uuid.uuid4()), 'score': 3}
        response = rater_client.post(reverse('ratings:rating-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_rate_requires_session(self, api_client, rated_book):
        data = {'book': str(rated_book.id), 'score': 3}
        response = api_client.post(reverse('ratings:rating-list'), data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert not Rating.objects.exists()

    def test_rate_twice_conflicts(self, rater_client, rating, rated_book):
        data = {'book': str(rated_book.id), 'score': 2}
        response = rater_client.post(reverse('ratings:rating-list'), data, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['type'] == 'DuplicateRating'


@pytest.mark.django_db
class TestRatingUpdate:
    """Tests for PATCH /api/ratings/{id}/"""

    def test_update_own_rating(self, rater_client, rating):
        response = rater_client.patch(detail_url(rating.id), {'score': 2}, format='json')

        assert response.status_code == status.HTTP_200_OK
        rating.refresh_from_db()
        assert rating.score == 2

    def test_other_user_cannot_update(self, other_rater_client, rating):
        response = other_rater_client.patch(detail_url(rating.id), {'score': 1}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        rating.refresh_from_db()
        assert rating.score == 4

    def test_update_requires_session(self, api_client, rating):
        response = api_client.patch(detail_url(rating.id), {'score': 1}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_missing_rating(self, rater_client):
        response = rater_client.patch(detail_url('zzz'), {'score': 1}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error']['type'] == 'RatingNotFound'


@pytest.mark.django_db
class TestRatingDelete:
    """Tests for DELETE /api/ratings/{id}/"""

    def test_delete_own_rating(self, rater_client, rating):
        response = rater_client.delete(detail_url(rating.id))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Rating.objects.filter(id=rating.id).exists()

    def test_other_user_cannot_delete(self, other_rater_client, rating):
        response = other_rater_client.delete(detail_url(rating.id))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert Rating.objects.filter(id=rating.id).exists()

    def test_delete_missing_rating(self, rater_client):
        response = rater_client.delete(detail_url(uuid.uuid4()))

        assert response.status_code == status.HTTP_404_NOT_FOUND
