import uuid

import pytest
from django.urls import reverse
from rest_framework import status
from apps.books.services import search_books


@pytest.mark.django_db
class TestBookList:
    """Tests for GET /api/books/"""

    def test_list_books(self, api_client, book, another_book):
        """Books are ordered by title."""
        response = api_client.get(reverse('books:book-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2
        assert [item['title'] for item in response.data['results']] == ['Demian', 'The Little Prince']

    def test_search_books(self, api_client, book, another_book):
        response = api_client.get(reverse('books:book-list'), {'search': 'hesse'})

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data['results']] == [str(another_book.id)]

    def test_books_are_read_only(self, api_client):
        response = api_client.post(reverse('books:book-list'), {'title': 'New'}, format='json')

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.django_db
class TestBookRetrieve:
    """Tests for GET /api/books/{id}/"""

    def test_retrieve_book(self, api_client, book):
        response = api_client.get(reverse('books:book-detail', args=[book.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['isbn'] == '9780156012195'

    def test_retrieve_missing_book(self, api_client):
        response = api_client.get(reverse('books:book-detail', args=[uuid.uuid4()]))

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestSearchBooksService:

    def test_matches_isbn(self, book, another_book):
        assert list(search_books(search='0156')) == [book]

    def test_no_search_returns_all(self, book, another_book):
        assert search_books().count() == 2
