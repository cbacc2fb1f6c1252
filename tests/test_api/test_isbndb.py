"""Tests for ISBNdb API client."""

import pytest

from mybookmark.booksearch.api.http import CatalogNotFoundError, CatalogUnavailableError
from mybookmark.booksearch.api.isbndb import IsbndbBook, IsbndbClient


class TestIsbndbBook:
    """Tests for IsbndbBook parsing."""

    def test_minimal_record(self):
        """Test a record with only a title."""
        book = IsbndbBook.model_validate({"title": "Holes"})

        assert book.title == "Holes"
        assert book.authors == []
        assert book.image is None

    def test_extra_fields_ignored(self):
        """Test unknown fields do not break parsing."""
        book = IsbndbBook.model_validate({"title": "Holes", "pages": 233, "binding": "Paperback"})

        assert book.title == "Holes"


class TestIsbndbClientSearch:
    """Tests for book and author search."""

    def test_search_books_request(self, run, fake_http, isbndb_payload):
        """Test the books endpoint request shape."""
        fake_http.routes["isbndb.com/books/"] = isbndb_payload
        client = IsbndbClient(fake_http, api_key="secret")

        books = run(client.search_books("Charlotte's Web", page_size=5))

        assert len(books) == 2
        url, params, headers = fake_http.calls[0]
        assert url == "https://api2.isbndb.com/books/Charlotte%27s%20Web"
        assert params == {"pageSize": 5, "language": "en"}
        assert headers == {"Authorization": "secret"}

    def test_search_author_request(self, run, fake_http):
        """Test the author endpoint is used for author search."""
        fake_http.routes["isbndb.com/author/"] = {"author": "Roald Dahl", "books": [{"title": "Matilda"}]}
        client = IsbndbClient(fake_http, api_key="secret")

        books = run(client.search_author("Roald Dahl"))

        assert books[0].title == "Matilda"
        assert fake_http.calls[0][0] == "https://api2.isbndb.com/author/Roald%20Dahl"

    def test_no_key_sends_no_auth_header(self, run, fake_http):
        """Test a proxy setup without a key sends no Authorization header."""
        fake_http.routes["proxy.example.com/books/"] = {"books": []}
        client = IsbndbClient(fake_http, base_url="https://proxy.example.com/")

        run(client.search_books("Holes"))

        url, _, headers = fake_http.calls[0]
        assert url == "https://proxy.example.com/books/Holes"
        assert headers == {}

    def test_query_slashes_are_escaped(self, run, fake_http):
        """Test a query cannot change the endpoint path."""
        fake_http.routes["isbndb.com/books/"] = {"books": []}
        client = IsbndbClient(fake_http)

        run(client.search_books("either/or"))

        assert fake_http.calls[0][0].endswith("/books/either%2For")

    def test_missing_books_key_is_empty(self, run, fake_http):
        """Test a response without books yields an empty list."""
        fake_http.routes["isbndb.com/books/"] = {"errorMessage": "Not Found"}
        client = IsbndbClient(fake_http)

        assert run(client.search_books("zzzz")) == []

    def test_malformed_response(self, run, fake_http):
        """Test a malformed payload raises CatalogUnavailableError."""
        fake_http.routes["isbndb.com/books/"] = {"books": "not a list"}
        client = IsbndbClient(fake_http)

        with pytest.raises(CatalogUnavailableError):
            run(client.search_books("Holes"))

    def test_transport_error_propagates(self, run, fake_http):
        """Test transport errors reach the caller."""
        fake_http.routes["isbndb.com/books/"] = CatalogUnavailableError("down")
        client = IsbndbClient(fake_http)

        with pytest.raises(CatalogUnavailableError):
            run(client.search_books("Holes"))

    def test_null_fields_keep_other_records(self, run, fake_http):
        """Test a record with null lists does not discard the response."""
        fake_http.routes["isbndb.com/books/"] = {
            "books": [
                {"title": "Holes", "authors": ["Louis Sachar"], "isbn13": "9780374332662"},
                {"title": "Holes (Anniversary Edition)", "authors": None, "isbn13": None},
            ]
        }
        client = IsbndbClient(fake_http)

        books = run(client.search_books("Holes"))

        assert [b.title for b in books] == ["Holes", "Holes (Anniversary Edition)"]
        assert books[1].authors == []

    def test_null_books_is_empty(self, run, fake_http):
        """Test a null books list reads as no results."""
        fake_http.routes["isbndb.com/books/"] = {"books": None}
        client = IsbndbClient(fake_http)

        assert run(client.search_books("Holes")) == []

    def test_not_found_is_empty(self, run, fake_http):
        """Test ISBNdb's 404 for no match yields an empty list."""
        fake_http.routes["isbndb.com/books/"] = CatalogNotFoundError("HTTP error 404")
        client = IsbndbClient(fake_http)

        assert run(client.search_books("zzzzqqqq")) == []


class TestIsbndbBookNulls:
    """Tests for records with explicit nulls."""

    def test_null_entries_dropped_from_lists(self):
        """Test null authors inside the list are skipped."""
        book = IsbndbBook.model_validate({"title": "Holes", "authors": [None, "Louis Sachar"]})

        assert book.authors == ["Louis Sachar"]
