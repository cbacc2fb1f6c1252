"""Tests for the CLI interface."""

from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from mybookmark.booksearch.cli import app
from mybookmark.booksearch.schemas import BookCandidate, CandidateSource


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_help(self, runner: CliRunner):
        """Test that help command works."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Look up book metadata" in result.stdout

    def test_version(self, runner: CliRunner):
        """Test version command."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.stdout


class TestSearchCommand:
    """Tests for search command."""

    def test_search_results(self, runner: CliRunner):
        """Test results are shown in a table."""
        books = [
            BookCandidate(title="Holes", author="Louis Sachar", isbn13="9780374332662",
                          source=CandidateSource.PRIMARY),
        ]
        with patch("mybookmark.booksearch.cli._search", AsyncMock(return_value=books)) as mock_search:
            result = runner.invoke(app, ["search", "Holes", "--limit", "3"])

        assert result.exit_code == 0
        assert "Holes" in result.stdout
        assert "Louis Sachar" in result.stdout
        mock_search.assert_called_once_with("Holes", 3, False)

    def test_search_no_results(self, runner: CliRunner):
        """Test an empty search exits with an error."""
        with patch("mybookmark.booksearch.cli._search", AsyncMock(return_value=[])):
            result = runner.invoke(app, ["search", "zzzzqqqq"])

        assert result.exit_code == 1
        assert "No books found" in result.stdout

    def test_search_limit_bounds(self, runner: CliRunner):
        """Test limits outside 1..12 are rejected."""
        result = runner.invoke(app, ["search", "Holes", "--limit", "20"])
        assert result.exit_code != 0

    def test_search_offline(self, runner: CliRunner):
        """Test offline search answers from curated shelves."""
        result = runner.invoke(app, ["search", "Roald Dahl", "--offline"])

        assert result.exit_code == 0
        assert "Matilda" in result.stdout


class TestCoverCommand:
    """Tests for cover command."""

    def test_cover_found(self, runner: CliRunner):
        """Test the cover URL is printed."""
        url = "https://covers.openlibrary.org/b/id/42-M.jpg"
        with patch("mybookmark.booksearch.cli._cover", AsyncMock(return_value=url)):
            result = runner.invoke(app, ["cover", "Holes by Louis Sachar"])

        assert result.exit_code == 0
        assert url in result.stdout

    def test_cover_missing(self, runner: CliRunner):
        """Test a missing cover exits with a warning."""
        with patch("mybookmark.booksearch.cli._cover", AsyncMock(return_value=None)):
            result = runner.invoke(app, ["cover", "Holes"])

        assert result.exit_code == 1
        assert "No cover found" in result.stdout


class TestClassifyCommand:
    """Tests for classify command."""

    @pytest.mark.parametrize(
        "query,expected",
        [("9780064400558", "isbn"), ("Roald Dahl", "author_name"), ("Matilda", "general")],
    )
    def test_classify(self, runner: CliRunner, query, expected):
        """Test the query kind is printed."""
        result = runner.invoke(app, ["classify", query])
        assert result.exit_code == 0
        assert result.stdout.strip() == expected


class TestShelfCommand:
    """Tests for shelf command."""

    def test_list_shelves(self, runner: CliRunner):
        """Test shelves are listed without a name."""
        result = runner.invoke(app, ["shelf"])
        assert result.exit_code == 0
        assert "board" in result.stdout
        assert "newbery" in result.stdout
        assert "seasonal" in result.stdout

    def test_show_shelf(self, runner: CliRunner):
        """Test a shelf's books are shown."""
        result = runner.invoke(app, ["shelf", "board"])
        assert result.exit_code == 0
        assert "Goodnight Moon" in result.stdout

    def test_seasonal_shelf(self, runner: CliRunner):
        """Test the seasonal shelf follows the month."""
        result = runner.invoke(app, ["shelf", "seasonal", "--month", "2"])
        assert result.exit_code == 0
        assert "Black History Month" in result.stdout

    def test_unknown_shelf(self, runner: CliRunner):
        """Test unknown shelves exit with an error."""
        result = runner.invoke(app, ["shelf", "nonexistent"])
        assert result.exit_code == 1
        assert "Unknown shelf" in result.stdout
