"""
Tests for the read-only queries: titles by year, best per year, movies by language.
"""

from movie_records.aggregator import (
	MovieQueries,
	all_languages,
	best_per_year,
	group_titles_by_year,
	movies_by_language,
	suggest_languages,
	titles_by_year,
)
from movie_records.data_loader import DataLoader
from movie_records.models import LanguageHit, Movie, YearBest

from conftest import with_header


def test_titles_by_year_preserves_order(sample_movies):
	assert titles_by_year(sample_movies, 1994) == ["The Shawshank Redemption", "Se7en"]


def test_titles_by_year_none_found(sample_movies):
	assert titles_by_year(sample_movies, 2020) is None


def test_best_per_year_sorted_one_per_year(sample_movies):
	result = best_per_year(sample_movies)
	assert [entry.year for entry in result] == [1957, 1972, 1993, 1994, 2008]
	assert result[3] == YearBest(1994, 9.3, "The Shawshank Redemption")


def test_best_per_year_from_loaded_rows():
	movies, _ = DataLoader().load_rows(with_header(
		("Shawshank Redemption", "1994", "[English]", "9.3"),
		("Se7en", "1994", "[English]", "8.6"),
	))
	assert best_per_year(movies) == [YearBest(1994, 9.3, "Shawshank Redemption")]


def test_best_per_year_tie_keeps_first_seen():
	movies = [
		Movie("First", 2000, ("English",), 8.0),
		Movie("Second", 2000, ("English",), 8.0),
	]
	assert best_per_year(movies)[0].title == "First"


def test_best_per_year_empty():
	assert best_per_year([]) == []


def test_movies_by_language(sample_movies):
	assert movies_by_language(sample_movies, "German") == [LanguageHit(1993, "Schindler's List")]


def test_movies_by_language_is_case_sensitive(sample_movies):
	assert movies_by_language(sample_movies, "english") is None
	assert len(movies_by_language(sample_movies, "English")) == 6


def test_movies_by_language_no_substring_match(sample_movies):
	assert movies_by_language(sample_movies, "Engl") is None


def test_group_titles_by_year(sample_movies):
	groups = group_titles_by_year(sample_movies)
	assert list(groups) == ["1957", "1972", "1993", "1994", "2008"]
	assert groups["1994"] == ["The Shawshank Redemption", "Se7en"]


def test_all_languages(sample_movies):
	assert all_languages(sample_movies) == ["English", "German", "Italian", "Mandarin", "Polish"]


def test_suggest_languages_hints_case_variant(sample_movies):
	assert "English" in suggest_languages(sample_movies, "english")


def test_suggest_languages_nothing_close(sample_movies):
	assert suggest_languages(sample_movies, "Zzzz") == []


def test_queries_do_not_mutate_snapshot(sample_movies):
	queries = MovieQueries(sample_movies)
	before = queries.movies
	queries.titles_by_year(1994)
	queries.best_per_year()
	queries.movies_by_language("English")
	assert queries.movies == before
	assert queries.count == 6
