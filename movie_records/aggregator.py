"""
Query module.
Read-only queries over the loaded movies: titles by year, best movie per year, movies by language.
"""

from typing import Dict, Iterable, List, Optional, Sequence  # type annotations

from rapidfuzz import fuzz, process, utils  # fuzzy matching for "did you mean" hints

from loguru import logger  # console logging

from .models import LanguageHit, Movie, YearBest  # structured records


def titles_by_year(movies: Iterable[Movie], year: int) -> Optional[List[str]]:
	"""
	Titles released in `year`, in source order.
	Returns None (not an empty list) when no movie matches.
	"""
	titles = [movie.title for movie in movies if movie.year == year]
	logger.debug(f"[Aggregator] Year {year}: {len(titles)} titles")
	return titles or None


def best_per_year(movies: Iterable[Movie]) -> List[YearBest]:
	"""
	Highest-rated movie for each year, ascending by year.
	On a tie the movie seen first keeps its place; only a strictly higher rating replaces it.
	"""
	best: Dict[int, Movie] = {}  # year -> current best
	for movie in movies:
		current = best.get(movie.year)
		if current is None or movie.rating > current.rating:
			best[movie.year] = movie
	return [YearBest(year, best[year].rating, best[year].title) for year in sorted(best)]


def movies_by_language(movies: Iterable[Movie], language: str) -> Optional[List[LanguageHit]]:
	"""
	(year, title) of movies available in `language`, in source order.
	Exact, case-sensitive token match: "english" does not match "English".
	Returns None when no movie matches.
	"""
	hits = [LanguageHit(movie.year, movie.title) for movie in movies if language in movie.languages]
	logger.debug(f"[Aggregator] Language '{language}': {len(hits)} movies")
	return hits or None


def group_titles_by_year(movies: Iterable[Movie]) -> Dict[str, List[str]]:
	"""Titles grouped under their year as text, years ascending, titles in source order."""
	groups: Dict[int, List[str]] = {}
	for movie in movies:
		groups.setdefault(movie.year, []).append(movie.title)
	return {str(year): groups[year] for year in sorted(groups)}


def all_languages(movies: Iterable[Movie]) -> List[str]:
	"""Return a sorted list of all unique language tokens in the dataset."""
	languages = set()  # unique tokens
	for movie in movies:
		languages.update(movie.languages)
	return sorted(languages)


def suggest_languages(movies: Iterable[Movie], language: str, limit: int = 3, cutoff: float = 80) -> List[str]:
	"""
	Known languages that look like `language` (e.g. "english" -> ["English"]).
	Only used to hint after a miss; matching itself stays exact.
	"""
	if not language:
		return []
	known = [name for name in all_languages(movies) if name != language]
	matches = process.extract(
		language, known, scorer=fuzz.WRatio, processor=utils.default_process, limit=limit, score_cutoff=cutoff,
	)
	logger.debug(f"[Aggregator] Suggestions for '{language}': {matches}")
	return [match for match, _score, _index in matches]


class MovieQueries:
	"""
	Immutable snapshot of the loaded movies with the three menu queries.
	Every call rescans the snapshot; there is no index to keep in sync.
	"""

	def __init__(self, movies: Sequence[Movie]):
		self._movies = tuple(movies)  # frozen snapshot

	@property
	def movies(self):
		return self._movies

	@property
	def count(self) -> int:
		return len(self._movies)

	def titles_by_year(self, year: int) -> Optional[List[str]]:
		return titles_by_year(self._movies, year)

	def best_per_year(self) -> List[YearBest]:
		return best_per_year(self._movies)

	def movies_by_language(self, language: str) -> Optional[List[LanguageHit]]:
		return movies_by_language(self._movies, language)

	def suggest_languages(self, language: str, limit: int = 3) -> List[str]:
		return suggest_languages(self._movies, language, limit=limit)

	def group_titles_by_year(self) -> Dict[str, List[str]]:
		return group_titles_by_year(self._movies)
