"""
Data models for Movie Records.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Enum for the fixed set of reasons a row can be rejected
from enum import Enum  # closed set of values
# Import typing helpers for precise and self-documenting types
from typing import Iterator, NamedTuple, Tuple  # tuples and fixed-size records


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single validated movie row.
	Frozen so the loaded collection can be shared by every query without copies.
	"""
	title: str  # non-empty display title, trimmed
	year: int  # release year, always inside the policy's accepted range
	languages: Tuple[str, ...]  # ordered language tokens (e.g., ("English", "French"))
	rating: float  # 1.0-10.0, or the policy default (0.0) when the source value was unusable


class SkipReason(str, Enum):
	"""Why a source row was rejected by the loader."""

	MISSING_FIELD = "missing title or year"
	INVALID_YEAR = "invalid year"
	INVALID_LANGUAGE_FORMAT = "invalid language format"
	TOO_MANY_LANGUAGES = "too many languages"
	LANGUAGE_TOO_LONG = "language too long"
	INVALID_RATING = "invalid rating"
	MALFORMED_ROW = "malformed row"


@dataclass(frozen=True)
class SkipNotice:
	"""
	Diagnostic for one rejected row.
	`line` is the 1-based line in the source file (the header is line 1).
	"""
	line: int  # source line number
	reason: SkipReason  # first validation rule that failed
	value: str = ''  # offending raw text, if any

	@property
	def message(self) -> str:
		"""Human-readable one-line description."""
		text = f"Skipping record at line {self.line}: {self.reason.value}"
		if self.value:
			text += f" ('{self.value}')"
		return text


@dataclass(frozen=True)
class LoadResult:
	"""
	Outcome of loading one source: the kept movies and the skipped rows.
	Unpacks as `movies, notices = result`.
	"""
	movies: Tuple[Movie, ...]  # valid movies in source order
	notices: Tuple[SkipNotice, ...] = field(default_factory=tuple)  # rejected rows in source order
	source: str = ''  # path or label of the source

	def __iter__(self) -> Iterator:
		return iter((self.movies, self.notices))

	def __len__(self) -> int:
		return len(self.movies)


class YearBest(NamedTuple):
	"""Highest-rated movie of one year."""
	year: int
	rating: float
	title: str


class LanguageHit(NamedTuple):
	"""A movie available in the requested language."""
	year: int
	title: str
