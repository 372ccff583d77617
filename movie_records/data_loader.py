"""
Data loading and validation module.
Reads movie rows from CSV, validates each field, and keeps only well-formed movies.
"""

# Standard libs for CSV parsing, regex, typing, and paths
import csv  # read delimited rows
import re  # strict integer syntax for years
from pathlib import Path  # filesystem-safe paths
from typing import Iterable, List, Optional, Sequence, Tuple, Union  # type hints

# Project models, policy, and errors
from .config import RatingAction, ValidationPolicy  # field rules
from .errors import SourceError  # fatal load failure
from .models import LoadResult, Movie, SkipNotice, SkipReason  # structured records

# Console logging
from loguru import logger  # console logger


# ASCII digits with an optional sign; rejects "1994.0", "1_994", fullwidth digits and other forms int() would accept
YEAR_PATTERN = re.compile(r"^[+-]?[0-9]+$")

# Title, year, languages, rating
FIELD_COUNT = 4


class RowRejected(Exception):
	"""Raised inside the loader when a row fails validation; never escapes load()."""

	def __init__(self, reason: SkipReason, value: str = ''):
		super().__init__(reason.value)
		self.reason = reason
		self.value = value


class DataLoader:
	"""
	Handles loading and validation of movie data.

	Rows are checked in a fixed order and the first failing rule decides the
	skip reason: missing title/year, invalid year, invalid language format,
	too many languages, language too long. The rating is checked on its own
	and, under the default policy, only ever downgraded to 0.0.
	"""

	def __init__(self, policy: Optional[ValidationPolicy] = None):
		"""Initialize the loader with a validation policy (strict by default)."""
		self.policy = policy or ValidationPolicy.strict()  # field rules for every row

	def load(self, filepath: Union[str, Path]) -> LoadResult:
		"""
		Load movies from a CSV file whose first row is a header.
		Returns a LoadResult with the kept movies and the skip notices.
		"""
		filepath = Path(filepath)  # normalize path
		logger.info(f"[DataLoader] Loading movies from {filepath} (policy={self.policy.name})...")  # log action

		try:
			with open(filepath, 'r', encoding='utf-8', newline='') as f:
				result = self.load_rows(csv.reader(f), source=str(filepath))  # stream rows
		except FileNotFoundError as e:
			raise SourceError(f"Movie data file not found: {filepath}", path=filepath) from e
		except (OSError, UnicodeDecodeError) as e:
			# Transport failure mid-stream: no partial collection
			raise SourceError(f"Could not read movie data file {filepath}: {e}", path=filepath) from e

		logger.info(
			f"[DataLoader] Successfully loaded {len(result.movies)} movies, skipped {len(result.notices)} rows."
		)  # summary
		return result

	def load_rows(self, rows: Iterable[Sequence[str]], source: str = '<rows>') -> LoadResult:
		"""
		Validate already-split rows. The first row is treated as the header and skipped.
		Blank rows are ignored. Line numbers in notices are 1-based with the header on line 1;
		for a csv.reader they are the reader's physical line numbers.
		A row the CSV parser cannot split (e.g. a field over csv.field_size_limit()) is skipped too.
		"""
		movies: List[Movie] = []  # accumulator for valid movies
		notices: List[SkipNotice] = []  # accumulator for rejected rows
		iterator = iter(rows)  # advanced by hand so one bad row does not stop the loop
		position = 0  # rows attempted so far, used when the source has no line_num
		header_seen = False

		while True:
			position += 1
			try:
				row = next(iterator)
			except StopIteration:
				break
			except csv.Error as e:
				notices.append(self._skip(SkipReason.MALFORMED_ROW, self._line_of(rows, position), str(e)))
				header_seen = True
				continue  # the reader resumes at the next line
			if not row:  # blank line
				continue
			if not header_seen:  # header row
				header_seen = True
				continue
			line_num = self._line_of(rows, position)  # keep track of line number for diagnostics
			try:
				movies.append(self._parse_row(row, line_num))  # convert row -> Movie
			except RowRejected as e:
				notices.append(self._skip(e.reason, line_num, e.value))
				continue  # move on

		return LoadResult(movies=tuple(movies), notices=tuple(notices), source=source)

	@staticmethod
	def _line_of(rows, position: int) -> int:
		return getattr(rows, 'line_num', position)

	@staticmethod
	def _skip(reason: SkipReason, line_num: int, value: str = '') -> SkipNotice:
		notice = SkipNotice(line=line_num, reason=reason, value=value)
		logger.warning(f"[DataLoader] {notice.message}")  # malformed row
		return notice

	def _parse_row(self, row: Sequence[str], line_num: int) -> Movie:
		"""
		Convert one raw row into a Movie, raising RowRejected on the first failed rule.
		"""
		# Pad short rows so missing trailing fields behave like empty ones
		fields = list(row[:FIELD_COUNT]) + [''] * (FIELD_COUNT - len(row))
		title, year_str, languages_str, rating_str = (value.strip() for value in fields)

		# 1) Title and year are mandatory
		if not title or not year_str:
			raise RowRejected(SkipReason.MISSING_FIELD)

		# 2) Year must be an integer inside the accepted window
		year = self._parse_year(year_str)

		# 3-5) Languages: bracket syntax, token count, token length
		languages = self._parse_languages(languages_str)

		# Rating is independent of the rules above
		rating = self._parse_rating(rating_str, line_num)

		return Movie(title=title, year=year, languages=languages, rating=rating)

	def _parse_year(self, text: str) -> int:
		if not YEAR_PATTERN.match(text):
			raise RowRejected(SkipReason.INVALID_YEAR, text)
		year = int(text)
		if not self.policy.year_in_range(year):
			raise RowRejected(SkipReason.INVALID_YEAR, text)
		return year

	def _parse_languages(self, text: str) -> Tuple[str, ...]:
		"""
		Split the languages field into tokens, e.g. "[English;French]" -> ("English", "French").
		Empty tokens are dropped.
		"""
		inner = self._strip_brackets(text)
		tokens = [token.strip() for token in inner.split(self.policy.language_delimiter)]
		tokens = [token for token in tokens if token]

		if len(tokens) > self.policy.max_languages:
			raise RowRejected(SkipReason.TOO_MANY_LANGUAGES, text)
		for token in tokens:
			if len(token) > self.policy.max_language_length:
				raise RowRejected(SkipReason.LANGUAGE_TOO_LONG, token)
		return tuple(tokens)

	def _strip_brackets(self, text: str) -> str:
		opening, closing = self.policy.language_open, self.policy.language_close
		bracketed = (
			len(text) >= len(opening) + len(closing)
			and text.startswith(opening)
			and text.endswith(closing)
		)
		if bracketed:
			return text[len(opening):len(text) - len(closing)]
		if self.policy.require_brackets:
			raise RowRejected(SkipReason.INVALID_LANGUAGE_FORMAT, text)
		# Lenient: drop whichever bracket is present
		if text.startswith(opening):
			text = text[len(opening):]
		if text.endswith(closing):
			text = text[:len(text) - len(closing)]
		return text

	def _parse_rating(self, text: str, line_num: int) -> float:
		"""
		Parse the rating; unusable values become the policy default or reject the row.
		NaN and infinities fail the range check.
		"""
		try:
			rating = float(text)
			valid = self.policy.min_rating <= rating <= self.policy.max_rating
		except ValueError:
			valid = False

		if valid:
			return rating
		if self.policy.rating_action == RatingAction.SKIP:
			raise RowRejected(SkipReason.INVALID_RATING, text)
		logger.warning(
			f"[DataLoader] Invalid rating '{text}' at line {line_num}. Setting to {self.policy.default_rating}."
		)
		return self.policy.default_rating


def load_movies(filepath: Union[str, Path], policy: Optional[ValidationPolicy] = None) -> LoadResult:
	"""Convenience wrapper: DataLoader(policy).load(filepath)."""
	return DataLoader(policy).load(filepath)
