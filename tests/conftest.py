"""Shared fixtures and helpers for the Movie Records tests."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from movie_records.models import Movie  # noqa: E402

HEADER = ["Title", "Year", "Languages", "Rating Value"]
SAMPLE_CSV = ROOT / 'data' / 'movies_sample_1.csv'


def with_header(*rows):
	"""Prepend the CSV header to raw rows."""
	return [HEADER] + [list(row) for row in rows]


def write_csv(path: Path, *rows) -> Path:
	"""Write rows (header included) as a CSV file with plain comma joins."""
	lines = [",".join(HEADER)] + [",".join(row) for row in rows]
	path.write_text("\n".join(lines) + "\n", encoding='utf-8')
	return path


class ScriptedConsole:
	"""Feeds canned input lines to a menu and records everything it prints."""

	def __init__(self, *lines):
		self._lines = iter(lines)
		self.output = []
		self.prompts = []

	def input(self, prompt=''):
		self.prompts.append(prompt)
		try:
			return next(self._lines)
		except StopIteration:
			raise EOFError

	def print(self, text=''):
		self.output.append(text)

	@property
	def text(self):
		return "\n".join(self.output)


@pytest.fixture
def sample_movies():
	return [
		Movie("The Shawshank Redemption", 1994, ("English",), 9.3),
		Movie("The Godfather", 1972, ("English", "Italian"), 9.2),
		Movie("The Dark Knight", 2008, ("English", "Mandarin"), 9.0),
		Movie("12 Angry Men", 1957, ("English",), 8.9),
		Movie("Schindler's List", 1993, ("English", "German", "Polish"), 8.9),
		Movie("Se7en", 1994, ("English",), 8.6),
	]
