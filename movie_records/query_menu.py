"""
Interactive query menu over one movie file.

Flow:
	AWAITING_SOURCE  -> load and validate the file (failure terminates with status 1)
	AWAITING_COMMAND -> read a menu number (1-4); anything else re-prompts
	EXECUTING_QUERY  -> run the chosen query, then back to AWAITING_COMMAND
	TERMINATED       -> quit (status 0) or end of input
"""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from .aggregator import MovieQueries
from .config import ValidationPolicy
from .data_loader import DataLoader
from .errors import SourceError
from .menu import LineConsole, MenuState, parse_choice

MENU_TEXT = (
	"\n1. Show movies released in the specified year\n"
	"2. Show highest rated movie for each year\n"
	"3. Show the title and year of release of all movies in a specific language\n"
	"4. Exit from the program\n"
)

SHOW_BY_YEAR, SHOW_BEST_PER_YEAR, SHOW_BY_LANGUAGE, QUIT = 1, 2, 3, 4


class QueryMenu:
	"""Loads a movie file once, then answers menu queries until the user quits."""

	def __init__(
		self,
		source: Union[str, Path],
		policy: Optional[ValidationPolicy] = None,
		console: Optional[LineConsole] = None,
	):
		self.source = Path(source)
		self.policy = policy or ValidationPolicy.strict()
		self.console = console or LineConsole()
		self.state = MenuState.AWAITING_SOURCE
		self.queries: Optional[MovieQueries] = None
		self.exit_code = 0
		self._choice: Optional[int] = None

	def run(self) -> int:
		"""Drive the state machine to TERMINATED and return the process exit status."""
		handlers = {
			MenuState.AWAITING_SOURCE: self._load_source,
			MenuState.AWAITING_COMMAND: self._read_command,
			MenuState.EXECUTING_QUERY: self._execute,
		}
		while self.state != MenuState.TERMINATED:
			previous = self.state
			self.state = handlers[self.state]()
			logger.debug(f"[Menu] {previous.value} -> {self.state.value}")
		return self.exit_code

	def _load_source(self) -> MenuState:
		try:
			movies, _notices = DataLoader(self.policy).load(self.source)
		except SourceError as e:
			self.console.say(str(e))
			self.exit_code = 1
			return MenuState.TERMINATED
		self.queries = MovieQueries(movies)
		self.console.say(f"Processed file {self.source.name} and parsed data for {self.queries.count} movies")
		return MenuState.AWAITING_COMMAND

	def _read_command(self) -> MenuState:
		self.console.say(MENU_TEXT)
		text = self.console.ask("Enter a choice from 1 to 4: ")
		if text is None:
			return MenuState.TERMINATED
		self._choice = parse_choice(text, SHOW_BY_YEAR, QUIT)
		if self._choice is None:
			self.console.say("You entered an incorrect choice. Try again.")
			return MenuState.AWAITING_COMMAND
		return MenuState.EXECUTING_QUERY

	def _execute(self) -> MenuState:
		if self._choice == QUIT:
			self.console.say("Exiting the program.")
			return MenuState.TERMINATED
		if self._choice == SHOW_BY_YEAR:
			return self._show_by_year()
		if self._choice == SHOW_BEST_PER_YEAR:
			return self._show_best_per_year()
		return self._show_by_language()

	def _show_by_year(self) -> MenuState:
		text = self.console.ask("Enter the year for which you want to see movies: ")
		if text is None:
			return MenuState.TERMINATED
		try:
			year = int(text)
		except ValueError:
			year = None
		if year is None or not self.policy.year_in_range(year):
			self.console.say(
				f"Invalid year. Please enter a 4-digit year between {self.policy.min_year} and {self.policy.max_year}."
			)
			return MenuState.AWAITING_COMMAND

		titles = self.queries.titles_by_year(year)
		if titles is None:
			self.console.say(f"No data about movies released in the year {year}")
		else:
			for title in titles:
				self.console.say(title)
		return MenuState.AWAITING_COMMAND

	def _show_best_per_year(self) -> MenuState:
		for year, rating, title in self.queries.best_per_year():
			self.console.say(f"{year} {rating:.1f} {title}")
		return MenuState.AWAITING_COMMAND

	def _show_by_language(self) -> MenuState:
		language = self.console.ask("Enter the language for which you want to see movies: ")
		if language is None:
			return MenuState.TERMINATED
		if len(language) > self.policy.max_language_length:
			self.console.say(
				f"Language name exceeds {self.policy.max_language_length} characters. Please enter a shorter name."
			)
			return MenuState.AWAITING_COMMAND

		hits = self.queries.movies_by_language(language)
		if hits is None:
			self.console.say(f"No data about movies released in {language}")
			suggestions = self.queries.suggest_languages(language)
			if suggestions:
				self.console.say(f"Did you mean: {', '.join(suggestions)}?")
		else:
			for year, title in hits:
				self.console.say(f"{year} {title}")
		return MenuState.AWAITING_COMMAND
