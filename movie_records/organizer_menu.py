"""
Interactive organizer: pick a movie file from a directory and write its titles
into one text file per release year.

Flow:
	AWAITING_COMMAND -> 1 select a file, 2 exit
	AWAITING_SOURCE  -> 1 largest, 2 smallest, 3 by name; re-prompts until a file is chosen
	EXECUTING_QUERY  -> load, group by year, materialize; errors return to AWAITING_COMMAND
	TERMINATED
"""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from .aggregator import group_titles_by_year
from .config import Settings
from .data_loader import DataLoader
from .errors import MaterializeError, SourceError
from .file_scanner import find_largest, find_smallest, suggest_names
from .materializer import Materializer
from .menu import LineConsole, MenuState, parse_choice

MAIN_MENU_TEXT = "\n1. Select file to process\n2. Exit the program\n"

FILE_MENU_TEXT = (
	"\nWhich file you want to process?\n"
	"Enter 1 to pick the largest file\n"
	"Enter 2 to pick the smallest file\n"
	"Enter 3 to specify the name of a file\n"
)

PICK_LARGEST, PICK_SMALLEST, PICK_BY_NAME = 1, 2, 3


class OrganizerMenu:
	"""Menu loop around the file scanner, the loader and the materializer."""

	def __init__(
		self,
		settings: Settings,
		directory: Union[str, Path] = '.',
		console: Optional[LineConsole] = None,
		materializer: Optional[Materializer] = None,
	):
		self.settings = settings
		self.directory = Path(directory)
		self.console = console or LineConsole()
		self.materializer = materializer or Materializer(settings.materializer)
		self.state = MenuState.AWAITING_COMMAND
		self.selected: Optional[str] = None
		self.created = []  # directories written during this session

	def run(self) -> int:
		handlers = {
			MenuState.AWAITING_COMMAND: self._read_command,
			MenuState.AWAITING_SOURCE: self._select_file,
			MenuState.EXECUTING_QUERY: self._process_file,
		}
		while self.state != MenuState.TERMINATED:
			previous = self.state
			self.state = handlers[self.state]()
			logger.debug(f"[Menu] {previous.value} -> {self.state.value}")
		return 0

	def _read_command(self) -> MenuState:
		self.console.say(MAIN_MENU_TEXT)
		text = self.console.ask("Enter a choice 1 or 2: ")
		if text is None:
			return MenuState.TERMINATED
		choice = parse_choice(text, 1, 2)
		if choice == 1:
			return MenuState.AWAITING_SOURCE
		if choice == 2:
			self.console.say("Exiting the program.")
			return MenuState.TERMINATED
		self.console.say("Invalid choice. Please enter 1 or 2.")
		return MenuState.AWAITING_COMMAND

	def _select_file(self) -> MenuState:
		self.console.say(FILE_MENU_TEXT)
		text = self.console.ask("Enter a choice from 1 to 3: ")
		if text is None:
			return MenuState.TERMINATED
		choice = parse_choice(text, PICK_LARGEST, PICK_BY_NAME)
		if choice is None:
			self.console.say("Invalid choice. Please enter a number from 1 to 3.")
			return MenuState.AWAITING_SOURCE

		if choice == PICK_BY_NAME:
			name = self.console.ask("Enter the complete file name: ")
			if name is None:
				return MenuState.TERMINATED
			if not name or not (self.directory / name).is_file():
				self.console.say(f"The file {name} was not found. Try again")
				try:
					hints = suggest_names(self.directory, name, self.settings.scan)
				except OSError as e:
					self.console.say(f"Error processing file: cannot read directory {self.directory}: {e}")
					return MenuState.AWAITING_COMMAND
				if hints:
					self.console.say(f"Did you mean: {', '.join(hints)}?")
				return MenuState.AWAITING_SOURCE
		else:
			pick = find_largest if choice == PICK_LARGEST else find_smallest
			try:
				name = pick(self.directory, self.settings.scan)
			except OSError as e:
				self.console.say(f"Error processing file: cannot read directory {self.directory}: {e}")
				return MenuState.AWAITING_COMMAND
			if name is None:
				self.console.say("No files matching the criteria were found.")
				return MenuState.AWAITING_SOURCE

		self.selected = name
		self.console.say(f"Now processing the chosen file named {name}")
		return MenuState.EXECUTING_QUERY

	def _process_file(self) -> MenuState:
		try:
			movies, _notices = DataLoader(self.settings.policy).load(self.directory / self.selected)
			directory = self.materializer.materialize(group_titles_by_year(movies), parent=self.directory)
		except (SourceError, MaterializeError) as e:
			self.console.say(f"Error processing file: {e}")
			return MenuState.AWAITING_COMMAND
		self.created.append(directory)
		self.console.say(f"Created directory with name {directory.name}")
		return MenuState.AWAITING_COMMAND
