"""
Shared pieces of the interactive menus: states and line-based console I/O.
"""

from enum import Enum
from typing import Callable, Optional

from loguru import logger


class MenuState(str, Enum):
	"""States of a menu loop. Transitions happen only on validated input."""

	AWAITING_SOURCE = "awaiting-source"
	AWAITING_COMMAND = "awaiting-command"
	EXECUTING_QUERY = "executing-query"
	TERMINATED = "terminated"


class LineConsole:
	"""
	Line-oriented console. Input and output callables are injectable so menus
	can be driven from tests without a terminal.
	"""

	def __init__(self, input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print):
		self._input = input_fn
		self._output = output_fn

	def say(self, text: str = '') -> None:
		self._output(text)

	def ask(self, prompt: str = '') -> Optional[str]:
		"""One trimmed line of input, or None at end of input."""
		try:
			return self._input(prompt).strip()
		except EOFError:
			logger.debug("[Menu] End of input")
			return None


def parse_choice(text: Optional[str], low: int, high: int) -> Optional[int]:
	"""Menu number in [low, high], or None for anything else."""
	if text is None:
		return None
	try:
		choice = int(text)
	except ValueError:
		return None
	return choice if low <= choice <= high else None
