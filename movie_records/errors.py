"""
Error types for Movie Records.

Only fatal conditions are exceptions: an unreadable source, a failed
directory/file creation, or invalid settings. A bad individual row is
never raised; the loader turns it into a SkipNotice instead.
"""

from pathlib import Path
from typing import Optional, Union


class MovieRecordsError(Exception):
	"""Base class for all Movie Records errors."""


class SourceError(MovieRecordsError):
	"""The movie source could not be opened or failed while being read."""

	def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
		super().__init__(message)
		self.path = str(path) if path is not None else None


class MaterializeError(MovieRecordsError):
	"""Creating the output directory, a year file, or setting its permissions failed."""

	def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
		super().__init__(message)
		self.path = str(path) if path is not None else None


class ConfigError(MovieRecordsError):
	"""Invalid settings or command-line arguments."""
