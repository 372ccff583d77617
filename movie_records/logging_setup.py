"""
Console logging configuration.
Diagnostics go to stderr so menu output on stdout stays readable.
"""

import sys

from loguru import logger


def configure_logging(verbose: bool = False) -> None:
	"""Replace loguru's default sink with a stderr sink at WARNING (DEBUG when verbose)."""
	logger.remove()
	logger.add(
		sys.stderr,
		level="DEBUG" if verbose else "WARNING",
		format="<level>{level: <8}</level> | {message}",
	)
