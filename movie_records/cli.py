"""Command-line interface for the movie tools."""

from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from .config import Settings, policy_by_name
from .errors import ConfigError
from .logging_setup import configure_logging
from .menu import LineConsole
from .organizer_menu import OrganizerMenu
from .query_menu import QueryMenu

app = typer.Typer(
	name="movie-records",
	help="Query a movie CSV file or organize its titles by release year.",
	no_args_is_help=True,
)

MAX_FILENAME_LENGTH = 49


def validate_filename(filename: str) -> str:
	"""Reject file names that are too long or contain whitespace."""
	if len(filename) > MAX_FILENAME_LENGTH:
		raise ConfigError(f"Error: File name '{filename}' exceeds {MAX_FILENAME_LENGTH} characters.")
	if any(ch.isspace() for ch in filename):
		raise ConfigError(f"Error: File name '{filename}' contains spaces.")
	return filename


@app.command()
def query(
	filename: str = typer.Argument(..., help="Movie CSV file to process, e.g. movies_sample_1.csv"),
	policy: str = typer.Option("strict", "--policy", "-p", help="Validation policy: 'strict' or 'lenient'."),
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug diagnostics to stderr."),
) -> None:
	"""Load a movie file and answer year, best-rated and language queries."""
	configure_logging(verbose)
	try:
		validate_filename(filename)
		validation_policy = policy_by_name(policy)
	except ConfigError as e:
		typer.echo(str(e), err=True)
		raise typer.Exit(code=1) from e

	logger.debug(f"[CLI] query {filename} policy={validation_policy.name}")
	code = QueryMenu(filename, policy=validation_policy, console=LineConsole()).run()
	raise typer.Exit(code=code)


@app.command()
def organize(
	directory: Path = typer.Option(
		Path("."), "--directory", "-d", help="Directory to scan and write into.", exists=True, file_okay=False,
	),
	onid: Optional[str] = typer.Option(None, "--onid", help="Owner id used in the output directory name."),
	policy: Optional[str] = typer.Option(None, "--policy", "-p", help="Validation policy: 'strict' or 'lenient'."),
	prefix: Optional[str] = typer.Option(None, "--prefix", help="File name prefix of candidate movie files."),
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug diagnostics to stderr."),
) -> None:
	"""Pick a movie file and write one YYYY.txt per release year into a new directory."""
	configure_logging(verbose)
	try:
		settings = Settings.from_env(onid=onid, policy=policy, prefix=prefix)
	except ConfigError as e:
		typer.echo(str(e), err=True)
		raise typer.Exit(code=1) from e

	logger.debug(f"[CLI] organize {directory} onid={settings.materializer.onid} policy={settings.policy.name}")
	code = OrganizerMenu(settings, directory=directory, console=LineConsole()).run()
	raise typer.Exit(code=code)


def main() -> None:
	app()


if __name__ == "__main__":
	main()
