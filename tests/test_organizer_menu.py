"""
Tests for the organizer menu: file selection, processing, and error recovery.
"""

import random

from conftest import ScriptedConsole, write_csv
from movie_records.config import MaterializerConfig, Settings
from movie_records.materializer import Materializer
from movie_records.menu import LineConsole, MenuState
from movie_records.organizer_menu import OrganizerMenu


class FixedRandom(random.Random):
	def randint(self, a, b):
		return 7


def make_settings(onid="tester"):
	return Settings(materializer=MaterializerConfig(onid=onid))


def run_menu(directory, *lines):
	script = ScriptedConsole(*lines)
	settings = make_settings()
	menu = OrganizerMenu(
		settings,
		directory=directory,
		console=LineConsole(script.input, script.print),
		materializer=Materializer(settings.materializer, rng=FixedRandom()),
	)
	code = menu.run()
	return menu, code, script


def populate(directory):
	write_csv(
		directory / "movies_big.csv",
		("The Avengers", "2012", "[English;Russian;Hindi]", "8.1"),
		("Anna Karenina", "2012", "[English;French]", "6.6"),
		("Iron Man", "2008", "[English]", "7.9"),
	)
	write_csv(directory / "movies_tiny.csv", ("Se7en", "1994", "[English]", "8.6"))


def test_process_largest(tmp_path):
	populate(tmp_path)
	menu, code, script = run_menu(tmp_path, "1", "1", "2")
	assert code == 0
	assert "Now processing the chosen file named movies_big.csv" in script.output
	assert "Created directory with name tester.movies.7" in script.output
	out = tmp_path / "tester.movies.7"
	assert sorted(p.name for p in out.iterdir()) == ["2008.txt", "2012.txt"]
	assert (out / "2012.txt").read_text(encoding='utf-8') == "The Avengers\nAnna Karenina\n"
	assert menu.created == [out]


def test_process_smallest(tmp_path):
	populate(tmp_path)
	_, _, script = run_menu(tmp_path, "1", "2", "2")
	assert "Now processing the chosen file named movies_tiny.csv" in script.output
	assert (tmp_path / "tester.movies.7" / "1994.txt").read_text(encoding='utf-8') == "Se7en\n"


def test_process_by_name(tmp_path):
	populate(tmp_path)
	_, _, script = run_menu(tmp_path, "1", "3", "movies_tiny.csv", "2")
	assert "Now processing the chosen file named movies_tiny.csv" in script.output


def test_missing_named_file_reprompts_with_hint(tmp_path):
	populate(tmp_path)
	_, _, script = run_menu(tmp_path, "1", "3", "movies_tinny.csv", "3", "movies_tiny.csv", "2")
	assert "The file movies_tinny.csv was not found. Try again" in script.output
	assert any(line.startswith("Did you mean:") and "movies_tiny.csv" in line for line in script.output)
	assert "Now processing the chosen file named movies_tiny.csv" in script.output


def test_no_candidates_reprompts(tmp_path):
	menu, code, script = run_menu(tmp_path, "1", "1")
	assert "No files matching the criteria were found." in script.output
	assert code == 0
	assert menu.state == MenuState.TERMINATED


def test_invalid_choices(tmp_path):
	populate(tmp_path)
	_, _, script = run_menu(tmp_path, "9", "1", "x", "1", "2")
	assert "Invalid choice. Please enter 1 or 2." in script.output
	assert "Invalid choice. Please enter a number from 1 to 3." in script.output


def test_materialize_failure_returns_to_menu(tmp_path):
	populate(tmp_path)
	(tmp_path / "tester.movies.7").mkdir()
	menu, code, script = run_menu(tmp_path, "1", "1", "2")
	assert code == 0
	assert any(line.startswith("Error processing file:") for line in script.output)
	assert menu.created == []
	assert script.output[-1] == "Exiting the program."


def test_unreadable_directory_during_name_hint(tmp_path, monkeypatch):
	def unreadable(*args, **kwargs):
		raise PermissionError("permission denied")

	monkeypatch.setattr("movie_records.organizer_menu.suggest_names", unreadable)
	menu, code, script = run_menu(tmp_path, "1", "3", "movies_gone.csv", "2")
	assert code == 0
	assert "The file movies_gone.csv was not found. Try again" in script.output
	assert any(line.startswith("Error processing file: cannot read directory") for line in script.output)
	assert script.output[-1] == "Exiting the program."
