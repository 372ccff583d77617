"""
Directory scanning module.
Finds movie CSV files by name pattern and picks the largest or smallest one.
"""

from dataclasses import dataclass  # lightweight containers for candidates
from pathlib import Path  # filesystem paths
from typing import List, Optional, Union  # type annotations

from rapidfuzz import fuzz, process  # close-name hints

from loguru import logger  # console logging

from .config import ScanConfig  # name pattern


@dataclass(frozen=True)
class Candidate:
	name: str  # file name (no directory)
	size: int  # size in bytes


def list_candidates(directory: Union[str, Path] = '.', scan: Optional[ScanConfig] = None) -> List[Candidate]:
	"""
	Regular files in `directory` matching the prefix and extension, in name order.
	Entries whose size cannot be read are ignored.
	"""
	scan = scan or ScanConfig()
	directory = Path(directory)
	candidates: List[Candidate] = []
	for path in sorted(directory.iterdir(), key=lambda p: p.name):
		if not scan.matches(path.name):
			continue
		try:
			if not path.is_file():
				continue
			size = path.stat().st_size
		except OSError as e:
			logger.warning(f"[Scanner] Cannot stat {path}: {e}")
			continue
		logger.debug(f"[Scanner] Candidate {path.name}: {size} bytes")
		candidates.append(Candidate(name=path.name, size=size))
	logger.debug(f"[Scanner] {len(candidates)} candidates in {directory} matching {scan.prefix}*{scan.extension}")
	return candidates


def find_largest(directory: Union[str, Path] = '.', scan: Optional[ScanConfig] = None) -> Optional[str]:
	"""Name of the largest candidate, or None. Ties go to the first name in order."""
	best: Optional[Candidate] = None
	for candidate in list_candidates(directory, scan):
		if best is None or candidate.size > best.size:
			best = candidate
	return best.name if best else None


def find_smallest(directory: Union[str, Path] = '.', scan: Optional[ScanConfig] = None) -> Optional[str]:
	"""Name of the smallest candidate, or None. Ties go to the first name in order."""
	best: Optional[Candidate] = None
	for candidate in list_candidates(directory, scan):
		if best is None or candidate.size < best.size:
			best = candidate
	return best.name if best else None


def suggest_names(
	directory: Union[str, Path], name: str, scan: Optional[ScanConfig] = None, limit: int = 3
) -> List[str]:
	"""Candidate names close to a mistyped `name`."""
	names = [c.name for c in list_candidates(directory, scan)]
	if not name or not names:
		return []
	matches = process.extract(name, names, scorer=fuzz.WRatio, limit=limit, score_cutoff=80)
	return [match for match, _score, _index in matches]
