"""
Output materializer.
Writes grouped titles as one text file per group inside a new, permission-restricted directory.
"""

import os  # chmod
import random  # directory name suffix
from pathlib import Path  # filesystem paths
from typing import Mapping, Optional, Sequence, Union  # type annotations

from loguru import logger  # console logging

from .config import MaterializerConfig  # naming and permissions
from .errors import MaterializeError  # fatal output failure


class Materializer:
	"""
	Creates `<onid>.movies.<random>` and fills it with `<key>.txt` files.
	Each operation is attempted once; any filesystem error aborts the whole call.
	"""

	def __init__(self, config: MaterializerConfig, rng: Optional[random.Random] = None):
		self.config = config
		self.rng = rng or random.Random()

	def materialize(self, groups: Mapping[str, Sequence[str]], parent: Union[str, Path] = '.') -> Path:
		"""
		Write every group to its own file, one string per line.
		Returns the created directory.
		"""
		directory = Path(parent) / self.config.directory_name(self.rng.randint(0, self.config.random_max))
		try:
			directory.mkdir()  # fails if it already exists
			os.chmod(directory, self.config.dir_mode)
		except OSError as e:
			raise MaterializeError(f"Could not create directory {directory}: {e}", path=directory) from e
		logger.info(f"[Materializer] Created {directory} (mode {oct(self.config.dir_mode)})")

		for key, lines in groups.items():
			self._write_group(directory / f"{key}.txt", lines)

		logger.info(f"[Materializer] Wrote {len(groups)} files to {directory}")
		return directory

	def _write_group(self, path: Path, lines: Sequence[str]) -> None:
		try:
			with open(path, 'w', encoding='utf-8') as f:
				for line in lines:
					f.write(f"{line}\n")
			os.chmod(path, self.config.file_mode)
		except OSError as e:
			raise MaterializeError(f"Could not write {path}: {e}", path=path) from e
		logger.debug(f"[Materializer] {path.name}: {len(lines)} lines")
