"""
Typed configuration models using Pydantic.
Validation policy for the loader, directory scan pattern, and output materializer settings.
"""

import os  # environment-based overrides
from enum import Enum  # closed choices
from typing import Optional  # optional overrides

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from .errors import ConfigError


class RatingAction(str, Enum):
	"""What the loader does with a missing, unparsable, or out-of-range rating."""

	DEFAULT = "default"  # keep the movie with the default rating (0.0)
	SKIP = "skip"  # reject the whole row


class ValidationPolicy(BaseModel):
	"""
	Field-level rules applied to every source row.

	Two presets mirror the two variants of the movie tools:
	- strict(): languages must look like "[English;French]"
	- lenient(): brackets optional, languages separated by commas ("English,French")

	Title and year failures always reject the row, whatever the policy,
	so every loaded movie has a title and an in-range year.
	"""

	model_config = ConfigDict(frozen=True)

	name: str = Field(default="strict", description="Preset name, used in logs")
	min_year: int = Field(default=1900, description="Oldest accepted release year")
	max_year: int = Field(default=2021, description="Newest accepted release year")
	max_languages: int = Field(default=5, ge=1, description="Maximum language tokens per movie")
	max_language_length: int = Field(default=20, ge=1, description="Maximum characters per language token")
	language_open: str = Field(default="[", min_length=1, description="Opening bracket of the languages field")
	language_close: str = Field(default="]", min_length=1, description="Closing bracket of the languages field")
	language_delimiter: str = Field(default=";", min_length=1, description="Separator between language tokens")
	require_brackets: bool = Field(default=True, description="Reject rows whose languages are not bracketed")
	rating_action: RatingAction = Field(default=RatingAction.DEFAULT, description="Invalid rating handling")
	min_rating: float = Field(default=1.0, description="Lowest valid rating")
	max_rating: float = Field(default=10.0, description="Highest valid rating")
	default_rating: float = Field(default=0.0, description="Rating used when the source value is unusable")

	@field_validator("max_year")
	@classmethod
	def validate_year_range(cls, v: int, info: ValidationInfo) -> int:
		"""Ensure the year window is not empty."""
		min_year = info.data.get("min_year")
		if min_year is not None and v < min_year:
			msg = f"max_year ({v}) must not be before min_year ({min_year})"
			raise ValueError(msg)
		return v

	@field_validator("max_rating")
	@classmethod
	def validate_rating_range(cls, v: float, info: ValidationInfo) -> float:
		"""Ensure the rating window is not empty."""
		min_rating = info.data.get("min_rating")
		if min_rating is not None and v < min_rating:
			msg = f"max_rating ({v}) must not be below min_rating ({min_rating})"
			raise ValueError(msg)
		return v

	@classmethod
	def strict(cls) -> "ValidationPolicy":
		"""Bracketed, semicolon-separated languages; bad ratings default to 0.0."""
		return cls(name="strict")

	@classmethod
	def lenient(cls) -> "ValidationPolicy":
		"""Optional brackets, comma-separated languages; bad ratings default to 0.0."""
		return cls(name="lenient", require_brackets=False, language_delimiter=",")

	def year_in_range(self, year: int) -> bool:
		return self.min_year <= year <= self.max_year


POLICIES = {
	"strict": ValidationPolicy.strict,
	"lenient": ValidationPolicy.lenient,
}


def policy_by_name(name: str) -> ValidationPolicy:
	"""Resolve a preset name ("strict" or "lenient") into a policy."""
	factory = POLICIES.get((name or "").strip().lower())
	if factory is None:
		raise ConfigError(f"Unknown validation policy '{name}'. Use one of: {', '.join(sorted(POLICIES))}")
	return factory()


class ScanConfig(BaseModel):
	"""Which directory entries count as movie files."""

	model_config = ConfigDict(frozen=True)

	prefix: str = Field(default="movies_", description="Required file name prefix")
	extension: str = Field(default=".csv", description="Required file name extension")

	def matches(self, name: str) -> bool:
		return name.startswith(self.prefix) and name.endswith(self.extension)


class MaterializerConfig(BaseModel):
	"""Naming and permissions of the per-year output directory."""

	model_config = ConfigDict(frozen=True)

	onid: str = Field(description="Owner id embedded in the output directory name")
	dir_mode: int = Field(default=0o750, ge=0, le=0o7777, description="Mode of the created directory (rwxr-x---)")
	file_mode: int = Field(default=0o640, ge=0, le=0o7777, description="Mode of each year file (rw-r-----)")
	random_max: int = Field(default=99999, ge=0, description="Upper bound of the random directory suffix")

	@field_validator("onid")
	@classmethod
	def validate_onid(cls, v: str) -> str:
		"""Owner id must be usable as part of a single directory name."""
		v = v.strip()
		if not v:
			raise ValueError("onid must not be empty")
		if any(ch.isspace() for ch in v) or "/" in v or "\\" in v:
			raise ValueError(f"onid must not contain whitespace or path separators, got: {v!r}")
		return v

	def directory_name(self, suffix: int) -> str:
		return f"{self.onid}.movies.{suffix}"


class Settings(BaseModel):
	"""Everything the command-line tools need, resolved once at startup."""

	model_config = ConfigDict(frozen=True)

	policy: ValidationPolicy = Field(default_factory=ValidationPolicy.strict)
	scan: ScanConfig = Field(default_factory=ScanConfig)
	materializer: MaterializerConfig = Field(default_factory=lambda: MaterializerConfig(onid="movies"))

	@classmethod
	def from_env(
		cls,
		onid: Optional[str] = None,
		policy: Optional[str] = None,
		prefix: Optional[str] = None,
		environ: Optional[dict] = None,
	) -> "Settings":
		"""
		Build settings from MOVIE_RECORDS_* environment variables.
		Explicit arguments (e.g., CLI options) take precedence over the environment.
		"""
		env = os.environ if environ is None else environ
		onid = onid or env.get("MOVIE_RECORDS_ONID") or "movies"
		policy_name = policy or env.get("MOVIE_RECORDS_POLICY") or "strict"
		prefix = prefix or env.get("MOVIE_RECORDS_PREFIX") or "movies_"
		try:
			return cls(
				policy=policy_by_name(policy_name),
				scan=ScanConfig(prefix=prefix),
				materializer=MaterializerConfig(onid=onid),
			)
		except ValidationError as e:
			raise ConfigError(f"Invalid settings: {e}") from e
