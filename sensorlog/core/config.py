"""
Application configuration for the sensor log analyzer.

Provides environment-aware settings with conservative defaults. Report
precision and the standard deviation method are configurable so callers do
not need to hard-code them.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


STD_METHODS = ("sum_of_squares", "two_pass")


class AnalysisConfig(BaseModel):
	"""
	Settings for statistics and report formatting.

	Notes:
	- std_method: 'sum_of_squares' uses the single-pass sum/sum-of-squares
	  identity; 'two_pass' centres on the mean first and is more stable for
	  large or large-magnitude series.
	- decimal_places: precision of the per-sensor mean and deviation lines.
	- encoding: text encoding used when the analyzer opens a log file itself.
	"""

	std_method: str = Field(
		"sum_of_squares",
		description="Standard deviation method: 'sum_of_squares' or 'two_pass'",
	)
	decimal_places: int = Field(2, ge=0, le=10)
	encoding: str = Field("utf-8", min_length=1)

	@field_validator("std_method")
	@classmethod
	def _known_std_method(cls, value: str) -> str:
		if value not in STD_METHODS:
			raise ValueError(f"std_method must be one of {', '.join(STD_METHODS)}")
		return value


class Config(BaseSettings):
	"""
	Global configuration with environment overrides.
	"""

	model_config = SettingsConfigDict(
		env_prefix="SENSORLOG_",
		env_file=".env",
		env_nested_delimiter="__",
		extra="ignore",
	)

	log_level: str = Field("INFO", description="Default logging level")
	logs_dir: Path = Field(Path("logs"), description="Directory for log files")
	log_to_file: bool = Field(False, description="Also write logs to logs_dir")
	analysis: AnalysisConfig = AnalysisConfig()

	def model_post_init(self, __context: object) -> None:
		if self.log_to_file:
			self.logs_dir.mkdir(parents=True, exist_ok=True)


config = Config()
