"""Scan configuration.

Values come from keyword arguments first, then ``SERVICEMAP_*`` environment
variables, then ``.env``.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserConfig(BaseSettings):
	model_config = SettingsConfigDict(
		env_prefix="SERVICEMAP_",
		env_file=".env",
		env_file_encoding="utf-8",
		extra="ignore",
	)

	recursive: bool = True
	languages: List[str] = Field(default_factory=lambda: ["go", "python"])
	# Require tag markers at the start of a comment line instead of anywhere.
	anchored_markers: bool = False
	# Raise on malformed tag groups instead of recording a diagnostic.
	strict: bool = False
	# Raise when an implicit relationship could belong to several services.
	strict_implicit: bool = False
	output_format: str = "yaml"
	output_dir: Optional[str] = None
	log_level: str = "INFO"
