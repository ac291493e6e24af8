"""Scan-level entry point tying discovery, extraction and aggregation together."""
from __future__ import annotations

import logging
from typing import List, Optional

from .aggregate import build_service_files
from .comments import extract_comment_groups
from .config import ParserConfig
from .declarations import parse_relationship_definition, parse_service_definition
from .errors import MalformedTagError, ParseFileError
from .fs_scan import detect_language, scan_sources
from .model import CommentKind, Diagnostic, ParseResult, Relationship, Service, ServiceFile
from .tags import extract_tags


logger = logging.getLogger(__name__)


class CommentParser:
	"""Accumulates records for exactly one scan.

	Create a new instance per scan; records are never flushed between scans.
	"""

	def __init__(self, config: Optional[ParserConfig] = None):
		self.config = config or ParserConfig()
		self.services: List[Service] = []
		self.relationships: List[Relationship] = []
		self.diagnostics: List[Diagnostic] = []

	def _warn(self, diagnostic: Diagnostic) -> None:
		if diagnostic.path:
			logger.warning("%s: %s", diagnostic.path, diagnostic.message)
		else:
			logger.warning("%s", diagnostic.message)
		self.diagnostics.append(diagnostic)

	def _discard(self, message: str, text: str, path: Optional[str]) -> None:
		if self.config.strict:
			where = f"{path}: " if path else ""
			raise MalformedTagError(f"{where}{message}")
		self._warn(Diagnostic(message=message, path=path, text=text))

	def parse_comment_group(self, comment_group: str, path: Optional[str] = None) -> None:
		kind, lines = extract_tags(comment_group, anchored=self.config.anchored_markers)
		if kind is CommentKind.SERVICE:
			service = parse_service_definition(lines)
			if service is None:
				self._discard("service declaration without a name", comment_group, path)
			else:
				self.services.append(service)
		elif kind is CommentKind.RELATIONSHIP:
			relationship = parse_relationship_definition(lines)
			if relationship is None:
				self._discard("relationship declaration without an action", comment_group, path)
			else:
				self.relationships.append(relationship)

	def parse_source(self, path: str, text: str, language: str) -> None:
		for group in extract_comment_groups(path, text, language):
			self.parse_comment_group(group, path=path)

	def parse_file(self, path: str, language: Optional[str] = None) -> None:
		language = language or detect_language(path)
		try:
			with open(path, "r", encoding="utf-8") as fh:
				text = fh.read()
		except (OSError, UnicodeDecodeError) as e:
			raise ParseFileError(path, str(e)) from e
		logger.debug("parsing %s (%s)", path, language)
		self.parse_source(path, text, language)

	def build_service_files(self) -> List[ServiceFile]:
		return build_service_files(
			self.services,
			self.relationships,
			strict_implicit=self.config.strict_implicit,
			warn=self._warn,
		)

	def parse(self, root: str, recursive: Optional[bool] = None) -> ParseResult:
		if recursive is None:
			recursive = self.config.recursive
		files = scan_sources(root, recursive=recursive, languages=self.config.languages)
		for f in files:
			self.parse_file(f.path, f.language)

		service_files = self.build_service_files()
		logger.info(
			"scanned %d files: %d services, %d relationships, %d service files",
			len(files),
			len(self.services),
			len(self.relationships),
			len(service_files),
		)
		return ParseResult(service_files=service_files, diagnostics=self.diagnostics)


def parse_directory(root: str, config: Optional[ParserConfig] = None, recursive: Optional[bool] = None) -> ParseResult:
	return CommentParser(config).parse(root, recursive=recursive)
