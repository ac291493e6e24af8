from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


VERSION = "1.0"


class CommentKind(str, Enum):
	NOT_TAGGED = "not_tagged"
	SERVICE = "service"
	RELATIONSHIP = "relationship"


class AddressingMode(str, Enum):
	EXPLICIT = "explicit"
	IMPLICIT = "implicit"


class RelationshipAction(str, Enum):
	"""Conventional relationship verbs. Any non-empty action is accepted."""

	USES = "uses"
	REQUESTS = "requests"
	REPLIES = "replies"
	SENDS = "sends"
	RECEIVES = "receives"


class SourceFile(BaseModel):
	path: str
	rel_path: str
	language: str


class Service(BaseModel):
	model_config = ConfigDict(frozen=True)

	name: str
	description: str = ""
	system: str = ""


class Relationship(BaseModel):
	model_config = ConfigDict(frozen=True)

	owner: str = ""
	action: str
	target: str = ""
	technology: str = ""
	description: str = ""
	proto: str = ""

	@property
	def mode(self) -> AddressingMode:
		if self.owner:
			return AddressingMode.EXPLICIT
		return AddressingMode.IMPLICIT

	def __str__(self) -> str:
		return (
			f"owner: {self.owner}, action: {self.action}, target: {self.target}, "
			f"technology: {self.technology}, proto: {self.proto}, description: {self.description}"
		)


class Diagnostic(BaseModel):
	message: str
	path: Optional[str] = None
	text: str = ""


class Info(BaseModel):
	name: str
	description: str = ""
	system: str = ""


class RelationshipEntry(BaseModel):
	action: str
	name: str = ""
	technology: Optional[str] = None
	description: Optional[str] = None
	proto: Optional[str] = None

	def sort_key(self):
		return (
			self.action,
			self.name,
			self.technology or "",
			self.proto or "",
			self.description or "",
		)


class ServiceFile(BaseModel):
	version: str = VERSION
	info: Info
	relationships: List[RelationshipEntry] = []

	def sort(self) -> None:
		self.relationships.sort(key=RelationshipEntry.sort_key)


class ParseResult(BaseModel):
	service_files: List[ServiceFile]
	diagnostics: List[Diagnostic] = []
