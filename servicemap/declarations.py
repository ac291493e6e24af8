"""Builders turning normalized tag lines into Service and Relationship records."""
from __future__ import annotations

from typing import List, Optional, Tuple

from .model import Relationship, Service
from .tags import SERVICE_MARKER, TAG_MARKER


def _value_after_colon(line: str) -> str:
	parts = line.split(":", 1)
	if len(parts) == 2:
		return parts[1].strip()
	return ""


def parse_service_definition(lines: List[str]) -> Optional[Service]:
	"""Build a Service from a declaration block, or None when it has no name."""
	name = ""
	description = ""
	system = ""

	for line in lines:
		if line.startswith(SERVICE_MARKER):
			parts = line.split(" ", 1)
			if len(parts) == 2:
				name = parts[1].strip()
		elif line.startswith("description:"):
			description = _value_after_colon(line)
		elif line.startswith("system:"):
			system = _value_after_colon(line)

	if not name:
		return None
	return Service(name=name, description=description, system=system)


def parse_relationship_info(comment: str) -> Tuple[str, str, str]:
	"""Split a ``service:`` line into (owner, action, target).

	Accepted shapes::

		service:{owner}:{action} [target]
		service:{action} [target]

	The owner is empty for the second (implicit) shape. Anything that does
	not fit leaves both owner and action empty.
	"""
	parts = comment.split(" ", 1)
	service_action = parts[0]

	owner = ""
	action = ""
	segments = service_action.split(":")
	if len(segments) >= 3:
		owner = segments[1]
		action = segments[2]
	elif len(segments) == 2:
		action = segments[1]

	target = parts[1].strip() if len(parts) > 1 else ""
	return owner, action, target


def parse_relationship_definition(lines: List[str]) -> Optional[Relationship]:
	"""Build a Relationship from a relationship block, or None without an action."""
	owner = ""
	action = ""
	target = ""
	technology = ""
	description = ""
	proto = ""

	for line in lines:
		if line.startswith(TAG_MARKER):
			owner, action, target = parse_relationship_info(line)
		elif line.startswith("technology:"):
			technology = _value_after_colon(line)
		elif line.startswith("description:"):
			description = _value_after_colon(line)
		elif line.startswith("proto:"):
			proto = _value_after_colon(line)

	if not action.strip():
		return None
	return Relationship(
		owner=owner,
		action=action.strip(),
		target=target,
		technology=technology,
		description=description,
		proto=proto,
	)
