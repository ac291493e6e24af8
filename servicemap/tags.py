from __future__ import annotations

from typing import List, Tuple

from .model import CommentKind


TAG_MARKER = "service:"
SERVICE_MARKER = "service:name"

_OPENERS = ("//", "/*", "#")


def extract_comment_text(line: str) -> str:
	"""Strip comment markers from a single raw comment line."""
	comment = line.strip()
	for opener in _OPENERS:
		if comment.startswith(opener):
			comment = comment[len(opener):]
			break
	if comment.endswith("*/"):
		comment = comment[:-2]
	comment = comment.strip()
	# Block comment continuation lines like " * service:uses X"
	if comment.startswith("* ") or comment == "*":
		comment = comment[1:].strip()
	return comment


def normalize_lines(comment_group: str) -> List[str]:
	lines: List[str] = []
	for raw in comment_group.split("\n"):
		if not raw.strip():
			continue
		text = extract_comment_text(raw)
		if text:
			lines.append(text)
	return lines


def classify(comment_group: str, anchored: bool = False) -> CommentKind:
	if anchored:
		lines = normalize_lines(comment_group)
		if not any(line.startswith(TAG_MARKER) for line in lines):
			return CommentKind.NOT_TAGGED
		if any(line.startswith(SERVICE_MARKER) for line in lines):
			return CommentKind.SERVICE
		return CommentKind.RELATIONSHIP

	if TAG_MARKER not in comment_group:
		return CommentKind.NOT_TAGGED
	if SERVICE_MARKER in comment_group:
		return CommentKind.SERVICE
	return CommentKind.RELATIONSHIP


def extract_tags(comment_group: str, anchored: bool = False) -> Tuple[CommentKind, List[str]]:
	"""Classify a comment group and return its normalized lines.

	Untagged groups come back with an empty line list.
	"""
	kind = classify(comment_group, anchored=anchored)
	if kind is CommentKind.NOT_TAGGED:
		return kind, []
	return kind, normalize_lines(comment_group)
