from __future__ import annotations

import ast
import io
import re
import tokenize
from typing import List, NamedTuple

from .errors import ParseFileError


C_STYLE_LANGUAGES = {"go", "java", "typescript", "javascript", "rust", "c", "cpp"}

# Quote characters opening a string literal, per language. Backquoted
# strings may span lines; the others stop at the end of the line.
_STRING_QUOTES = {
	"go": '"`',
	"javascript": "\"'`",
	"typescript": "\"'`",
}
_DEFAULT_STRING_QUOTES = '"'

# Char/rune literal such as 'a', '\n', '\'' or '\u{1F600}'. A quote that does
# not match (Rust lifetimes, C++ digit separators) is ordinary code.
_CHAR_LITERAL = re.compile(r"'(?:\\.[^'\n]{0,9}|[^'\\\n])'")


class _Comment(NamedTuple):
	first: int
	last: int
	raw: str
	# Code precedes the comment on its first line.
	trailing: bool
	# Code appears between the previous comment and this one.
	after_code: bool


def _scan_c_style_comments(path: str, text: str, language: str = "go") -> List[_Comment]:
	quotes = _STRING_QUOTES.get(language, _DEFAULT_STRING_QUOTES)
	comments: List[_Comment] = []
	i = 0
	line = 1
	n = len(text)
	line_has_code = False
	code_since_comment = False
	while i < n:
		ch = text[i]
		if ch == "\n":
			line += 1
			line_has_code = False
			i += 1
		elif ch in " \t\r\f\v":
			i += 1
		elif text.startswith("//", i):
			end = text.find("\n", i)
			if end == -1:
				end = n
			comments.append(_Comment(line, line, text[i:end].rstrip("\r"), line_has_code, code_since_comment))
			code_since_comment = False
			i = end
		elif text.startswith("/*", i):
			end = text.find("*/", i + 2)
			if end == -1:
				raise ParseFileError(path, f"unterminated block comment at line {line}")
			body = text[i:end + 2]
			last = line + body.count("\n")
			comments.append(_Comment(line, last, body, line_has_code, code_since_comment))
			code_since_comment = False
			if last != line:
				line_has_code = False
			line = last
			i = end + 2
		elif ch in quotes:
			line_has_code = code_since_comment = True
			j = i + 1
			while j < n and text[j] != ch:
				if text[j] == "\\" and ch != "`":
					j += 1
				elif text[j] == "\n":
					if ch != "`":
						break
					line += 1
				j += 1
			i = j + 1 if j < n and text[j] == ch else j
		elif ch == "'":
			line_has_code = code_since_comment = True
			m = _CHAR_LITERAL.match(text, i)
			i = m.end() if m else i + 1
		else:
			line_has_code = code_since_comment = True
			i += 1
	return comments


def _group_comments(comments: List[_Comment]) -> List[str]:
	"""Join comments into groups the way the Go parser does.

	A group is broken by a blank line or by code between two comments. A
	comment trailing code on its line stands alone.
	"""
	groups: List[List[str]] = []
	prev = None
	for c in comments:
		if prev is None or prev.trailing or c.after_code or c.first > prev.last + 1:
			groups.append([c.raw])
		else:
			groups[-1].append(c.raw)
		prev = c
	return ["\n".join(g) + "\n" for g in groups]


def extract_c_style_comment_groups(path: str, text: str, language: str = "go") -> List[str]:
	"""Comment groups for languages using ``//`` and ``/* */`` comments."""
	return _group_comments(_scan_c_style_comments(path, text, language))


_NON_CODE_TOKENS = {
	tokenize.COMMENT,
	tokenize.NL,
	tokenize.NEWLINE,
	tokenize.INDENT,
	tokenize.DEDENT,
	tokenize.ENCODING,
	tokenize.ENDMARKER,
}


def extract_python_comment_groups(path: str, text: str) -> List[str]:
	"""Comment groups for Python: runs of ``#`` comments plus docstrings.

	Module and class docstrings play the part of declaration doc comments.
	"""
	try:
		tree = ast.parse(text, filename=path)
		tokens = list(tokenize.generate_tokens(io.StringIO(text).readline))
	except (SyntaxError, tokenize.TokenError) as e:
		raise ParseFileError(path, str(e)) from e

	comments: List[_Comment] = []
	code_since_comment = False
	for tok in tokens:
		if tok.type == tokenize.COMMENT:
			row, col = tok.start
			trailing = bool(tok.line[:col].strip())
			comments.append(_Comment(row, row, tok.string, trailing, code_since_comment))
			code_since_comment = False
		elif tok.type not in _NON_CODE_TOKENS:
			code_since_comment = True
	groups = _group_comments(comments)

	docstrings: List[str] = []
	module_doc = ast.get_docstring(tree)
	if module_doc:
		docstrings.append(module_doc)
	for node in ast.walk(tree):
		if isinstance(node, ast.ClassDef):
			doc = ast.get_docstring(node)
			if doc:
				docstrings.append(doc)
	return groups + [doc + "\n" for doc in docstrings]


def extract_comment_groups(path: str, text: str, language: str) -> List[str]:
	if language == "python":
		return extract_python_comment_groups(path, text)
	if language in C_STYLE_LANGUAGES:
		return extract_c_style_comment_groups(path, text, language)
	raise ParseFileError(path, f"no comment extractor for language {language!r}")
