from __future__ import annotations

import os
from typing import Dict, Iterable, List, Optional

from .errors import DiscoveryError
from .model import SourceFile


# Only languages servicemap.comments can extract comment groups from.
LANGUAGE_EXTENSIONS: Dict[str, List[str]] = {
	"go": [".go"],
	"python": [".py", ".pyi"],
	"java": [".java"],
	"typescript": [".ts", ".tsx", ".mts"],
	"javascript": [".js", ".jsx", ".mjs", ".cjs"],
	"rust": [".rs"],
	"c": [".c", ".h"],
	"cpp": [".cc", ".cpp", ".cxx", ".hh", ".hpp"],
}

EXTENSION_LANGUAGE: Dict[str, str] = {
	ext: language for language, exts in LANGUAGE_EXTENSIONS.items() for ext in exts
}

IGNORED_DIRS = {".git", "node_modules", "dist", "build", "__pycache__", "vendor"}


def detect_language(filename: str) -> str:
	return EXTENSION_LANGUAGE.get(os.path.splitext(filename)[1].lower(), "unknown")


def _raise(err: OSError) -> None:
	raise DiscoveryError(f"failed to walk the path {err.filename}: {err}") from err


def scan_sources(
	root: str,
	recursive: bool = True,
	languages: Optional[Iterable[str]] = None,
) -> List[SourceFile]:
	"""List source files under root whose language is in languages.

	With recursive=False only files directly inside root are returned.
	"""
	if not os.path.isdir(root):
		raise DiscoveryError(f"not a directory: {root}")

	wanted = set(languages) if languages is not None else {"go", "python"}
	files: List[SourceFile] = []
	for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
		if not recursive:
			dirnames[:] = []
		else:
			dirnames[:] = [d for d in dirnames if d not in IGNORED_DIRS]
		for filename in filenames:
			language = detect_language(filename)
			if language not in wanted:
				continue
			path = os.path.join(dirpath, filename)
			files.append(
				SourceFile(
					path=path,
					rel_path=os.path.relpath(path, root),
					language=language,
				)
			)
	files.sort(key=lambda f: f.rel_path)
	return files
