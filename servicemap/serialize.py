from __future__ import annotations

import json
import os
import re
from typing import Any, Dict, List

import yaml

from .errors import OutputCollisionError
from .model import ServiceFile


FORMATS = {"yaml": "yaml", "json": "json"}


def service_file_to_dict(sf: ServiceFile) -> Dict[str, Any]:
	return sf.model_dump(exclude_none=True)


def dump_service_file(sf: ServiceFile, fmt: str = "yaml") -> str:
	data = service_file_to_dict(sf)
	if fmt == "yaml":
		return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
	if fmt == "json":
		return json.dumps(data, indent=2) + "\n"
	raise ValueError(f"unsupported output format: {fmt}")


def slugify(name: str) -> str:
	slug = re.sub(r"[^A-Za-z0-9]+", "-", name).strip("-").lower()
	return slug or "service"


def output_filename(sf: ServiceFile, single: bool, fmt: str = "yaml") -> str:
	ext = FORMATS[fmt]
	if single:
		return f"servicefile.{ext}"
	return f"{slugify(sf.info.name)}.servicefile.{ext}"


def write_service_files(files: List[ServiceFile], output_dir: str, fmt: str = "yaml") -> List[str]:
	"""Write one document per service, or a single servicefile when only one exists.

	Nothing is written when two services map to the same file name.
	"""
	if fmt not in FORMATS:
		raise ValueError(f"unsupported output format: {fmt}")
	single = len(files) == 1
	targets: Dict[str, List[ServiceFile]] = {}
	for sf in sorted(files, key=lambda f: f.info.name):
		path = os.path.join(output_dir, output_filename(sf, single, fmt))
		targets.setdefault(path, []).append(sf)
	for path, owners in targets.items():
		if len(owners) > 1:
			raise OutputCollisionError(path, [sf.info.name for sf in owners])

	os.makedirs(output_dir, exist_ok=True)
	written: List[str] = []
	for path, owners in targets.items():
		with open(path, "w", encoding="utf-8") as fh:
			fh.write(dump_service_file(owners[0], fmt))
		written.append(path)
	return written
