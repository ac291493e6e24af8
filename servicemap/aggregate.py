"""Merge parsed records into one ServiceFile per service name.

The engine is a pure function over the complete record sets of a scan:
validation must see every relationship before anything is resolved.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from .errors import (
	AmbiguousImplicitOwnerError,
	MixedAddressingModeError,
	NoServiceFoundError,
	NoServicesFoundError,
)
from .model import (
	AddressingMode,
	Diagnostic,
	Info,
	Relationship,
	RelationshipEntry,
	Service,
	ServiceFile,
)


logger = logging.getLogger(__name__)


def validate_no_mixed_usage(relationships: Iterable[Relationship]) -> None:
	modes = {r.mode for r in relationships}
	if AddressingMode.EXPLICIT in modes and AddressingMode.IMPLICIT in modes:
		raise MixedAddressingModeError()


def determine_service_name(
	relationship: Relationship,
	service_files: Dict[str, ServiceFile],
	strict_implicit: bool = False,
	warn: Optional[Callable[[Diagnostic], None]] = None,
) -> str:
	if relationship.owner:
		return relationship.owner

	if not service_files:
		raise NoServiceFoundError(relationship)

	candidates = list(service_files)
	if len(candidates) > 1:
		if strict_implicit:
			raise AmbiguousImplicitOwnerError(relationship, candidates)
		if warn is not None:
			warn(
				Diagnostic(
					message=(
						f"implicit relationship '{relationship.action} {relationship.target}' "
						f"assigned to '{candidates[0]}' out of {len(candidates)} services"
					),
				)
			)
	return candidates[0]


def _to_entry(relationship: Relationship) -> RelationshipEntry:
	return RelationshipEntry(
		action=relationship.action,
		name=relationship.target,
		technology=relationship.technology or None,
		description=relationship.description or None,
		proto=relationship.proto or None,
	)


def build_service_files(
	services: Iterable[Service],
	relationships: Iterable[Relationship],
	strict_implicit: bool = False,
	warn: Optional[Callable[[Diagnostic], None]] = None,
) -> List[ServiceFile]:
	relationships = list(relationships)
	validate_no_mixed_usage(relationships)

	service_files: Dict[str, ServiceFile] = {}
	for s in services:
		service_files[s.name] = ServiceFile(
			info=Info(name=s.name, description=s.description, system=s.system),
		)

	for r in relationships:
		name = determine_service_name(r, service_files, strict_implicit=strict_implicit, warn=warn)
		if name not in service_files:
			logger.debug("relationship references undeclared service %s", name)
			service_files[name] = ServiceFile(info=Info(name=name))
		service_files[name].relationships.append(_to_entry(r))

	if not service_files:
		raise NoServicesFoundError()

	result: List[ServiceFile] = []
	for sf in service_files.values():
		sf.sort()
		result.append(sf)
	return result
