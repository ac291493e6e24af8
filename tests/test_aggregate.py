import pytest

from servicemap.aggregate import build_service_files
from servicemap.errors import (
	AmbiguousImplicitOwnerError,
	MixedAddressingModeError,
	NoServiceFoundError,
	NoServicesFoundError,
)
from servicemap.model import Relationship, Service


def _by_name(files):
	return {sf.info.name: sf for sf in files}


def test_implicit_relationship_attaches_to_only_service():
	files = build_service_files(
		[Service(name="UserService", description="Manages users")],
		[Relationship(action="uses", target="PostgreSQL", technology="postgresql")],
	)
	assert len(files) == 1
	sf = files[0]
	assert sf.info.name == "UserService"
	assert sf.info.description == "Manages users"
	assert len(sf.relationships) == 1
	rel = sf.relationships[0]
	assert rel.action == "uses"
	assert rel.name == "PostgreSQL"
	assert rel.technology == "postgresql"
	assert rel.description is None
	assert rel.proto is None


def test_explicit_relationship_leaves_other_services_empty():
	files = _by_name(build_service_files(
		[Service(name="A"), Service(name="B")],
		[Relationship(owner="A", action="uses", target="DB")],
	))
	assert set(files) == {"A", "B"}
	assert [r.name for r in files["A"].relationships] == ["DB"]
	assert files["B"].relationships == []


def test_undeclared_owner_creates_bare_service_file():
	files = build_service_files([], [Relationship(owner="GhostService", action="uses", target="X")])
	assert len(files) == 1
	sf = files[0]
	assert sf.info.name == "GhostService"
	assert sf.info.description == ""
	assert sf.info.system == ""
	assert sf.relationships[0].name == "X"


def test_mixed_addressing_modes_fail():
	with pytest.raises(MixedAddressingModeError):
		build_service_files(
			[Service(name="A")],
			[
				Relationship(owner="A", action="uses", target="DB"),
				Relationship(action="sends", target="Queue"),
			],
		)


def test_implicit_relationship_without_services_fails():
	with pytest.raises(NoServiceFoundError):
		build_service_files([], [Relationship(action="uses", target="DB")])


def test_nothing_found_fails():
	with pytest.raises(NoServicesFoundError):
		build_service_files([], [])


def test_ambiguous_implicit_owner_warns_and_picks_first_declared():
	warnings = []
	files = _by_name(build_service_files(
		[Service(name="First"), Service(name="Second")],
		[Relationship(action="uses", target="DB")],
		warn=warnings.append,
	))
	assert [r.name for r in files["First"].relationships] == ["DB"]
	assert files["Second"].relationships == []
	assert len(warnings) == 1
	assert "First" in warnings[0].message


def test_ambiguous_implicit_owner_strict():
	with pytest.raises(AmbiguousImplicitOwnerError):
		build_service_files(
			[Service(name="First"), Service(name="Second")],
			[Relationship(action="uses", target="DB")],
			strict_implicit=True,
		)


def test_duplicates_are_kept_and_sorted():
	files = build_service_files(
		[Service(name="A")],
		[
			Relationship(owner="A", action="uses", target="Redis"),
			Relationship(owner="A", action="sends", target="Queue"),
			Relationship(owner="A", action="uses", target="Postgres"),
			Relationship(owner="A", action="uses", target="Redis"),
		],
	)
	rels = [(r.action, r.name) for r in files[0].relationships]
	assert rels == [
		("sends", "Queue"),
		("uses", "Postgres"),
		("uses", "Redis"),
		("uses", "Redis"),
	]


def test_deterministic_over_repeated_runs():
	services = [Service(name="A"), Service(name="B")]
	relationships = [
		Relationship(owner="B", action="requests", target="A"),
		Relationship(owner="A", action="replies", target="B"),
	]
	first = {sf.info.name: sf.model_dump() for sf in build_service_files(services, relationships)}
	second = {sf.info.name: sf.model_dump() for sf in build_service_files(services, relationships)}
	assert first == second
