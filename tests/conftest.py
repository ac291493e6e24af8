from textwrap import dedent

import pytest


USER_SERVICE = dedent(
	"""\
	// service:name UserService
	// description: Manages users and sessions
	// system: accounts
	package main
	"""
)

POSTGRES = dedent(
	"""\
	package postgres

	/*
	service:uses PostgreSQL
	description: Stores user data and authentication tokens
	technology:postgresql
	proto:tcp
	*/
	type Connection struct{}
	"""
)

REDIS = dedent(
	'''\
	class Cache:
		"""Session cache.

		service:uses Redis
		technology:redis
		"""
	'''
)


@pytest.fixture
def project(tmp_path):
	"""A small source tree with one service and two implicit relationships."""
	(tmp_path / "main.go").write_text(USER_SERVICE)
	db = tmp_path / "database" / "postgres"
	db.mkdir(parents=True)
	(db / "postgres.go").write_text(POSTGRES)
	(tmp_path / "cache.py").write_text(REDIS)
	(tmp_path / "README.md").write_text("service:uses Nothing\n")
	return tmp_path
