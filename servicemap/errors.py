from __future__ import annotations


class ServiceMapError(Exception):
	"""Base class for every fatal scan error."""


class DiscoveryError(ServiceMapError):
	pass


class ParseFileError(ServiceMapError):
	def __init__(self, path: str, reason: str):
		super().__init__(f"failed to parse {path}: {reason}")
		self.path = path
		self.reason = reason


class MalformedTagError(ServiceMapError):
	pass


class MixedAddressingModeError(ServiceMapError):
	def __init__(self) -> None:
		super().__init__(
			"mixed relationship definition patterns detected: some relationships use "
			"explicit patterns (service:name:action) while others use implicit patterns "
			"(service:action)"
		)


class NoServiceFoundError(ServiceMapError):
	def __init__(self, relationship: object):
		super().__init__(f"no service name found for relationship: {relationship}")
		self.relationship = relationship


class AmbiguousImplicitOwnerError(ServiceMapError):
	def __init__(self, relationship: object, candidates):
		names = ", ".join(candidates)
		super().__init__(
			f"implicit relationship ({relationship}) is ambiguous between services: {names}"
		)
		self.relationship = relationship
		self.candidates = list(candidates)


class NoServicesFoundError(ServiceMapError):
	def __init__(self) -> None:
		super().__init__("no services found")


class OutputCollisionError(ServiceMapError):
	def __init__(self, path: str, names):
		joined = ", ".join(names)
		super().__init__(f"services {joined} would all be written to {path}")
		self.path = path
		self.names = list(names)
