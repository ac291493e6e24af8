"""Build service-topology documents from annotations in source comments.

Modules:
- tags.py: Recognizing and normalizing tagged comment groups.
- declarations.py: Service and relationship declaration builders.
- aggregate.py: Validation and merging into one ServiceFile per service.
- comments.py: Comment-group extraction for Go/C-style and Python sources.
- fs_scan.py: Source discovery and language detection.
- parser.py: Per-scan CommentParser facade.
- serialize.py: YAML/JSON output and file writing.
"""

from .config import ParserConfig
from .errors import (
	AmbiguousImplicitOwnerError,
	DiscoveryError,
	MalformedTagError,
	MixedAddressingModeError,
	NoServiceFoundError,
	NoServicesFoundError,
	OutputCollisionError,
	ParseFileError,
	ServiceMapError,
)
from .model import ParseResult, ServiceFile
from .parser import CommentParser, parse_directory

__all__ = [
	"AmbiguousImplicitOwnerError",
	"CommentParser",
	"DiscoveryError",
	"MalformedTagError",
	"MixedAddressingModeError",
	"NoServiceFoundError",
	"NoServicesFoundError",
	"OutputCollisionError",
	"ParseFileError",
	"ParseResult",
	"ParserConfig",
	"ServiceFile",
	"ServiceMapError",
	"parse_directory",
]
