"""enum_field: declarative enumerated members for Python classes.

    from enum_field import define_enum

    class Positions:
        pass

    def _positions(b):
        b.member("top")
        b.member("right")
        b.member("bottom")
        b.member("left", id=100)

    define_enum(Positions, _positions)

    Positions.find(100) is Positions.left()
"""

from .builder import Builder, RESERVED_NAMES
from .define import EnumField, declare, define_enum, registry_of
from .errors import (
    EmptyRegistry,
    EnumFieldError,
    InvalidId,
    InvalidName,
    InvalidOptions,
    ObjectNotFound,
    RepeatedId,
    RepeatedName,
)
from .models import Member, MemberDeclaration, MemberOptions, RegistryConfig
from .registry import Registry

__version__ = "0.3.0"

__all__ = [
    # Entry points
    "define_enum",
    "declare",
    "registry_of",
    "EnumField",
    # Core
    "Builder",
    "Registry",
    "RESERVED_NAMES",
    # Models
    "Member",
    "MemberDeclaration",
    "MemberOptions",
    "RegistryConfig",
    # Errors
    "EnumFieldError",
    "InvalidOptions",
    "InvalidId",
    "InvalidName",
    "RepeatedId",
    "RepeatedName",
    "ObjectNotFound",
    "EmptyRegistry",
]
