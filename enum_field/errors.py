"""Error taxonomy for enum_field.

Declaration errors (InvalidOptions, InvalidId, InvalidName, RepeatedId,
RepeatedName) are raised while a declaration block runs or commits.
Lookup errors (ObjectNotFound, EmptyRegistry) are raised at query time.
"""


class EnumFieldError(Exception):
    """Base class for all enum_field errors."""


class InvalidOptions(EnumFieldError):
    """A member was declared with an option other than ``id`` or ``object``."""


class InvalidId(EnumFieldError):
    """The ``id`` option was supplied but is not an integer."""


class InvalidName(EnumFieldError):
    """The member name cannot be used as an accessor on the host type."""


class RepeatedId(EnumFieldError):
    """The resolved id is already taken on the host type."""

    def __init__(self, member_id: int, name: str) -> None:
        self.member_id = member_id
        self.name = name
        super().__init__(f"Id {member_id} for member {name!r} is already in use")


class RepeatedName(EnumFieldError):
    """The member name is already declared on the host type."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Member {name!r} is already declared")


class ObjectNotFound(EnumFieldError, LookupError):
    """A lookup by id, name or value found nothing."""


class EmptyRegistry(EnumFieldError, LookupError):
    """first() or last() was called before any member was declared."""
