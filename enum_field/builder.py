"""Builder: collects member declarations for one declaration block."""

import keyword
import logging
from typing import Any

from pydantic import ValidationError

from .errors import InvalidId, InvalidName, InvalidOptions
from .models import MemberDeclaration, MemberOptions


logger = logging.getLogger(__name__)

# Names installed on every host type; a member may not take one of them.
RESERVED_NAMES = frozenset(
    {
        "all",
        "find",
        "find_by_id",
        "first",
        "last",
        "members",
        "id_of",
        "define_enum",
        "declare",
    }
)


def validate_member_name(name: Any) -> str:
    """Check that ``name`` can be installed as an accessor on a class.

    Raises:
        InvalidName: If the name is not a public identifier or is reserved.
    """
    if not isinstance(name, str) or not name.isidentifier():
        raise InvalidName(f"Member name must be an identifier, got {name!r}")
    if keyword.iskeyword(name):
        raise InvalidName(f"Member name {name!r} is a Python keyword")
    if name.startswith("_"):
        raise InvalidName(f"Member name {name!r} must not start with an underscore")
    if name in RESERVED_NAMES:
        raise InvalidName(f"Member name {name!r} is reserved")
    return name


def _translate_validation_error(name: str, error: ValidationError) -> Exception:
    """Map a pydantic error on MemberOptions onto the enum_field taxonomy."""
    extra = [e for e in error.errors() if e["type"] == "extra_forbidden"]
    if extra:
        keys = ", ".join(repr(e["loc"][0]) for e in extra)
        return InvalidOptions(
            f"Invalid options for member {name!r}: {keys} (allowed: 'id', 'object')"
        )

    bad_id = next((e for e in error.errors() if e["loc"] and e["loc"][0] == "id"), None)
    if bad_id is not None:
        return InvalidId(
            f"Id for member {name!r} must be an integer, got {bad_id['input']!r}"
        )

    return InvalidOptions(f"Invalid options for member {name!r}: {error}")


class Builder:
    """Single-use collector handed to a declaration block.

    Each ``member`` call is validated immediately. Id collisions are not
    checked here; the Registry does that at commit time against every member
    of the host type.

    Example:
        >>> b = Builder()
        >>> b.member("red")
        >>> b.member("blue", object="blue", id=10)
        >>> [d.name for d in b.declarations]
        ['red', 'blue']
    """

    def __init__(self) -> None:
        self._declarations: list[MemberDeclaration] = []

    def member(self, name: str, **options: Any) -> None:
        """Declare a member.

        Args:
            name: Accessor name for the member.
            **options: ``id`` (int) to pick the id, ``object`` to supply the
                value returned by the accessor.

        Raises:
            InvalidName: If ``name`` cannot be used as an accessor.
            InvalidOptions: If an option other than ``id``/``object`` is given.
            InvalidId: If ``id`` is not an integer.
        """
        validate_member_name(name)

        try:
            parsed = MemberOptions.model_validate(options)
        except ValidationError as e:
            raise _translate_validation_error(name, e) from e

        self._declarations.append(
            MemberDeclaration(
                name=name,
                requested_id=parsed.id,
                value=parsed.value,
                has_value=parsed.has_value,
            )
        )
        logger.debug("Declared member %r (id=%s)", name, parsed.id)

    @property
    def declarations(self) -> tuple[MemberDeclaration, ...]:
        return tuple(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)
