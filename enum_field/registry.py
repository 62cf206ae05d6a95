"""Registry: the committed members of one host type.

A Registry owns the ordered member list, the id and name indices and the
auto-id counter. It is created on a host type's first declaration block and
only ever appended to afterwards.

Id assignment:
    - An explicit id is used as given and never moves the counter.
    - Otherwise the counter skips ids already taken, hands out the next free
      one and advances by 1.
    - Any id already present raises RepeatedId.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .errors import EmptyRegistry, ObjectNotFound, RepeatedId, RepeatedName
from .models import Member, MemberDeclaration, RegistryConfig


logger = logging.getLogger(__name__)


class Registry:
    """Ordered, id-indexed set of members for one host type.

    Args:
        config: Registry settings. Defaults to ``RegistryConfig()``.
        owner: Name used in log and error messages, usually the host's
            qualified name.
    """

    def __init__(self, config: RegistryConfig | None = None, owner: str = "") -> None:
        self.config = config or RegistryConfig()
        self.owner = owner
        self._members: list[Member] = []
        self._by_id: dict[int, Member] = {}
        self._by_name: dict[str, Member] = {}
        self._next_auto_id = self.config.start_id

    # =========================================================================
    # Commit
    # =========================================================================

    def commit(
        self,
        declarations: Iterable[MemberDeclaration],
        factory: Callable[[], Any],
    ) -> list[Member]:
        """Register a block of declarations.

        The block is planned against staged copies of the indices and applied
        only when every declaration succeeds, so a failing block leaves the
        registry exactly as it was.

        Args:
            declarations: Validated declarations in block order.
            factory: Called once per member that has no ``object`` option.
                The instance it returns gets ``id`` and ``name`` attributes.

        Returns:
            The newly committed members in block order.

        Raises:
            RepeatedId: If a resolved id is already taken.
            RepeatedName: If a name is already declared.
        """
        by_id = dict(self._by_id)
        by_name = dict(self._by_name)
        next_auto_id = self._next_auto_id
        added: list[Member] = []

        try:
            for decl in declarations:
                if decl.name in by_name:
                    raise RepeatedName(decl.name)

                if decl.requested_id is not None:
                    member_id = decl.requested_id
                else:
                    while next_auto_id in by_id:
                        next_auto_id += 1
                    member_id = next_auto_id
                    next_auto_id += 1

                if member_id in by_id:
                    raise RepeatedId(member_id, decl.name)

                if decl.has_value:
                    value = decl.value
                else:
                    value = factory()
                    # Only factory-built values are tagged; supplied objects stay untouched
                    value.id = member_id
                    value.name = decl.name
                member = Member(id=member_id, name=decl.name, value=value)
                by_id[member_id] = member
                by_name[decl.name] = member
                added.append(member)
        except (RepeatedId, RepeatedName) as e:
            logger.debug("Commit on %s rejected: %s", self.owner or "registry", e)
            raise

        self._members.extend(added)
        self._by_id = by_id
        self._by_name = by_name
        self._next_auto_id = next_auto_id

        for member in added:
            logger.debug("Registered %s.%s with id %d", self.owner, member.name, member.id)
        logger.debug(
            "Committed %d member(s) to %s (%d total)",
            len(added),
            self.owner or "registry",
            len(self._members),
        )
        return added

    # =========================================================================
    # Queries
    # =========================================================================

    def all(self) -> list[Any]:
        """Values of every member, in declaration order."""
        return [m.value for m in self._members]

    def first(self) -> Any:
        if not self._members:
            raise EmptyRegistry(f"{self.owner or 'Registry'} has no members")
        return self._members[0].value

    def last(self) -> Any:
        if not self._members:
            raise EmptyRegistry(f"{self.owner or 'Registry'} has no members")
        return self._members[-1].value

    def _lookup(self, member_id: Any) -> Member | None:
        # bool hashes like 0/1 and unhashable ids would raise; neither is an id
        if not isinstance(member_id, int) or isinstance(member_id, bool):
            return None
        return self._by_id.get(member_id)

    def find_by_id(self, member_id: int) -> Any | None:
        """Value for ``member_id``, or None when no member has that id.

        Never raises: anything that is not an int is simply absent.
        """
        member = self._lookup(member_id)
        return member.value if member is not None else None

    def find(self, member_id: int) -> Any:
        """Value for ``member_id``.

        Raises:
            ObjectNotFound: If no member has that id.
        """
        member = self._lookup(member_id)
        if member is None:
            raise ObjectNotFound(
                f"{self.owner or 'Registry'} has no member with id {member_id!r}"
            )
        return member.value

    def member(self, name: str) -> Member:
        """The Member record declared under ``name``."""
        try:
            return self._by_name[name]
        except KeyError:
            raise ObjectNotFound(
                f"{self.owner or 'Registry'} has no member named {name!r}"
            ) from None

    def members(self) -> list[Member]:
        return list(self._members)

    def names(self) -> list[str]:
        return [m.name for m in self._members]

    def id_of(self, value: Any) -> int:
        """Id of the member whose value is ``value`` (compared by identity)."""
        for member in self._members:
            if member.value is value:
                return member.id
        raise ObjectNotFound(f"{value!r} is not a member of {self.owner or 'registry'}")

    @property
    def next_auto_id(self) -> int:
        return self._next_auto_id

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Member]:
        return iter(list(self._members))

    def __contains__(self, member_id: object) -> bool:
        return self._lookup(member_id) is not None

    def __repr__(self) -> str:
        return f"Registry({self.owner!r}, members={self.names()!r})"
