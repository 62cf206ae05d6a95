"""Declaration entry points.

Ties a Builder to a host type's Registry and installs the lookup surface
and one accessor per member on the host:

    class Colors:
        pass

    define_enum(Colors, lambda b: (b.member("red"), b.member("green")))

    with declare(Colors) as b:
        b.member("blue", object="blue")

    Colors.red()          # a Colors instance
    Colors.red().id       # 1
    Colors.blue()         # "blue"
    Colors.find(1)        # Colors.red()
    Colors.all()          # [red, green, "blue"]
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Any

from .builder import Builder
from .errors import EnumFieldError, InvalidName
from .models import Member, RegistryConfig
from .registry import Registry


logger = logging.getLogger(__name__)

REGISTRY_ATTR = "__enum_registry__"

DeclarationBlock = Callable[[Builder], Any]


def registry_of(host: type) -> Registry | None:
    """The registry declared on ``host`` itself, or None.

    Registries are never inherited: a subclass of an enum host has none of
    its own until it declares members.
    """
    return vars(host).get(REGISTRY_ATTR)


def define_enum(
    host: type,
    block: DeclarationBlock,
    config: RegistryConfig | None = None,
) -> Registry:
    """Run a declaration block for ``host`` and commit its members.

    Args:
        host: Class receiving the members.
        block: Called with a fresh Builder.
        config: Registry settings, only honoured when the registry is created.

    Returns:
        The host's Registry.
    """
    builder = Builder()
    block(builder)
    return _commit(host, builder, config)


@contextmanager
def declare(host: type, config: RegistryConfig | None = None) -> Iterator[Builder]:
    """Context-manager form of ``define_enum``.

    Members are committed when the ``with`` body exits cleanly. If the body
    raises, nothing is committed.
    """
    builder = Builder()
    yield builder
    _commit(host, builder, config)


class EnumField:
    """Mixin giving a class ``define_enum`` and ``declare`` classmethods.

    ``define_enum`` also works as a decorator:

        class Sizes(EnumField):
            pass

        @Sizes.define_enum
        def _sizes(b):
            b.member("small", id=1)
            b.member("medium")
    """

    @classmethod
    def define_enum(
        cls, block: DeclarationBlock, config: RegistryConfig | None = None
    ) -> Registry:
        return define_enum(cls, block, config=config)

    @classmethod
    def declare(
        cls, config: RegistryConfig | None = None
    ) -> AbstractContextManager[Builder]:
        return declare(cls, config=config)


def _commit(host: type, builder: Builder, config: RegistryConfig | None) -> Registry:
    registry = registry_of(host)
    created = registry is None

    if created:
        registry = Registry(config=config, owner=host.__qualname__)
    elif config is not None and config != registry.config:
        raise EnumFieldError(
            f"{host.__qualname__} already has a registry with {registry.config!r}"
        )

    declared = set(registry.names())
    for decl in builder.declarations:
        if decl.name not in declared and decl.name in vars(host):
            raise InvalidName(
                f"Member {decl.name!r} would shadow an attribute of {host.__qualname__}"
            )

    added = registry.commit(builder.declarations, factory=host)

    if created:
        setattr(host, REGISTRY_ATTR, registry)
        _install_surface(host, registry)
    for member in added:
        setattr(host, member.name, _make_accessor(host, member))

    return registry


def _install_surface(host: type, registry: Registry) -> None:
    """Expose the registry's queries as zero-state callables on ``host``."""
    for name in ("all", "find", "find_by_id", "first", "last", "members", "id_of"):
        setattr(host, name, staticmethod(getattr(registry, name)))
    logger.debug("Installed enum surface on %s", host.__qualname__)


def _make_accessor(host: type, member: Member) -> staticmethod:
    value = member.value

    def accessor() -> Any:
        return value

    accessor.__name__ = member.name
    accessor.__qualname__ = f"{host.__qualname__}.{member.name}"
    accessor.__doc__ = f"Member {member.name!r} (id {member.id})."
    return staticmethod(accessor)
