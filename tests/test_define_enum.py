"""Tests for declaring members on host classes."""

import pytest

from enum_field import (
    EnumField,
    EnumFieldError,
    InvalidId,
    InvalidName,
    InvalidOptions,
    ObjectNotFound,
    RegistryConfig,
    RepeatedId,
    RepeatedName,
    declare,
    define_enum,
    registry_of,
)


class TestDefiningEnums:
    """Tests for define_enum and the accessors it installs."""

    def test_mixin_adds_define_enum(self):
        class TestClass(EnumField):
            pass

        assert callable(TestClass.define_enum)

    def test_block_is_called_with_a_builder(self, make_host):
        seen = []
        define_enum(make_host(), lambda b: seen.append(hasattr(b, "member")))

        assert seen == [True]

    def test_empty_block_creates_registry(self, make_host):
        host = make_host()
        registry = define_enum(host, lambda b: None)

        assert registry_of(host) is registry
        assert host.all() == []

    def test_undeclared_class_has_no_surface(self, colors, make_host):
        plain = make_host()

        assert registry_of(plain) is None
        assert not hasattr(plain, "red")
        assert not hasattr(plain, "all")
        assert not hasattr(EnumField, "red")
        assert not hasattr(type, "red")

    def test_generates_instances_of_host(self, colors):
        assert isinstance(colors.red(), colors)
        assert isinstance(colors.green(), colors)
        assert colors.red() is not colors.green()

    def test_accessor_returns_same_value_each_call(self, colors):
        assert colors.red() is colors.red()

    def test_incremental_ids(self, colors):
        registry = registry_of(colors)
        assert registry.member("red").id == 1
        assert registry.member("green").id == 2
        assert colors.id_of(colors.green()) == 2

    def test_default_values_expose_id_and_name(self, colors):
        assert colors.red().id == 1
        assert colors.green().id == 2
        assert colors.green().name == "green"

    def test_auto_id_after_explicit_id_on_value(self, make_host):
        sizes = make_host("Sizes")

        def _sizes(b):
            b.member("small", id=1)
            b.member("medium")

        define_enum(sizes, _sizes)

        assert sizes.small().id == 1
        assert sizes.medium().id == 2

    def test_custom_objects(self, colors):
        @colors.define_enum
        def _more(b):
            b.member("blue", object="blue")

        assert isinstance(colors.red(), colors)
        assert colors.blue() == "blue"

    def test_custom_ids(self, colors):
        colors.define_enum(lambda b: b.member("yellow", id=98765))

        assert colors.id_of(colors.yellow()) == 98765
        assert colors.find(98765) is colors.yellow()

    def test_second_block_appends(self, colors):
        colors.define_enum(lambda b: b.member("blue"))

        assert colors.all() == [colors.red(), colors.green(), colors.blue()]
        assert colors.id_of(colors.blue()) == 3

    def test_accessor_metadata(self, colors):
        assert colors.red.__name__ == "red"
        assert "id 1" in colors.red.__doc__


class TestDeclarationErrors:
    """Errors raised from a declaration block."""

    def test_invalid_options(self, make_host):
        host = make_host()
        with pytest.raises(InvalidOptions):
            define_enum(host, lambda b: b.member("foo", bar=1))

        assert registry_of(host) is None
        assert not hasattr(host, "foo")

    def test_invalid_id(self, colors):
        with pytest.raises(InvalidId):
            colors.define_enum(lambda b: b.member("cyan", id="hola"))
        assert not hasattr(colors, "cyan")

    def test_repeated_id_leaves_existing_members(self, colors):
        red, green = colors.red(), colors.green()

        with pytest.raises(RepeatedId):
            colors.define_enum(lambda b: b.member("brown", id=2))

        assert not hasattr(colors, "brown")
        assert colors.all() == [red, green]
        assert colors.find(2) is green

    def test_repeated_name(self, colors):
        red = colors.red()
        with pytest.raises(RepeatedName):
            colors.define_enum(lambda b: b.member("red", object="other"))
        assert colors.red() is red

    def test_name_shadowing_host_attribute(self):
        class Shape:
            def area(self):
                return 0

        with pytest.raises(InvalidName, match="shadow"):
            define_enum(Shape, lambda b: b.member("area"))

    def test_first_block_failure_leaves_no_registry(self, make_host):
        host = make_host()

        def _block(b):
            b.member("a", id=1)
            b.member("b", id=1)

        with pytest.raises(RepeatedId):
            define_enum(host, _block)
        assert registry_of(host) is None
        assert not hasattr(host, "all")

    def test_conflicting_config(self, make_host):
        host = make_host()
        define_enum(host, lambda b: b.member("a"), config=RegistryConfig(start_id=0))

        with pytest.raises(EnumFieldError):
            define_enum(host, lambda b: b.member("b"), config=RegistryConfig(start_id=5))

        define_enum(host, lambda b: b.member("c"), config=RegistryConfig(start_id=0))
        assert host.id_of(host.c()) == 1


class TestInterface:
    """The query surface installed on the host."""

    def test_all_in_order(self, positions):
        assert positions.all() == [
            positions.top(),
            positions.right(),
            positions.bottom(),
            positions.left(),
        ]

    def test_ids(self, positions):
        assert [m.id for m in positions.members()] == [1, 2, 3, 100]

    def test_find_by_id_and_find_with_auto_ids(self, positions):
        assert positions.find_by_id(1) is positions.top()
        assert positions.find(1) is positions.top()

    def test_find_by_id_with_custom_ids(self, positions):
        assert positions.find_by_id(100) is positions.left()

    def test_find_by_id_missing_is_none(self, positions):
        assert positions.find_by_id(200) is None

    def test_find_missing_raises(self, positions):
        with pytest.raises(ObjectNotFound):
            positions.find(200)

    def test_first_and_last(self, positions):
        assert positions.first() is positions.top()
        assert positions.last() is positions.left()

    def test_all_is_idempotent(self, positions):
        assert positions.all() == positions.all()


class TestRichClasses:
    """Hosts whose members carry their own behaviour."""

    def test_behaviour_on_supplied_objects(self):
        class PhoneType:
            def __init__(self, label):
                self.label = label

        def _phones(b):
            b.member("home", object=PhoneType("home"))
            b.member("commercial", object=PhoneType("commercial"))
            b.member("mobile", object=PhoneType("mobile"))

        define_enum(PhoneType, _phones)

        assert PhoneType.home().label == "home"
        assert [p.label for p in PhoneType.all()] == ["home", "commercial", "mobile"]

    def test_host_needing_arguments_requires_objects(self):
        class Labelled:
            def __init__(self, label):
                self.label = label

        with pytest.raises(TypeError):
            define_enum(Labelled, lambda b: b.member("plain"))


class TestSubclasses:
    """Registries belong to the class that declared them."""

    def test_subclass_gets_its_own_registry(self, colors):
        class DarkColors(colors):
            pass

        assert registry_of(DarkColors) is None

        DarkColors.define_enum(lambda b: b.member("black"))

        assert DarkColors.all() == [DarkColors.black()]
        assert registry_of(DarkColors).member("black").id == 1
        assert not hasattr(colors, "black")
        assert len(registry_of(colors)) == 2


class TestDeclareContextManager:
    """Tests for the with-statement form."""

    def test_commits_on_exit(self, make_host):
        host = make_host()
        with declare(host) as b:
            b.member("small", id=1)
            b.member("medium")
            assert registry_of(host) is None

        assert host.id_of(host.medium()) == 2

    def test_commits_nothing_when_body_raises(self, make_host):
        host = make_host()
        with pytest.raises(RuntimeError):
            with declare(host) as b:
                b.member("small")
                raise RuntimeError("abort")

        assert registry_of(host) is None

    def test_mixin_declare(self, colors):
        with colors.declare() as b:
            b.member("large", id=10)

        assert colors.find(10) is colors.large()
