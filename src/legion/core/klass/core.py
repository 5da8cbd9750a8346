"""Extension engine: the root Type and the extend/implement operations.

Usage:
    Animal = Class.extend({"class_name": "Animal", "species": None})
    Cat = Animal.extend({"class_name": "Cat", "species": "cat"})

    # An override reaches the implementation it replaces through `parent`
    Base = Class.extend({"class_name": "Base", "speak": lambda self: "base"})
    Child = Base.extend({"speak": lambda self, parent: "child-" + parent()})
    Child().speak()  # "child-base"

    # Compose reusable definitions into one Type
    four_legged = {"legs": 4}
    tail = {"tail": True}
    Cat = Animal.implement([four_legged, tail, {"species": "cat"}])
"""

from __future__ import annotations

import inspect
import types
import warnings
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Any, ClassVar, Self

from legion.core.chain import MethodChain, chain_override, is_method
from legion.core.identity import IdentityRecord
from legion.core.klass.models import Definition, DefinitionSource, UnsafeMixinWarning
from legion.core.registry import ClassRegistry, get_registry
from legion.strings import message

_MISSING = object()


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _binds_to_instance(value: Any) -> bool:
    if isinstance(value, MethodChain):
        return True
    if not inspect.isfunction(value):
        return False
    params = list(inspect.signature(value).parameters)
    return bool(params) and params[0] == "self"


def _check_keys(definition: Mapping[Any, Any]) -> dict[str, Any]:
    for key in definition:
        if not isinstance(key, str):
            raise TypeError(f"Definition keys must be strings, got {key!r}")
    return dict(definition)


class Class:
    """The root legion Type. Every Type produced by extend() derives from it.

    Instances are created with ``Type(properties)``, which runs ``_prepare``
    and then ``init``. ``Type.raw()`` runs ``_prepare`` only.
    """

    registry: ClassVar[ClassRegistry] = get_registry()
    _root: ClassVar[type[Class]]

    class_name: str = "Class"
    """Name the Type is registered under. Inherited unless a definition sets it."""

    game: Any = None
    """The game this object is bound to."""

    id: Any = None
    """Unique id of the object, assigned when it is bound to a game."""

    client_id: Any = None
    """Id of the client that owns the object. None means the server owns it."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._prepare()
        self.init(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<{self.class_name} id={self.id!r} client_id={self.client_id!r}>"

    @classmethod
    def raw(cls) -> Self:
        """Create an instance without running ``init``.

        ``_prepare`` still runs, so the instance has the internal state its
        methods rely on.
        """
        instance = cls.__new__(cls)
        instance._prepare()
        return instance

    @classmethod
    def extend(cls, definition: Definition) -> type[Self]:
        """Return a new Type extending this one with ``definition``.

        Functions in the definition that replace an existing method are
        chained: declare a ``parent`` parameter to call the replaced one.

        Args:
            definition: Mapping of member names to values or functions.

        Returns:
            New Type. This Type is left unchanged.

        Raises:
            TypeError: If definition is not a mapping.
        """
        if not isinstance(definition, Mapping):
            raise TypeError(
                f"extend() takes a mapping of members, got {type(definition).__name__}; "
                f"use implement() for classes and factories"
            )
        return cls._extend_single(definition)

    @classmethod
    def implement(cls, child: DefinitionSource | list[Any] | tuple[Any, ...]) -> type[Self]:
        """Return a new Type with ``child`` merged in.

        Like extend(), but also takes classes, zero-argument factories, or a
        list of any of these applied left to right. Members are copied and
        ``parent`` works in overridden methods, but isinstance() is not true
        for the classes passed in.

        Args:
            child: A definition mapping, a class, a factory, or a list of them.

        Returns:
            New Type (this Type itself for an empty list).
        """
        if isinstance(child, (list, tuple)):
            result: type[Self] = cls
            for item in child:
                result = result._extend_single(item)
            return result
        return cls._extend_single(child)

    @classmethod
    def _extend_single(cls, child: DefinitionSource) -> type[Self]:
        """Merge one definition source into a new subclass and register it."""
        definition = _materialize(child)

        class_name = definition.get("class_name", cls.class_name)
        if not isinstance(class_name, str):
            raise TypeError(f"class_name must be a string, got {class_name!r}")

        namespace: dict[str, Any] = {}
        for key, value in definition.items():
            existing = inspect.getattr_static(cls, key, _MISSING)
            namespace[key] = chain_override(key, existing, value)

        new_cls = type(class_name, (cls,), namespace)
        cls.registry.register(new_cls)
        return new_cls

    def _prepare(self) -> None:
        """Set up internal state every instance needs, revived ones included.

        Runs before ``init`` and from ``raw()``. Types that keep per-instance
        containers create them here rather than in ``init``.
        """

    def init(self, properties: Definition | None = None, /, **kwargs: Any) -> None:
        """Default constructor body: safe mixin of the given properties."""
        if kwargs:
            properties = {**(properties or {}), **kwargs}
        self.mixin(properties, True)

    def mixin(self, properties: Definition | None, safe: bool = False) -> Self:
        """Copy ``properties`` onto this object.

        Functions whose first parameter is named ``self`` are bound so they
        behave as methods; other functions (callbacks) are stored as they are
        and called without the instance. In safe mode a function
        that would replace an existing method is skipped with an
        UnsafeMixinWarning, since replacing a chained method breaks
        ``parent``. Add methods with extend() or implement() instead.

        Args:
            properties: Mapping of names to values. None is a no-op.
            safe: Skip functions that would replace existing methods.

        Returns:
            This object.
        """
        if not properties:
            return self
        for key, value in properties.items():
            if safe and is_method(value) and inspect.isroutine(getattr(self, key, None)):
                warnings.warn(message("unsafe_mixin", key=key), UnsafeMixinWarning, stacklevel=2)
                continue
            if _binds_to_instance(value):
                value = types.MethodType(value, self)
            setattr(self, key, value)
        return self

    def _bind_game(self, game: Any) -> None:
        """Bind this object to the game it is added to.

        Assigns an id and client_id from the game only where they are still
        unset, so binding again never changes them.
        """
        self.game = game
        if game:
            if self.id is None:
                self.id = game._get_object_id()
            if self.client_id is None:
                self.client_id = game.client_id

    def serialize(self) -> dict[str, Any]:
        """Return the wire identity ``{"id", "clientID", "className"}``."""
        return IdentityRecord(
            id=self.id, client_id=self.client_id, class_name=self.class_name
        ).to_wire()


Class._root = Class
Class.registry.register(Class)


def define_root(registry: ClassRegistry | None = None) -> type[Class]:
    """Create an independent root Type bound to its own registry.

    Types extended from the returned root register into ``registry``
    instead of the default one.

    Args:
        registry: Registry for the new hierarchy. A fresh one if omitted.

    Returns:
        New root Type with ``class_name`` "Class".
    """
    registry = registry if registry is not None else ClassRegistry()
    root = type("Class", (Class,), {"registry": registry})
    root._root = root
    registry.register(root)
    return root


def _root_handlers(root: type[Class], name: str) -> tuple[Any, ...]:
    value = inspect.getattr_static(root, name, _MISSING)
    if isinstance(value, MethodChain):
        return value.handlers
    if is_method(value):
        return (value,)
    return ()


def _type_members(child: type[Class]) -> dict[str, Any]:
    """Members a legion Type adds on top of its root.

    Handlers inherited from the root are stripped from chains, and
    ``class_name`` is left out so the receiving Type keeps its own name.
    """
    root = child._root
    mro = child.__mro__
    members: dict[str, Any] = {}
    for klass in reversed(mro[: mro.index(root)]):
        members.update((k, v) for k, v in vars(klass).items() if not _is_dunder(k))

    members.pop("class_name", None)

    for name, value in members.items():
        if isinstance(value, MethodChain):
            inherited = _root_handlers(root, name)
            if inherited and value.handlers[: len(inherited)] == inherited:
                members[name] = MethodChain(name, value.handlers[len(inherited) :])
    return members


def _class_members(child: type) -> dict[str, Any]:
    """Class-body members of a plain class plus the attributes its constructor sets."""
    members: dict[str, Any] = {}
    for klass in reversed(child.__mro__[:-1]):
        members.update(
            (k, v)
            for k, v in vars(klass).items()
            if not _is_dunder(k) and not inspect.ismemberdescriptor(v)
        )
    members.update(_instance_members(child()))
    return members


def _instance_members(obj: Any) -> dict[str, Any]:
    if isinstance(obj, Mapping):
        return _check_keys(obj)
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    if is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in fields(obj)}
    slots = _slot_names(type(obj))
    if not slots:
        raise TypeError(
            f"Cannot use {type(obj).__name__} as a definition: it has no attributes to copy"
        )
    return {name: getattr(obj, name) for name in slots if hasattr(obj, name)}


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if not _is_dunder(s))
    return names


def _materialize(child: Any) -> dict[str, Any]:
    """Turn any accepted definition source into a plain member mapping."""
    if isinstance(child, Mapping):
        return _check_keys(child)
    if isinstance(child, type):
        if issubclass(child, Class):
            return _type_members(child)
        return _class_members(child)
    if callable(child):
        return _instance_members(child())
    raise TypeError(
        f"Expected a mapping, class or factory to implement, got {type(child).__name__}"
    )
