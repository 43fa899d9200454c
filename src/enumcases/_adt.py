"""Algebraic data types."""
import logging
import re
from dataclasses import dataclass
from types import (
    DynamicClassAttribute,
    GenericAlias,
    MappingProxyType,
    new_class,
)
from typing import Any, TypeVar


log = logging.getLogger(__name__)

T = TypeVar("T")

# never copied from an ADT body onto its variant classes
_NOT_SHARED = frozenset(
    {
        "__annotate__",
        "__class_getitem__",
        "__init__",
        "__init_subclass__",
        "__new__",
        "__post_init__",
    }
)


def _is_dunder(name: str) -> bool:
    return (
        len(name) > 4
        and name[:2] == name[-2:] == "__"
        and name[2] != "_"
        and name[-3] != "_"
    )


def _is_sunder(name: str) -> bool:
    return (
        len(name) > 2
        and name[0] == name[-1] == "_"
        and name[1] != "_"
        and name[-2] != "_"
    )


def _is_private(cls_name: str, name: str) -> bool:
    return name.startswith("_%s__" % cls_name.lstrip("_"))


def _is_descriptor(obj: Any) -> bool:
    return (
        hasattr(obj, "__get__") or hasattr(obj, "__set__") or hasattr(obj, "__delete__")
    )


def case_method_name(case_name: str) -> str:
    """
    The visitor method handling a case: `Literal` -> `visit_literal`,
    `QrCode` -> `visit_qr_code`, `NORTH` -> `visit_north`.
    """
    return "visit_" + re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", case_name).lower()


class auto:
    """
    Placeholder for a raw value computed by `_generate_next_value_`.
    """

    def __repr__(self):
        return "auto()"


class _CaseDict(dict):
    """
    Class namespace for ADTs.

    Records the names of cases, in definition order, as the class body
    assigns them.
    """

    def __init__(self, cls_name: str):
        super().__init__()
        self._cls_name = cls_name
        self._member_names: list[str] = []

    def __setitem__(self, key: str, value: Any) -> None:
        if _is_dunder(key) or _is_sunder(key) or _is_private(self._cls_name, key):
            pass
        elif key in self._member_names:
            raise TypeError("%r already defined as a case" % key)
        elif isinstance(value, type) or not _is_descriptor(value):
            if key in self:
                raise TypeError("%r already defined as %r" % (key, self[key]))
            self._member_names.append(key)
        super().__setitem__(key, value)


class ADTMeta(type):
    """
    Metaclass for ADT
    """

    def __instancecheck__(self, __instance: Any) -> bool:
        owner = getattr(type(__instance), "__objclass__", None)
        if isinstance(owner, ADTMeta) and not isinstance(__instance, type):
            return issubclass(owner, self)
        return super().__instancecheck__(__instance)

    @classmethod
    def __prepare__(metacls, cls, bases, **kwds):
        metacls._check_for_existing_members(cls, bases)
        if len(bases) > 1:
            raise TypeError("ADTs do not support mixins")
        return _CaseDict(cls)

    def __new__(metacls, cls, bases, classdict, **kwds):
        # an ADT class is final once its cases have been defined.
        members = {k: classdict[k] for k in classdict._member_names}
        for name in members:
            del classdict[name]

        invalid_names = set(members) & {"mro", ""}
        if invalid_names:
            raise ValueError("Invalid case name: {0}".format(",".join(invalid_names)))

        if "__doc__" not in classdict:
            classdict["__doc__"] = "An ADT."

        shared = (
            {
                k: v
                for k, v in classdict.items()
                if k not in _NOT_SHARED
                and not _is_sunder(k)
                and (callable(v) or isinstance(v, (property, classmethod)))
            }
            if bases
            else {}
        )

        adt_class = super().__new__(metacls, cls, bases, dict(classdict), **kwds)
        adt_class._member_names_ = []  # names in definition order
        adt_class._member_map_ = {}  # name->case map, aliases included
        adt_class._value2member_map_ = {}  # raw value->case, hashable values only
        adt_class._values_map_ = {}  # name->value case, variants excluded

        last_values = []
        for member_name, value in members.items():
            if isinstance(value, type):
                member = metacls._make_variant(adt_class, member_name, value, shared)
            else:
                if isinstance(value, auto):
                    value = adt_class._generate_next_value_(
                        member_name, 1, len(last_values), last_values[:]
                    )
                last_values.append(value)
                member = object.__new__(adt_class)
                member._value_ = value
                member._name_ = member_name
                member.__objclass__ = adt_class
                # a repeated raw value makes this name an alias
                for canonical in adt_class._values_map_.values():
                    if canonical._value_ == value:
                        member = canonical
                        break

            if member_name not in adt_class._member_map_ and (
                getattr(member, "_name_", None) == member_name
            ):
                adt_class._member_names_.append(member_name)
            setattr(adt_class, member_name, member)
            adt_class._member_map_[member_name] = member

            if not isinstance(member, type):
                adt_class._values_map_.setdefault(member._name_, member)
                try:
                    adt_class._value2member_map_.setdefault(member._value_, member)
                except TypeError:
                    # unhashable raw values are found by a linear search
                    pass

        log.debug("Defined ADT %s with cases %s", cls, adt_class._member_names_)
        return adt_class

    @staticmethod
    def _make_variant(adt_class, member_name, value, shared):
        def customize_subclass_ns(ns: dict[str, Any]):
            ns.update(shared)
            ns["__module__"] = value.__module__
            ns["__doc__"] = value.__doc__
            ns["__objclass__"] = adt_class
            ns["_name_"] = member_name

        # subclass the declared class so the ADT's methods come along
        return new_class(
            "%s.%s" % (adt_class.__qualname__, member_name),
            (value,),
            exec_body=customize_subclass_ns,
        )

    def __bool__(self):
        """
        classes/types should always be True.
        """
        return True

    def __call__(cls, value):
        """
        Return the case whose raw value is `value`.

        Variant instances of this ADT are returned unchanged.
        """
        return cls.__new__(cls, value)

    def __contains__(cls, obj):
        return isinstance(obj, cls)

    def __delattr__(cls, attr):
        if attr in cls._member_map_:
            raise AttributeError("%s: cannot delete a case." % cls.__name__)
        super().__delattr__(attr)

    def __dir__(self):
        return [
            "__class__",
            "__doc__",
            "__members__",
            "__module__",
        ] + self._member_names_

    def __getattr__(cls, name):
        if _is_dunder(name):
            raise AttributeError(name)
        try:
            return cls._member_map_[name]
        except KeyError:
            raise AttributeError(name) from None

    def __iter__(cls):
        """
        Returns cases in definition order.
        """
        return (cls._member_map_[name] for name in cls._member_names_)

    def __len__(cls):
        return len(cls._member_names_)

    @property
    def __members__(cls):
        """
        Returns a read-only mapping of case name->case, aliases included.
        """
        return MappingProxyType(cls._member_map_)

    def __repr__(cls):
        return "<ADT %r>" % cls.__name__

    def __reversed__(cls):
        """
        Returns cases in reverse definition order.
        """
        return (cls._member_map_[name] for name in reversed(cls._member_names_))

    def __setattr__(cls, name, value):
        """
        Block attempts to reassign cases.
        """
        member_map = cls.__dict__.get("_member_map_", {})
        if name in member_map:
            raise AttributeError("Cannot reassign cases.")
        super().__setattr__(name, value)

    @staticmethod
    def _check_for_existing_members(class_name, bases):
        for chain in bases:
            for base in chain.__mro__:
                if isinstance(base, ADTMeta) and base.__dict__.get("_member_names_"):
                    raise TypeError(
                        "%s: cannot extend ADT %r" % (class_name, base.__name__)
                    )


class ADT(metaclass=ADTMeta):
    """
    An algebraic data type.

    Derive from this class to define new algebraic data types.
    """

    def __new__(cls, value):
        # all value cases are created during class construction without
        # calling this method; this method is called by the metaclass'
        # __call__ (i.e. Planet(3) ), and by pickle
        member = cls._find_member(value)
        if member is not None:
            return member
        result = cls._missing_(value)
        if isinstance(result, cls):
            return result
        if result is not None:
            raise TypeError(
                "error in %s._missing_: returned %r instead of None or a valid case"
                % (cls.__name__, result)
            )
        raise ValueError("%r is not a valid %s" % (value, cls.__qualname__))

    @classmethod
    def _find_member(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls._value2member_map_.get(value)
        except TypeError:
            for member in cls._values_map_.values():
                if member._value_ == value:
                    return member
        return None

    @classmethod
    def lookup(cls, value) -> "Option":
        """
        Find the case with the raw value `value`, if there is one.

        Unlike calling the class, a value with no matching case gives
        `Option.NONE` instead of raising.
        """
        member = cls._find_member(value)
        if member is None:
            return Option.NONE
        return Option.Some(member)

    def _generate_next_value_(name, start, count, last_values):
        """
        Generate the next raw value for an `auto()` case.

        name: the name of the case
        start: the initial start value
        count: the number of value cases defined so far
        last_values: the raw values defined so far
        """
        for last_value in reversed(last_values):
            try:
                return last_value + 1
            except TypeError:
                pass
        return start

    @classmethod
    def _missing_(cls, value):
        return None

    def __repr__(self):
        return "<%s.%s: %r>" % (self.__class__.__name__, self._name_, self._value_)

    def __str__(self):
        return "%s.%s" % (self.__class__.__name__, self._name_)

    def __dir__(self):
        """
        Returns all cases and all public methods
        """
        added_behavior = [
            m
            for cls in self.__class__.mro()
            for m in cls.__dict__
            if m[0] != "_" and m not in self._member_map_
        ] + [m for m in self.__dict__ if m[0] != "_"]
        return ["__class__", "__doc__", "__module__"] + added_behavior

    def __format__(self, format_spec):
        return str.__format__(str(self), format_spec)

    def __hash__(self):
        return hash(self._name_)

    def __reduce_ex__(self, proto):
        return self.__class__, (self._value_,)

    # DynamicClassAttribute keeps `name` and `value` available on cases
    # while still allowing an ADT to have cases named `name` and `value`.

    @DynamicClassAttribute
    def name(self):
        """The name of the case."""
        return self._name_

    @DynamicClassAttribute
    def value(self):
        """The raw value of the case."""
        return self._value_

    def __class_getitem__(cls, types):
        return GenericAlias(cls, types)


class Option(ADT[T]):
    """An optional value: `Option.NONE` or `Option.Some(val)`."""

    NONE = None

    @dataclass(frozen=True)
    class Some:
        val: T

    def is_some(self) -> bool:
        return self is not Option.NONE

    def is_none(self) -> bool:
        return self is Option.NONE

    def unwrap(self) -> T:
        if self is Option.NONE:
            raise RuntimeError("Value not present")
        return self.val

    def unwrap_or(self, default: T) -> T:
        if self is Option.NONE:
            return default
        return self.val

    def __iter__(self):
        return iter([] if self is Option.NONE else [self.val])


class Visitor:
    """
    Exhaustive dispatch over the cases of an ADT.

    Subclass with `adt=` to declare which ADT is visited:

        class Evaluator(Visitor, adt=Expression):
            def visit_literal(self, node): ...

    Every case needs a `visit_<case>` method (see `case_method_name`);
    a missing one is a `TypeError` when the class is defined. Subclasses
    without `adt=` are left unchecked.
    """

    adt: ADTMeta = None
    # case name -> handler method name, fixed when `adt=` is given
    _handlers_: dict[str, str] = {}

    def __init_subclass__(cls, adt: ADTMeta = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if adt is None:
            return
        if not isinstance(adt, ADTMeta):
            raise TypeError("%r is not an ADT" % (adt,))
        handlers = {name: case_method_name(name) for name in adt._member_names_}
        missing = [
            method
            for method in handlers.values()
            if not callable(getattr(cls, method, None))
        ]
        if missing:
            raise TypeError(
                "%s does not handle every case of %s; missing %s"
                % (cls.__name__, adt.__name__, ", ".join(missing))
            )
        cls.adt = adt
        cls._handlers_ = handlers

    def visit(self, value):
        if self.adt is None:
            raise TypeError("%s is not bound to an ADT" % type(self).__name__)
        if not isinstance(value, self.adt):
            raise TypeError(
                "expected a %s, got %r" % (self.adt.__name__, type(value).__name__)
            )
        return getattr(self, self._handlers_[value._name_])(value)
