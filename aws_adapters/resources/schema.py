"""
Attribute schema declarations.

A resource schema is a flat mapping from attribute name to AttributeSchema.
The helpers here fill defaults, validate inputs, and resolve the value an
attribute has when the host did not supply one.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union


class ValueType(str, Enum):
    """Value types an attribute can declare."""
    STRING = "string"
    INT = "int"
    BOOL = "bool"
    LIST = "list"
    SET = "set"
    MAP = "map"


_ZERO_VALUES: dict[ValueType, Callable[[], Any]] = {
    ValueType.STRING: str,
    ValueType.INT: int,
    ValueType.BOOL: bool,
    ValueType.LIST: list,
    ValueType.SET: list,
    ValueType.MAP: dict,
}


@dataclass(frozen=True)
class AttributeSchema:
    """
    Declaration of one resource attribute.

    Attributes:
        type: Value type of the attribute
        required: Host must supply a value
        optional: Host may supply a value
        computed: Value is produced by the adapter
        force_new: A change replaces the resource
        sensitive: Value must not be logged
        default: Value used when the host supplies none
        elem: Element type for list/set/map, or a nested schema for object lists
        validate: Callable raising ValueError for invalid values
        state_func: Normalization applied to inputs before they are stored
    """
    type: ValueType
    required: bool = False
    optional: bool = False
    computed: bool = False
    force_new: bool = False
    sensitive: bool = False
    default: Any = None
    elem: Union[ValueType, dict[str, "AttributeSchema"], None] = None
    validate: Callable[[Any], None] | None = None
    state_func: Callable[[Any], Any] | None = None

    @property
    def computed_only(self) -> bool:
        return self.computed and not (self.required or self.optional)


Schema = dict[str, AttributeSchema]


@dataclass(frozen=True)
class CheckFailure:
    """One input that failed validation."""
    property: str
    reason: str


def zero_value(value_type: ValueType) -> Any:
    """Return the empty value of a type ("" / 0 / False / [] / {})."""
    return _ZERO_VALUES[value_type]()


def get_value(schema: Schema, props: dict[str, Any], key: str) -> Any:
    """
    Resolve the value of an attribute.

    Falls back to the schema default, then to the type's zero value.

    Args:
        schema: Resource schema
        props: Resource properties
        key: Attribute name

    Returns:
        The attribute value
    """
    value = props.get(key)
    if value is not None:
        return value
    attr = schema[key]
    if attr.default is not None:
        return attr.default
    return zero_value(attr.type)


def apply_defaults(schema: Schema, props: dict[str, Any]) -> dict[str, Any]:
    """
    Return a copy of props with schema defaults filled in.

    Nested object lists (e.g. EBS volumes) get their element defaults too.
    """
    result = dict(props)
    for key, attr in schema.items():
        value = result.get(key)
        if value is None:
            if attr.default is not None:
                result[key] = attr.default
            continue
        if isinstance(attr.elem, dict) and isinstance(value, (list, tuple)):
            result[key] = [
                apply_defaults(attr.elem, item) if isinstance(item, dict) else item
                for item in value
            ]
    return result


def _matches_type(value: Any, value_type: ValueType) -> bool:
    if value_type is ValueType.STRING:
        return isinstance(value, str)
    if value_type is ValueType.INT:
        return isinstance(value, int) and not isinstance(value, bool)
    if value_type is ValueType.BOOL:
        return isinstance(value, bool)
    if value_type in (ValueType.LIST, ValueType.SET):
        return isinstance(value, (list, tuple, set, frozenset))
    if value_type is ValueType.MAP:
        return isinstance(value, dict)
    return False


def validate_props(schema: Schema, props: dict[str, Any], path: str = "") -> list[CheckFailure]:
    """
    Validate props against a schema.

    Args:
        schema: Resource schema
        props: Resource properties (defaults already applied)
        path: Prefix for nested property names

    Returns:
        list[CheckFailure]: Empty when props are valid
    """
    failures: list[CheckFailure] = []
    for key, attr in schema.items():
        name = f"{path}{key}"
        value = props.get(key)

        if value is None:
            if attr.required:
                failures.append(CheckFailure(name, "required attribute is missing"))
            continue
        if attr.computed_only:
            continue
        if not _matches_type(value, attr.type):
            failures.append(
                CheckFailure(name, f"expected {attr.type.value}, got {type(value).__name__}")
            )
            continue

        if isinstance(attr.elem, dict):
            for i, item in enumerate(value):
                if not isinstance(item, dict):
                    failures.append(CheckFailure(f"{name}[{i}]", "expected an object"))
                    continue
                failures.extend(validate_props(attr.elem, item, f"{name}[{i}]."))
        elif isinstance(attr.elem, ValueType):
            items = value.values() if isinstance(value, dict) else value
            for item in items:
                if not _matches_type(item, attr.elem):
                    failures.append(
                        CheckFailure(name, f"elements must be {attr.elem.value}, got {item!r}")
                    )
                    break

        if attr.validate is not None:
            try:
                attr.validate(value)
            except ValueError as e:
                failures.append(CheckFailure(name, str(e)))
    return failures


def force_new_keys(schema: Schema) -> list[str]:
    """Attributes whose change replaces the resource."""
    return [key for key, attr in schema.items() if attr.force_new]


def _comparable_object(schema: Schema, item: dict[str, Any]) -> dict[str, Any]:
    item = apply_defaults(schema, item)
    return {key: comparable(attr, item.get(key)) for key, attr in schema.items()}


def comparable(attr: AttributeSchema, value: Any) -> Any:
    """
    Canonical form of a value for change detection.

    None compares equal to the type's zero value. Nested objects are compared
    with their element defaults applied; sets ignore order.
    """
    if value is None:
        value = zero_value(attr.type)
    if isinstance(attr.elem, dict):
        value = [
            _comparable_object(attr.elem, item) if isinstance(item, dict) else item
            for item in value
        ]
    if attr.type is ValueType.SET:
        return sorted(json.dumps(item, sort_keys=True) for item in value)
    if attr.type is ValueType.LIST:
        return list(value)
    return value
