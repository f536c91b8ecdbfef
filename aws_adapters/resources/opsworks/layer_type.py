"""
OpsWorks layer type descriptors.

OpsWorks has a single "layer" API type that stands for several different
layer kinds. The kinds differ only in extra settings packed into the layer's
generic string-to-string Attributes bag, but they are exposed here as
first-class resource types, each with its own schema. A LayerType is the
static description of one kind; this module also holds the translation
between flat local state and the nested request/response structures that all
kinds share.
"""

from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Any, Mapping

from aws_adapters.configs.constants import (
    DEFAULT_INSTANCE_SHUTDOWN_TIMEOUT,
    DEFAULT_VOLUME_IOPS,
    DEFAULT_VOLUME_TYPE,
    OPSWORKS_FALSE_STRING,
    OPSWORKS_TRUE_STRING,
    RECIPE_EVENTS,
)
from aws_adapters.errors import LayerDescriptorError
from aws_adapters.resources.opsworks.models import EbsVolume, volume_state_from_api
from aws_adapters.resources.schema import (
    AttributeSchema,
    Schema,
    ValueType,
    get_value,
)
from aws_adapters.utils.json_utils import normalize_json_string
from aws_adapters.utils.naming import validate_arn
from aws_adapters.utils.numbers import parse_decimal


@dataclass(frozen=True)
class LayerTypeAttribute:
    """
    One kind-specific setting carried in the Attributes bag.

    Attributes:
        attr_name: Key in the remote Attributes bag
        type: STRING, INT or BOOL
        default: Default value for the local attribute
        required: Host must supply a value
        write_only: API returns a placeholder on read, so reads never overwrite it
    """
    attr_name: str
    type: ValueType
    default: Any = None
    required: bool = False
    write_only: bool = False


def _volume_schema() -> Schema:
    return {
        "iops": AttributeSchema(ValueType.INT, optional=True, default=DEFAULT_VOLUME_IOPS),
        "mount_point": AttributeSchema(ValueType.STRING, required=True),
        "number_of_disks": AttributeSchema(ValueType.INT, required=True),
        "raid_level": AttributeSchema(ValueType.STRING, optional=True, default=""),
        "size": AttributeSchema(ValueType.INT, required=True),
        "type": AttributeSchema(ValueType.STRING, optional=True, default=DEFAULT_VOLUME_TYPE),
        "encrypted": AttributeSchema(ValueType.BOOL, optional=True, default=False),
    }


def base_layer_schema() -> Schema:
    """Attributes shared by every layer kind."""
    recipes = {
        key: AttributeSchema(ValueType.LIST, optional=True, elem=ValueType.STRING)
        for key in RECIPE_EVENTS
    }
    return {
        "auto_assign_elastic_ips": AttributeSchema(ValueType.BOOL, optional=True, default=False),
        "auto_assign_public_ips": AttributeSchema(ValueType.BOOL, optional=True, default=False),
        "custom_instance_profile_arn": AttributeSchema(
            ValueType.STRING, optional=True, validate=validate_arn,
        ),
        "elastic_load_balancer": AttributeSchema(ValueType.STRING, optional=True),
        **recipes,
        "custom_security_group_ids": AttributeSchema(
            ValueType.SET, optional=True, elem=ValueType.STRING,
        ),
        "custom_json": AttributeSchema(
            ValueType.STRING, optional=True, state_func=normalize_json_string,
        ),
        "auto_healing": AttributeSchema(ValueType.BOOL, optional=True, default=True),
        "install_updates_on_boot": AttributeSchema(ValueType.BOOL, optional=True, default=True),
        "instance_shutdown_timeout": AttributeSchema(
            ValueType.INT, optional=True, default=DEFAULT_INSTANCE_SHUTDOWN_TIMEOUT,
        ),
        "drain_elb_on_shutdown": AttributeSchema(ValueType.BOOL, optional=True, default=True),
        "system_packages": AttributeSchema(ValueType.SET, optional=True, elem=ValueType.STRING),
        "stack_id": AttributeSchema(ValueType.STRING, required=True, force_new=True),
        "use_ebs_optimized_instances": AttributeSchema(
            ValueType.BOOL, optional=True, default=False,
        ),
        "ebs_volume": AttributeSchema(ValueType.SET, optional=True, elem=_volume_schema()),
        "arn": AttributeSchema(ValueType.STRING, computed=True),
        "tags": AttributeSchema(ValueType.MAP, optional=True, elem=ValueType.STRING),
        "tags_all": AttributeSchema(ValueType.MAP, computed=True, elem=ValueType.STRING),
    }


@dataclass(frozen=True)
class LayerType:
    """
    Static description of one OpsWorks layer kind.

    Attributes:
        type_name: OpsWorks layer Type (e.g. 'lb', 'java-app')
        default_layer_name: Default for the name attribute; required when empty
        attributes: Local attribute name -> Attributes bag mapping
        custom_short_name: Host supplies short_name instead of using type_name
    """
    type_name: str
    default_layer_name: str = ""
    attributes: Mapping[str, LayerTypeAttribute] = field(default_factory=dict, hash=False)
    custom_short_name: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @cached_property
    def _schema(self) -> Schema:
        schema = base_layer_schema()

        if self.custom_short_name:
            schema["short_name"] = AttributeSchema(ValueType.STRING, required=True)

        if self.default_layer_name:
            schema["name"] = AttributeSchema(
                ValueType.STRING, optional=True, default=self.default_layer_name,
            )
        else:
            schema["name"] = AttributeSchema(ValueType.STRING, required=True)

        for key, attr in self.attributes.items():
            schema[key] = AttributeSchema(
                attr.type,
                required=attr.required,
                optional=not attr.required,
                default=attr.default,
                sensitive=attr.write_only,
            )
        return schema

    def schema(self) -> Schema:
        """Full schema for this kind: base attributes plus kind attributes."""
        return dict(self._schema)

    def get(self, props: dict[str, Any], key: str) -> Any:
        """Value of an attribute, falling back to its default or zero value."""
        return get_value(self._schema, props, key)

    def short_name(self, props: dict[str, Any]) -> str:
        if self.custom_short_name:
            return self.get(props, "short_name")
        return self.type_name

    # ==========================================
    # Attributes bag
    # ==========================================

    def attribute_map(self, props: dict[str, Any]) -> dict[str, str]:
        """
        Serialize kind attributes into the remote Attributes bag.

        Raises:
            LayerDescriptorError: If an attribute declares an unsupported type
        """
        attrs: dict[str, str] = {}
        for key, attr in self.attributes.items():
            value = props.get(key)
            if value is None:
                value = attr.default
            if attr.type is ValueType.STRING:
                attrs[attr.attr_name] = "" if value is None else str(value)
            elif attr.type is ValueType.INT:
                attrs[attr.attr_name] = str(int(value or 0))
            elif attr.type is ValueType.BOOL:
                attrs[attr.attr_name] = OPSWORKS_TRUE_STRING if value else OPSWORKS_FALSE_STRING
            else:
                raise LayerDescriptorError(
                    f"Unsupported OpsWorks layer attribute type: {attr.type.value}"
                )
        return attrs

    def set_attribute_map(self, state: dict[str, Any], attrs: dict[str, str | None] | None) -> None:
        """
        Decode the remote Attributes bag into local state.

        Write-only attributes keep their stored value. Values missing from the
        bag, or that do not decode as the declared type, clear the attribute.

        Raises:
            LayerDescriptorError: If an attribute declares an unsupported type
        """
        attrs = attrs or {}
        for key, attr in self.attributes.items():
            if attr.write_only:
                continue

            raw = attrs.get(attr.attr_name)
            if raw is None:
                state[key] = None
                continue

            if attr.type is ValueType.STRING:
                state[key] = raw
            elif attr.type is ValueType.INT:
                # None when the API returns garbage
                state[key] = parse_decimal(raw)
            elif attr.type is ValueType.BOOL:
                state[key] = raw != OPSWORKS_FALSE_STRING
            else:
                raise LayerDescriptorError(
                    f"Unsupported OpsWorks layer attribute type: {attr.type.value}"
                )

    # ==========================================
    # Lifecycle events
    # ==========================================

    def lifecycle_event_configuration(self, props: dict[str, Any]) -> dict[str, Any]:
        return {
            "Shutdown": {
                "DelayUntilElbConnectionsDrained": bool(self.get(props, "drain_elb_on_shutdown")),
                "ExecutionTimeout": int(self.get(props, "instance_shutdown_timeout")),
            },
        }

    def set_lifecycle_event_configuration(
        self,
        state: dict[str, Any],
        config: dict[str, Any] | None,
    ) -> None:
        shutdown = (config or {}).get("Shutdown")
        if shutdown is None:
            state["drain_elb_on_shutdown"] = None
            state["instance_shutdown_timeout"] = None
        else:
            state["drain_elb_on_shutdown"] = shutdown.get("DelayUntilElbConnectionsDrained")
            state["instance_shutdown_timeout"] = shutdown.get("ExecutionTimeout")

    # ==========================================
    # Custom recipes
    # ==========================================

    def custom_recipes(self, props: dict[str, Any]) -> dict[str, list[str]]:
        """All five recipe lists, empty lists included."""
        return {
            event: list(props.get(key) or [])
            for key, event in RECIPE_EVENTS.items()
        }

    def set_custom_recipes(self, state: dict[str, Any], recipes: dict[str, Any] | None) -> None:
        for key in RECIPE_EVENTS:
            state[key] = None

        if recipes is None:
            return

        for key, event in RECIPE_EVENTS.items():
            if recipes.get(event) is not None:
                state[key] = list(recipes[event])

    # ==========================================
    # EBS volumes
    # ==========================================

    def volume_configurations(self, props: dict[str, Any]) -> list[dict[str, Any]]:
        volumes = [EbsVolume.model_validate(v) for v in props.get("ebs_volume") or []]
        return [volume.to_api() for volume in volumes]

    def set_volume_configurations(
        self,
        state: dict[str, Any],
        configs: list[dict[str, Any]] | None,
    ) -> None:
        state["ebs_volume"] = [volume_state_from_api(config) for config in configs or []]

