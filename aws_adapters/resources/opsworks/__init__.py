"""
OpsWorks layer resources.

Exports: LayerType, LayerTypeAttribute, LayerProvider, LAYER_TYPES,
get_layer_type, layer_provider
"""

from aws_adapters.resources.opsworks.layer_type import LayerType, LayerTypeAttribute
from aws_adapters.resources.opsworks.layers import LAYER_TYPES, get_layer_type, layer_provider
from aws_adapters.resources.opsworks.provider import LayerProvider

__all__ = [
    "LayerType",
    "LayerTypeAttribute",
    "LayerProvider",
    "LAYER_TYPES",
    "get_layer_type",
    "layer_provider",
]
