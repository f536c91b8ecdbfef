"""
Resource adapters.

Each adapter implements the host-facing lifecycle calls defined by
ResourceProvider against one AWS resource family.
"""

from aws_adapters.resources.base import (
    CheckResult,
    CreateResult,
    DiffResult,
    ReadResult,
    ResourceProvider,
    UpdateResult,
)
from aws_adapters.resources.schema import AttributeSchema, CheckFailure, ValueType

__all__ = [
    "ResourceProvider",
    "CheckResult",
    "CreateResult",
    "DiffResult",
    "ReadResult",
    "UpdateResult",
    "AttributeSchema",
    "CheckFailure",
    "ValueType",
]
