"""
Base resource provider.

Provides the host-facing lifecycle calls (check, diff, create, read, update,
delete, import) that every resource adapter implements or inherits.

Dependencies: aws_adapters.boundary
System role: Foundation for all resource adapters
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from aws_adapters.boundary.clients import AwsClient
from aws_adapters.errors import SchemaValidationError
from aws_adapters.resources.schema import (
    CheckFailure,
    Schema,
    apply_defaults,
    comparable,
    validate_props,
)

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Normalized inputs plus any validation failures."""
    inputs: dict[str, Any]
    failures: list[CheckFailure] = field(default_factory=list)


@dataclass
class DiffResult:
    """Attributes that changed and which of them force a replacement."""
    changes: bool
    diffs: list[str] = field(default_factory=list)
    replaces: list[str] = field(default_factory=list)


@dataclass
class CreateResult:
    """Identifier and state of a newly created resource."""
    id_: str
    outs: dict[str, Any]


@dataclass
class ReadResult:
    """
    Identifier and state of an existing resource.

    An empty id_ means the resource no longer exists.
    """
    id_: str
    outs: dict[str, Any]

    @property
    def exists(self) -> bool:
        return bool(self.id_)


@dataclass
class UpdateResult:
    """
    Identifier and state of an updated resource.

    An empty id_ means the resource disappeared before it could be read back.
    """
    id_: str
    outs: dict[str, Any]

    @property
    def exists(self) -> bool:
        return bool(self.id_)


class ResourceProvider:
    """
    Generic lifecycle adapter for one resource type.

    Subclasses declare a schema and implement create, read, update and
    delete. check, diff and import are shared.

    Attributes:
        client: Connection bundle for the AWS APIs
    """

    def __init__(self, client: AwsClient) -> None:
        self.client = client

    def schema(self) -> Schema:
        raise NotImplementedError

    def customize_inputs(self, inputs: dict[str, Any]) -> dict[str, Any]:
        """Hook for derived inputs (e.g. merged tags). Runs after validation."""
        return inputs

    def check(self, olds: dict[str, Any], news: dict[str, Any]) -> CheckResult:
        """
        Apply defaults, normalize and validate new inputs.

        Args:
            olds: Previous inputs (empty on create)
            news: New inputs from the host

        Returns:
            CheckResult: Normalized inputs and failures
        """
        schema = self.schema()
        inputs = apply_defaults(schema, news)
        failures: list[CheckFailure] = []

        for key, attr in schema.items():
            if attr.state_func is None or inputs.get(key) is None:
                continue
            try:
                inputs[key] = attr.state_func(inputs[key])
            except ValueError as e:
                failures.append(CheckFailure(key, str(e)))

        failures.extend(validate_props(schema, inputs))
        if not failures:
            inputs = self.customize_inputs(inputs)
        return CheckResult(inputs=inputs, failures=failures)

    def check_or_raise(self, olds: dict[str, Any], news: dict[str, Any]) -> dict[str, Any]:
        """
        Like check(), but raise on failures.

        Raises:
            SchemaValidationError: If any input is invalid
        """
        result = self.check(olds, news)
        if result.failures:
            reasons = "; ".join(f"{f.property}: {f.reason}" for f in result.failures)
            raise SchemaValidationError(f"invalid inputs: {reasons}", result.failures)
        return result.inputs

    def diff(self, id_: str, olds: dict[str, Any], news: dict[str, Any]) -> DiffResult:
        """
        Compare stored state with new inputs.

        Computed-only attributes are compared only when the new inputs carry them.
        """
        schema = self.schema()
        diffs = []
        for key, attr in schema.items():
            if attr.computed_only and key not in news:
                continue
            if comparable(attr, olds.get(key)) != comparable(attr, news.get(key)):
                diffs.append(key)

        replaces = [key for key in diffs if schema[key].force_new]
        return DiffResult(changes=bool(diffs), diffs=diffs, replaces=replaces)

    def create(self, props: dict[str, Any]) -> CreateResult:
        raise NotImplementedError

    def read(self, id_: str, props: dict[str, Any]) -> ReadResult:
        raise NotImplementedError

    def update(self, id_: str, olds: dict[str, Any], news: dict[str, Any]) -> UpdateResult:
        raise NotImplementedError

    def delete(self, id_: str, props: dict[str, Any]) -> None:
        raise NotImplementedError

    def import_(self, id_: str) -> ReadResult:
        """Adopt an existing resource by identifier (read with no prior state)."""
        logger.debug("Importing %s", id_)
        return self.read(id_, {})
