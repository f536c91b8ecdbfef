"""
Generic EC2 describe filters.

Accepts either a list of {"name": ..., "values": [...]} blocks or a
{name: values} mapping and produces the API's [{"Name", "Values"}] form.
"""

from typing import Any, Iterable, Mapping

FilterInput = Mapping[str, Any] | Iterable[Mapping[str, Any]] | None


def _values(values: Any) -> list[str]:
    if isinstance(values, str):
        return [values]
    return [str(v) for v in values]


def build_filters(filters: FilterInput) -> list[dict[str, Any]]:
    """
    Convert filter blocks to the EC2 Filters request parameter.

    Args:
        filters: Filter blocks, a name -> values mapping, or None

    Returns:
        list[dict]: EC2 filters; empty when no filters are given

    Raises:
        ValueError: If a filter block has no name
    """
    if not filters:
        return []

    if isinstance(filters, Mapping):
        return [{"Name": name, "Values": _values(values)} for name, values in filters.items()]

    result = []
    for block in filters:
        name = block.get("name")
        if not name:
            raise ValueError(f"filter block {dict(block)!r} has no name")
        result.append({"Name": name, "Values": _values(block.get("values") or [])})
    return result
