"""
Utility functions for the AWS adapters.

Provides tag policy helpers, ARN construction, decimal parsing and JSON canonicalization.
"""

from aws_adapters.utils.json_utils import normalize_json_string
from aws_adapters.utils.naming import ArnBuilder
from aws_adapters.utils.numbers import parse_decimal
from aws_adapters.utils.tags import (
    DefaultTagsConfig,
    IgnoreTagsConfig,
    diff_tags,
    ignore_aws,
    merge_tags,
    tags_from_key_value_list,
)

__all__ = [
    "normalize_json_string",
    "ArnBuilder",
    "parse_decimal",
    "DefaultTagsConfig",
    "IgnoreTagsConfig",
    "diff_tags",
    "ignore_aws",
    "merge_tags",
    "tags_from_key_value_list",
]
