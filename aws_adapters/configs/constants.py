"""
Constants shared by the AWS adapters.

Contains API tokens, schema defaults and reserved prefixes.
"""

from typing import Final

# OpsWorks attribute bags carry booleans as these literal tokens
OPSWORKS_TRUE_STRING: Final[str] = "true"
OPSWORKS_FALSE_STRING: Final[str] = "false"

# Tag keys with this prefix belong to AWS and are never managed
AWS_TAG_PREFIX: Final[str] = "aws:"

# EBS volume defaults
DEFAULT_VOLUME_TYPE: Final[str] = "standard"
DEFAULT_VOLUME_IOPS: Final[int] = 0

# Layer lifecycle defaults
DEFAULT_INSTANCE_SHUTDOWN_TIMEOUT: Final[int] = 120

# Recipe lifecycle events: local attribute -> CustomRecipes key
RECIPE_EVENTS: Final[dict[str, str]] = {
    "custom_setup_recipes": "Setup",
    "custom_configure_recipes": "Configure",
    "custom_deploy_recipes": "Deploy",
    "custom_undeploy_recipes": "Undeploy",
    "custom_shutdown_recipes": "Shutdown",
}

OPSWORKS_SERVICE: Final[str] = "opsworks"
