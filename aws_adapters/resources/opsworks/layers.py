"""
Concrete OpsWorks layer kinds.

Each entry is keyed by the resource name fragment of aws_opsworks_<kind>_layer.
"""

from types import MappingProxyType
from typing import Final, Mapping

from aws_adapters.boundary.clients import AwsClient
from aws_adapters.errors import LayerDescriptorError
from aws_adapters.resources.opsworks.layer_type import LayerType, LayerTypeAttribute
from aws_adapters.resources.opsworks.provider import LayerProvider
from aws_adapters.resources.schema import ValueType

STRING = ValueType.STRING
INT = ValueType.INT
BOOL = ValueType.BOOL


CUSTOM_LAYER = LayerType(
    type_name="custom",
    custom_short_name=True,
)

ECS_CLUSTER_LAYER = LayerType(
    type_name="ecs-cluster",
    default_layer_name="Ecs Cluster",
    attributes={
        "ecs_cluster_arn": LayerTypeAttribute("EcsClusterArn", STRING, required=True),
    },
)

GANGLIA_LAYER = LayerType(
    type_name="monitoring-master",
    default_layer_name="Ganglia",
    attributes={
        "url": LayerTypeAttribute("GangliaUrl", STRING, default="/ganglia"),
        "username": LayerTypeAttribute("GangliaUser", STRING, default="opsworks"),
        "password": LayerTypeAttribute("GangliaPassword", STRING, required=True, write_only=True),
    },
)

HAPROXY_LAYER = LayerType(
    type_name="lb",
    default_layer_name="HAProxy",
    attributes={
        "stats_enabled": LayerTypeAttribute("EnableHaproxyStats", BOOL, default=True),
        "stats_url": LayerTypeAttribute("HaproxyStatsUrl", STRING, default="/haproxy?stats"),
        "stats_user": LayerTypeAttribute("HaproxyStatsUser", STRING, default="opsworks"),
        "stats_password": LayerTypeAttribute(
            "HaproxyStatsPassword", STRING, required=True, write_only=True,
        ),
        "healthcheck_url": LayerTypeAttribute("HaproxyHealthCheckUrl", STRING, default="/"),
        "healthcheck_method": LayerTypeAttribute(
            "HaproxyHealthCheckMethod", STRING, default="OPTIONS",
        ),
    },
)

JAVA_APP_LAYER = LayerType(
    type_name="java-app",
    default_layer_name="Java App Server",
    attributes={
        "jvm_type": LayerTypeAttribute("Jvm", STRING, default="openjdk"),
        "jvm_version": LayerTypeAttribute("JvmVersion", STRING, default="7"),
        "jvm_options": LayerTypeAttribute("JvmOptions", STRING, default=""),
        "app_server": LayerTypeAttribute("JavaAppServer", STRING, default="tomcat"),
        "app_server_version": LayerTypeAttribute("JavaAppServerVersion", STRING, default="7"),
    },
)

MEMCACHED_LAYER = LayerType(
    type_name="memcached",
    default_layer_name="Memcached",
    attributes={
        "allocated_memory": LayerTypeAttribute("MemcachedMemory", INT, default=512),
    },
)

MYSQL_LAYER = LayerType(
    type_name="db-master",
    default_layer_name="MySQL",
    attributes={
        "root_password": LayerTypeAttribute("MysqlRootPassword", STRING, write_only=True),
        "root_password_on_all_instances": LayerTypeAttribute(
            "MysqlRootPasswordUbiquitous", BOOL, default=True,
        ),
    },
)

NODEJS_APP_LAYER = LayerType(
    type_name="nodejs-app",
    default_layer_name="Node.js App Server",
    attributes={
        "nodejs_version": LayerTypeAttribute("NodejsVersion", STRING, default="0.10.38"),
    },
)

PHP_APP_LAYER = LayerType(
    type_name="php-app",
    default_layer_name="PHP App Server",
)

RAILS_APP_LAYER = LayerType(
    type_name="rails-app",
    default_layer_name="Rails App Server",
    attributes={
        "ruby_version": LayerTypeAttribute("RubyVersion", STRING, default="2.0.0"),
        "app_server": LayerTypeAttribute("RailsStack", STRING, default="apache_passenger"),
        "passenger_version": LayerTypeAttribute("PassengerVersion", STRING, default="4.0.46"),
        "rubygems_version": LayerTypeAttribute("RubygemsVersion", STRING, default="2.2.2"),
        "manage_bundler": LayerTypeAttribute("ManageBundler", BOOL, default=True),
        "bundler_version": LayerTypeAttribute("BundlerVersion", STRING, default="1.5.3"),
    },
)

STATIC_WEB_LAYER = LayerType(
    type_name="web",
    default_layer_name="Static Web Server",
)


LAYER_TYPES: Final[Mapping[str, LayerType]] = MappingProxyType({
    "custom": CUSTOM_LAYER,
    "ecs_cluster": ECS_CLUSTER_LAYER,
    "ganglia": GANGLIA_LAYER,
    "haproxy": HAPROXY_LAYER,
    "java_app": JAVA_APP_LAYER,
    "memcached": MEMCACHED_LAYER,
    "mysql": MYSQL_LAYER,
    "nodejs_app": NODEJS_APP_LAYER,
    "php_app": PHP_APP_LAYER,
    "rails_app": RAILS_APP_LAYER,
    "static_web": STATIC_WEB_LAYER,
})


def get_layer_type(kind: str) -> LayerType:
    """
    Look up a layer kind.

    Args:
        kind: Kind name (e.g. 'haproxy', 'java_app')

    Raises:
        LayerDescriptorError: If the kind is unknown
    """
    try:
        return LAYER_TYPES[kind]
    except KeyError:
        raise LayerDescriptorError(f"Unknown OpsWorks layer kind: {kind}") from None


def layer_provider(kind: str, client: AwsClient) -> LayerProvider:
    """Build the lifecycle adapter for one layer kind."""
    return LayerProvider(get_layer_type(kind), client)
