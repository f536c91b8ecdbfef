"""
OpsWorks layer resource adapter.

One LayerProvider serves one layer kind. All kinds share the same API calls;
the kind's LayerType decides the schema and the Attributes bag contents.

Dependencies: botocore
System role: Lifecycle calls for aws_opsworks_*_layer resources
"""

import logging
from typing import Any

from botocore.exceptions import ClientError

from aws_adapters.boundary.clients import AwsClient
from aws_adapters.errors import ResourceApiError, error_code
from aws_adapters.observability.log_utils import log_exception_with_context
from aws_adapters.resources.base import (
    CreateResult,
    ReadResult,
    ResourceProvider,
    UpdateResult,
)
from aws_adapters.resources.opsworks.layer_type import LayerType
from aws_adapters.resources.opsworks.tags import list_tags, update_tags
from aws_adapters.resources.schema import Schema
from aws_adapters.utils.json_utils import normalize_json_string
from aws_adapters.utils.tags import ignore_aws

logger = logging.getLogger(__name__)

NOT_FOUND = "ResourceNotFoundException"


class LayerProvider(ResourceProvider):
    """
    Create, read, update and delete OpsWorks layers of one kind.

    Attributes:
        layer_type: Static descriptor of the layer kind
        client: Connection bundle for the AWS APIs
    """

    def __init__(self, layer_type: LayerType, client: AwsClient) -> None:
        super().__init__(client)
        self.layer_type = layer_type

    @property
    def conn(self) -> Any:
        return self.client.opsworks

    def schema(self) -> Schema:
        return self.layer_type.schema()

    def customize_inputs(self, inputs: dict[str, Any]) -> dict[str, Any]:
        """Compute tags_all from the resource tags and the provider tag policy."""
        tags_all = self.client.default_tags.merge_tags(inputs.get("tags"))
        inputs["tags_all"] = self.client.ignore_tags.ignore_config(tags_all)
        return inputs

    # ==========================================
    # Lifecycle
    # ==========================================

    def create(self, props: dict[str, Any]) -> CreateResult:
        """
        Create the layer, attach its load balancer, tag it and read it back.

        Raises:
            ResourceApiError: If any call fails (a created layer is not rolled back)
        """
        request = self._layer_request(props)
        request["Type"] = self.layer_type.type_name
        request["StackId"] = props["stack_id"]

        logger.debug("Creating OpsWorks layer: %s", request["Name"])
        try:
            response = self.conn.create_layer(**request)
        except ClientError as e:
            raise self._api_error("creating OpsWorks layer", request["Name"], e) from e

        layer_id = response["LayerId"]

        load_balancer = props.get("elastic_load_balancer") or ""
        if load_balancer:
            self._attach_load_balancer(layer_id, load_balancer)

        arn = self.client.arns.opsworks_layer_arn(layer_id)
        tags = self.client.default_tags.merge_tags(props.get("tags"))
        if tags:
            try:
                update_tags(self.conn, arn, None, tags)
            except ClientError as e:
                raise self._api_error(f"updating OpsWorks layer ({arn}) tags", layer_id, e) from e

        outs = self._read_layer(layer_id, props, is_new=True)
        return CreateResult(id_=layer_id, outs=outs)

    def read(self, id_: str, props: dict[str, Any]) -> ReadResult:
        """
        Refresh the layer state. A layer that no longer exists yields an empty id.

        Raises:
            ResourceApiError: If a call fails for any other reason
        """
        outs = self._read_layer(id_, props, is_new=False)
        if outs is None:
            return ReadResult(id_="", outs={})
        return ReadResult(id_=id_, outs=outs)

    def update(self, id_: str, olds: dict[str, Any], news: dict[str, Any]) -> UpdateResult:
        """
        Swap load balancers if changed, update the layer, reconcile tags, read back.

        A layer that is gone by the read-back yields an empty id.

        Raises:
            ResourceApiError: If any call fails (a detached load balancer is not re-attached)
        """
        request = self._layer_request(news)
        request["LayerId"] = id_

        old_load_balancer = olds.get("elastic_load_balancer") or ""
        new_load_balancer = news.get("elastic_load_balancer") or ""
        if old_load_balancer != new_load_balancer:
            if old_load_balancer:
                self._detach_load_balancer(id_, old_load_balancer)
            if new_load_balancer:
                self._attach_load_balancer(id_, new_load_balancer)

        logger.debug("Updating OpsWorks layer: %s", id_)
        try:
            self.conn.update_layer(**request)
        except ClientError as e:
            raise self._api_error(f"updating OpsWorks layer ({id_})", id_, e) from e

        old_tags = olds.get("tags_all") or {}
        new_tags = news.get("tags_all")
        if new_tags is None:
            new_tags = self.customize_inputs(dict(news))["tags_all"]
        if old_tags != new_tags:
            arn = olds.get("arn") or self.client.arns.opsworks_layer_arn(id_)
            try:
                update_tags(self.conn, arn, old_tags, new_tags)
            except ClientError as e:
                raise self._api_error(f"updating OpsWorks layer ({arn}) tags", id_, e) from e

        outs = self._read_layer(id_, news, is_new=False)
        if outs is None:
            return UpdateResult(id_="", outs={})
        return UpdateResult(id_=id_, outs=outs)

    def delete(self, id_: str, props: dict[str, Any]) -> None:
        """
        Delete the layer.

        Raises:
            ResourceApiError: If the call fails
        """
        logger.debug("Deleting OpsWorks layer: %s", id_)
        try:
            self.conn.delete_layer(LayerId=id_)
        except ClientError as e:
            raise self._api_error(f"deleting OpsWorks layer ({id_})", id_, e) from e

    # ==========================================
    # Helpers
    # ==========================================

    def _layer_request(self, props: dict[str, Any]) -> dict[str, Any]:
        """Request fields shared by CreateLayer and UpdateLayer."""
        lt = self.layer_type
        return {
            "Name": lt.get(props, "name"),
            "Shortname": lt.short_name(props),
            "Attributes": lt.attribute_map(props),
            "AutoAssignElasticIps": bool(lt.get(props, "auto_assign_elastic_ips")),
            "AutoAssignPublicIps": bool(lt.get(props, "auto_assign_public_ips")),
            "CustomInstanceProfileArn": lt.get(props, "custom_instance_profile_arn"),
            "CustomJson": lt.get(props, "custom_json"),
            "CustomRecipes": lt.custom_recipes(props),
            "CustomSecurityGroupIds": sorted(lt.get(props, "custom_security_group_ids")),
            "EnableAutoHealing": bool(lt.get(props, "auto_healing")),
            "InstallUpdatesOnBoot": bool(lt.get(props, "install_updates_on_boot")),
            "LifecycleEventConfiguration": lt.lifecycle_event_configuration(props),
            "Packages": sorted(lt.get(props, "system_packages")),
            "UseEbsOptimizedInstances": bool(lt.get(props, "use_ebs_optimized_instances")),
            "VolumeConfigurations": lt.volume_configurations(props),
        }

    def _read_layer(
        self,
        layer_id: str,
        props: dict[str, Any],
        is_new: bool,
    ) -> dict[str, Any] | None:
        """
        Project the remote layer onto local state, starting from props.

        Returns None when the layer is gone and is_new is False.
        """
        logger.debug("Reading OpsWorks layer: %s", layer_id)
        try:
            response = self.conn.describe_layers(LayerIds=[layer_id])
        except ClientError as e:
            if not is_new and error_code(e) == NOT_FOUND:
                logger.warning("OpsWorks layer (%s) not found, removing from state", layer_id)
                return None
            raise self._api_error(f"reading OpsWorks layer ({layer_id})", layer_id, e) from e

        layers = response.get("Layers") or []
        if not layers:
            if not is_new:
                logger.warning("OpsWorks layer (%s) not found, removing from state", layer_id)
                return None
            raise ResourceApiError(f"error reading OpsWorks layer ({layer_id}): empty result", layer_id)

        layer = layers[0]
        lt = self.layer_type
        state = dict(props)
        state.update({
            "auto_assign_elastic_ips": layer.get("AutoAssignElasticIps"),
            "auto_assign_public_ips": layer.get("AutoAssignPublicIps"),
            "custom_instance_profile_arn": layer.get("CustomInstanceProfileArn"),
            "custom_security_group_ids": list(layer.get("CustomSecurityGroupIds") or []),
            "auto_healing": layer.get("EnableAutoHealing"),
            "install_updates_on_boot": layer.get("InstallUpdatesOnBoot"),
            "name": layer.get("Name"),
            "system_packages": list(layer.get("Packages") or []),
            "stack_id": layer.get("StackId"),
            "use_ebs_optimized_instances": layer.get("UseEbsOptimizedInstances"),
        })

        if lt.custom_short_name:
            state["short_name"] = layer.get("Shortname")

        state["custom_json"] = normalize_json_string(layer.get("CustomJson"))

        lt.set_attribute_map(state, layer.get("Attributes"))
        lt.set_lifecycle_event_configuration(state, layer.get("LifecycleEventConfiguration"))
        lt.set_custom_recipes(state, layer.get("CustomRecipes"))
        lt.set_volume_configurations(state, layer.get("VolumeConfigurations"))

        state["elastic_load_balancer"] = self._read_load_balancer(layer_id)

        arn = layer.get("Arn") or ""
        state["arn"] = arn
        try:
            tags = list_tags(self.conn, arn)
        except ClientError as e:
            raise self._api_error(f"listing tags for OpsWorks layer ({arn})", layer_id, e) from e

        tags = self.client.ignore_tags.ignore_config(ignore_aws(tags))
        state["tags"] = self.client.default_tags.remove_default_config(tags)
        state["tags_all"] = tags
        return state

    def _read_load_balancer(self, layer_id: str) -> str:
        try:
            response = self.conn.describe_elastic_load_balancers(LayerIds=[layer_id])
        except ClientError as e:
            raise self._api_error(
                f"reading load balancers of OpsWorks layer ({layer_id})", layer_id, e,
            ) from e

        load_balancers = response.get("ElasticLoadBalancers") or []
        if not load_balancers:
            return ""
        return load_balancers[0].get("ElasticLoadBalancerName") or ""

    def _attach_load_balancer(self, layer_id: str, name: str) -> None:
        logger.debug("Attaching load balancer: %s", name)
        try:
            self.conn.attach_elastic_load_balancer(ElasticLoadBalancerName=name, LayerId=layer_id)
        except ClientError as e:
            raise self._api_error(
                f"attaching load balancer ({name}) to OpsWorks layer ({layer_id})", layer_id, e,
            ) from e

    def _detach_load_balancer(self, layer_id: str, name: str) -> None:
        logger.debug("Detaching load balancer: %s", name)
        try:
            self.conn.detach_elastic_load_balancer(ElasticLoadBalancerName=name, LayerId=layer_id)
        except ClientError as e:
            raise self._api_error(
                f"detaching load balancer ({name}) from OpsWorks layer ({layer_id})", layer_id, e,
            ) from e

    def _api_error(self, action: str, resource_id: str, exc: ClientError) -> ResourceApiError:
        log_exception_with_context(
            logger,
            f"Error {action}",
            exc,
            resource_id=resource_id,
            layer_type=self.layer_type.type_name,
        )
        return ResourceApiError(f"error {action}: {exc}", resource_id)
