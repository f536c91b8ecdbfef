"""
OpsWorks layer value models.

Dependencies: pydantic
System role: EBS volume configuration translation
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from aws_adapters.configs.constants import DEFAULT_VOLUME_IOPS, DEFAULT_VOLUME_TYPE
from aws_adapters.utils.numbers import parse_decimal


class EbsVolume(BaseModel):
    """One EBS volume configuration attached to a layer's instances."""

    model_config = ConfigDict(extra="ignore")

    mount_point: str = Field(description="Volume mount point, e.g. /data")
    number_of_disks: int = Field(description="Number of disks in the volume")
    size: int = Field(description="Volume size in GiB")
    type: str = Field(default=DEFAULT_VOLUME_TYPE, description="EBS volume type")
    iops: int = Field(default=DEFAULT_VOLUME_IOPS, description="Provisioned IOPS, 0 for none")
    raid_level: str = Field(default="", description="RAID level as a numeric string")
    encrypted: bool = Field(default=False, description="Encrypt the volume")

    def to_api(self) -> dict[str, Any]:
        """
        Build the VolumeConfiguration request structure.

        Zero IOPS is left out (some volume types reject an explicit 0), and an
        unparseable RAID level is dropped.
        """
        config: dict[str, Any] = {
            "MountPoint": self.mount_point,
            "NumberOfDisks": self.number_of_disks,
            "Size": self.size,
            "VolumeType": self.type,
            "Encrypted": self.encrypted,
        }
        if self.iops != 0:
            config["Iops"] = self.iops
        raid_level = parse_decimal(self.raid_level)
        if raid_level is not None:
            config["RaidLevel"] = raid_level
        return config


def volume_state_from_api(config: dict[str, Any]) -> dict[str, Any]:
    """
    Flatten a VolumeConfiguration response into local state.

    Only fields present in the response are set, except iops which reads as 0.
    """
    data: dict[str, Any] = {"iops": config.get("Iops") or 0}
    if config.get("MountPoint") is not None:
        data["mount_point"] = config["MountPoint"]
    if config.get("NumberOfDisks") is not None:
        data["number_of_disks"] = int(config["NumberOfDisks"])
    if config.get("RaidLevel") is not None:
        data["raid_level"] = str(config["RaidLevel"])
    if config.get("Size") is not None:
        data["size"] = int(config["Size"])
    if config.get("VolumeType") is not None:
        data["type"] = config["VolumeType"]
    if config.get("Encrypted") is not None:
        data["encrypted"] = config["Encrypted"]
    return data
