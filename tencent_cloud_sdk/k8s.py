"""
Create CVM instances to serve as Kubernetes nodes.

Defaults live in an immutable :class:`K8sServerConfig`; callers derive a
new config with :func:`merge_server_config` instead of editing shared
state.
"""
import dataclasses
import random
import string
from typing import Any, Dict, Mapping, Optional

from .api import instance
from .client import TencentCloudClient

_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


@dataclasses.dataclass(frozen=True)
class K8sServerConfig:
    instance_charge_type: str = "SPOTPAID"
    zone: str = "ap-nanjing-1"
    instance_type: str = "SA9.MEDIUM4"
    image_id: str = "img-mmytdhbn"
    system_disk_type: str = "CLOUD_BSSD"
    system_disk_size: int = 20
    instance_name: str = "tencent-server-sdk-for-k8s-"
    password: str = dataclasses.field(default="123456@ABC", repr=False)
    host_name: str = "tencent-server-sdk-for-k8s"
    user_data: str = "TXlVc2VyRGF0YQo="    # base64 of "MyUserData\n"
    dry_run: bool = False

    def to_run_instances_params(self) -> Dict[str, Any]:
        """Render as a RunInstances payload."""
        return {
            'InstanceChargeType': self.instance_charge_type,
            'Placement': {'Zone': self.zone},
            'InstanceType': self.instance_type,
            'ImageId': self.image_id,
            'SystemDisk': {
                'DiskType': self.system_disk_type,
                'DiskSize': self.system_disk_size,
            },
            'InstanceName': self.instance_name,
            'LoginSettings': {'Password': self.password},
            'HostName': self.host_name,
            'UserData': self.user_data,
            'DryRun': self.dry_run,
        }


DEFAULT_K8S_SERVER_CONFIG = K8sServerConfig()


def random_suffix(length: int = 6) -> str:
    return "".join(random.choice(_SUFFIX_ALPHABET) for _ in range(length))


def merge_server_config(
    base: K8sServerConfig = DEFAULT_K8S_SERVER_CONFIG,
    override: Optional[Mapping[str, Any]] = None,
    zone: Optional[str] = None,
    instance_name: Optional[str] = None,
    host_name: Optional[str] = None,
    password: Optional[str] = None,
) -> K8sServerConfig:
    """
    Return a new config with the given overrides applied.

    ``override`` maps field names of :class:`K8sServerConfig` to values and is
    applied first; the keyword shortcuts are applied on top. Instance and
    host names get a random 6 character suffix so repeated calls do not
    collide.

    Raises:
        TypeError: If ``override`` names an unknown field
    """
    config = dataclasses.replace(base, **(override or {}))

    changes = {}
    if zone:
        changes['zone'] = zone
    if instance_name:
        changes['instance_name'] = f"{instance_name}-{random_suffix()}"
    if host_name:
        changes['host_name'] = f"{host_name}-{random_suffix()}"
    if password:
        changes['password'] = password

    return dataclasses.replace(config, **changes)


def create_k8s_servers(
    client: TencentCloudClient,
    instance_count: int = 1,
    override: Optional[Mapping[str, Any]] = None,
    zone: Optional[str] = None,
    instance_name: Optional[str] = None,
    host_name: Optional[str] = None,
    password: Optional[str] = None,
    region: Optional[str] = None,
    **extra_params
) -> Dict[str, Any]:
    """
    Create node servers from the default config.

    Any extra keyword arguments are passed through as RunInstances
    parameters (for example ``VirtualPrivateCloud`` or ``SecurityGroupIds``)
    and take precedence over the config.

    Returns:
        ``InstanceIdSet`` and ``RequestId``
    """
    config = merge_server_config(
        override=override,
        zone=zone,
        instance_name=instance_name,
        host_name=host_name,
        password=password,
    )
    params = {
        **config.to_run_instances_params(),
        'InstanceCount': instance_count,
        **extra_params,
    }
    return instance.run_instances(client, params, region=region)
