"""
CVM (Cloud Virtual Machine) instance APIs.
"""
import base64
import warnings
from typing import Any, Dict, List, Optional, TypedDict

from ..client import TencentCloudClient
from ..constants import CVM_VERSION
from ._response import select

SERVICE = "cvm"


class Filter(TypedDict):
    Name: str
    Values: List[str]


class Tag(TypedDict):
    Key: str
    Value: str


class DescribeInstancesParams(TypedDict, total=False):
    InstanceIds: List[str]     # up to 100 per request
    Filters: List[Filter]      # up to 10, each with up to 5 values
    Offset: int
    Limit: int                 # default 20, max 100


class Instance(TypedDict, total=False):
    InstanceId: str
    InstanceName: str
    InstanceState: str         # PENDING, RUNNING, STOPPED, TERMINATING, ...
    InstanceChargeType: str
    InstanceType: str
    CPU: int
    Memory: int
    ImageId: str
    CreatedTime: str
    ExpiredTime: str
    LatestOperation: str
    LatestOperationState: str


class DescribeInstancesStatusParams(TypedDict, total=False):
    InstanceIds: List[str]
    Offset: int
    Limit: int


class InstanceStatus(TypedDict):
    InstanceId: str
    InstanceState: str


class Placement(TypedDict, total=False):
    Zone: str
    ProjectId: int
    HostIds: List[str]


class SystemDisk(TypedDict):
    DiskType: str              # CLOUD_BASIC, CLOUD_PREMIUM, CLOUD_SSD, CLOUD_BSSD
    DiskSize: int


class DataDisk(TypedDict, total=False):
    DiskType: str
    DiskSize: int
    SnapshotId: str
    Encrypt: bool
    KmsKeyId: str


class VirtualPrivateCloud(TypedDict, total=False):
    VpcId: str
    SubnetId: str
    PrivateIpAddresses: List[str]


class InternetAccessible(TypedDict, total=False):
    InternetMaxBandwidthOut: int
    InternetMaxBandwidthIn: int
    InternetChargeType: str
    PublicIpAssigned: bool
    BandwidthPackageId: str


class LoginSettings(TypedDict, total=False):
    Password: str
    KeyIds: List[str]
    KeepImageLogin: bool


class TagSpecification(TypedDict, total=False):
    ResourceType: str          # instance | disk
    Tags: List[Tag]


class RunInstancesParams(TypedDict, total=False):
    InstanceChargeType: str    # PREPAID, POSTPAID_BY_HOUR, CDHPAID, SPOTPAID, CDCPAID
    InstanceChargePrepaid: Dict[str, Any]
    Placement: Placement
    InstanceType: str
    ImageId: str
    SystemDisk: SystemDisk
    DataDisks: List[DataDisk]
    VirtualPrivateCloud: VirtualPrivateCloud
    InternetAccessible: InternetAccessible
    InstanceCount: int
    InstanceName: str
    LoginSettings: LoginSettings
    SecurityGroupIds: List[str]
    EnhancedService: Dict[str, Any]
    HostName: str
    ActionTimer: Dict[str, Any]
    TagSpecification: List[TagSpecification]
    ClientToken: str
    UserData: str              # base64 encoded script run at first boot
    DryRun: bool
    CamRoleName: str
    DisableApiTermination: bool
    EnableJumboFrame: bool
    LaunchTemplate: Dict[str, Any]


def describe_instances(
    client: TencentCloudClient,
    params: Optional[DescribeInstancesParams] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """List instances. Returns ``InstanceSet``, ``TotalCount`` and ``RequestId``."""
    response = client.call(SERVICE, CVM_VERSION, "DescribeInstances", params or {}, region=region)
    return select(response, 'InstanceSet', 'TotalCount')


def describe_instances_status(
    client: TencentCloudClient,
    params: Optional[DescribeInstancesStatusParams] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """List instance states. Returns ``InstanceStatusSet``, ``TotalCount`` and ``RequestId``."""
    response = client.call(SERVICE, CVM_VERSION, "DescribeInstancesStatus", params or {}, region=region)
    return select(response, 'InstanceStatusSet', 'TotalCount')


def run_instances(
    client: TencentCloudClient,
    params: RunInstancesParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Create instances. Returns ``InstanceIdSet`` and ``RequestId``."""
    response = client.call(SERVICE, CVM_VERSION, "RunInstances", params, region=region)
    return select(response, 'InstanceIdSet')


def run_instances_by_launch_template(
    client: TencentCloudClient,
    user_data_script: str,
    template_id: str = "lt-0frkuglo",
    instance_count: int = 1,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create instances from a launch template.

    .. deprecated:: use :func:`run_instances` with ``LaunchTemplate`` instead.
    """
    warnings.warn(
        "run_instances_by_launch_template is deprecated, use run_instances",
        DeprecationWarning,
        stacklevel=2,
    )
    user_data = base64.b64encode(user_data_script.encode('utf-8')).decode('ascii')
    return run_instances(client, {
        'InstanceCount': instance_count,
        'UserData': user_data,
        'LaunchTemplate': {'LaunchTemplateId': template_id},
    }, region=region)


def terminate_instances(
    client: TencentCloudClient,
    instance_ids: List[str],
    release_prepaid_data_disks: bool = False,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Return (destroy) instances. Returns ``RequestId``."""
    response = client.call(SERVICE, CVM_VERSION, "TerminateInstances", {
        'InstanceIds': instance_ids,
        'ReleasePrepaidDataDisks': release_prepaid_data_disks,
    }, region=region)
    return select(response)
