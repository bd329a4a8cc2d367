"""
VPC subnet APIs.
"""
from typing import Any, Dict, List, Optional, TypedDict

from ..client import TencentCloudClient
from ..constants import VPC_VERSION
from ._response import select

SERVICE = "vpc"


class Tag(TypedDict):
    Key: str
    Value: str


class Filter(TypedDict):
    Name: str
    Values: List[str]


class CreateSubnetParams(TypedDict, total=False):
    VpcId: str
    SubnetName: str            # at most 60 bytes
    CidrBlock: str             # inside the VPC range, not overlapping other subnets
    Zone: str                  # e.g. ap-guangzhou-1
    EnableMulticast: bool
    Tags: List[Tag]


class SubnetInput(TypedDict, total=False):
    SubnetName: str
    CidrBlock: str
    Zone: str


class CreateSubnetsParams(TypedDict, total=False):
    VpcId: str
    Subnets: List[SubnetInput]
    Tags: List[Tag]


class Subnet(TypedDict, total=False):
    SubnetId: str
    SubnetName: str
    VpcId: str
    CidrBlock: str
    Ipv6CidrBlock: str
    Zone: str
    IsDefault: bool
    EnableMulticast: bool
    EnableDhcp: bool
    RouteTableId: str
    CreatedTime: str
    AvailableIpAddressCount: int
    TotalIpAddressCount: int
    TagSet: List[Tag]


class DescribeSubnetsParams(TypedDict, total=False):
    SubnetIds: List[str]
    VpcIds: List[str]
    Filters: List[Filter]
    Offset: int
    Limit: int


class ModifySubnetAttributeParams(TypedDict, total=False):
    SubnetId: str
    SubnetName: str
    EnableMulticast: bool


class Ipv6SubnetCidrBlockParams(TypedDict):
    SubnetId: str
    Ipv6CidrBlock: str


def create_subnet(
    client: TencentCloudClient,
    params: CreateSubnetParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a subnet. Returns ``Subnet`` and ``RequestId``."""
    response = client.call(SERVICE, VPC_VERSION, "CreateSubnet", params, region=region)
    return select(response, 'Subnet')


def create_subnets(
    client: TencentCloudClient,
    params: CreateSubnetsParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Create several subnets in one VPC. Returns ``SubnetSet`` and ``RequestId``."""
    response = client.call(SERVICE, VPC_VERSION, "CreateSubnets", params, region=region)
    return select(response, 'SubnetSet')


def delete_subnet(
    client: TencentCloudClient,
    subnet_id: str,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Delete an empty subnet. Returns ``RequestId``."""
    response = client.call(SERVICE, VPC_VERSION, "DeleteSubnet", {'SubnetId': subnet_id}, region=region)
    return select(response)


def describe_subnets(
    client: TencentCloudClient,
    params: Optional[DescribeSubnetsParams] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """List subnets. Returns ``SubnetSet``, ``TotalCount`` and ``RequestId``."""
    response = client.call(SERVICE, VPC_VERSION, "DescribeSubnets", params or {}, region=region)
    return select(response, 'SubnetSet', 'TotalCount')


def describe_subnet_resource_dashboard(
    client: TencentCloudClient,
    subnet_ids: Optional[List[str]] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Resource statistics per subnet. Returns the whole ``Response`` object."""
    params = {'SubnetIds': subnet_ids} if subnet_ids is not None else {}
    return dict(client.call(SERVICE, VPC_VERSION, "DescribeSubnetResourceDashboard", params, region=region))


def check_default_subnet(
    client: TencentCloudClient,
    vpc_id: str,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Whether a default subnet can be created. Returns ``CanCreate`` and ``RequestId``."""
    response = client.call(SERVICE, VPC_VERSION, "CheckDefaultSubnet", {'VpcId': vpc_id}, region=region)
    return select(response, 'CanCreate')


def modify_subnet_attribute(
    client: TencentCloudClient,
    params: ModifySubnetAttributeParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    response = client.call(SERVICE, VPC_VERSION, "ModifySubnetAttribute", params, region=region)
    return select(response)


def assign_ipv6_subnet_cidr_block(
    client: TencentCloudClient,
    params: Ipv6SubnetCidrBlockParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Assign an IPv6 range. Returns ``Ipv6CidrBlock`` and ``RequestId``."""
    response = client.call(SERVICE, VPC_VERSION, "AssignIpv6SubnetCidrBlock", params, region=region)
    return select(response, 'Ipv6CidrBlock')


def unassign_ipv6_subnet_cidr_block(
    client: TencentCloudClient,
    params: Ipv6SubnetCidrBlockParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    response = client.call(SERVICE, VPC_VERSION, "UnassignIpv6SubnetCidrBlock", params, region=region)
    return select(response)
