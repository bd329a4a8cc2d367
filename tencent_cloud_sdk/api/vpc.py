"""
VPC (Virtual Private Cloud) APIs.
"""
from typing import Any, Dict, List, Optional, TypedDict

from ..client import TencentCloudClient
from ..constants import VPC_VERSION
from ._response import select

SERVICE = "vpc"


class Filter(TypedDict):
    Name: str                  # vpc-name, vpc-id, is-default, cidr-block, tag:<key>, ...
    Values: List[str]


class Tag(TypedDict):
    Key: str
    Value: str


class CreateVpcParams(TypedDict, total=False):
    VpcName: str               # at most 60 bytes
    CidrBlock: str             # within 10.0.0.0/12, 172.16.0.0/12 or 192.168.0.0/16
    EnableMulticast: str       # "true" | "false"
    DnsServers: List[str]      # at most 4
    DomainName: str
    Tags: List[Tag]


class Vpc(TypedDict, total=False):
    VpcId: str
    VpcName: str
    CidrBlock: str
    Ipv6CidrBlock: str
    IsDefault: bool
    EnableMulticast: bool
    EnableDhcp: bool
    DhcpOptionsId: str
    DnsServerSet: List[str]
    DomainName: str
    CreatedTime: str
    TagSet: List[Tag]
    AssistantCidrSet: List[Dict[str, Any]]


class DescribeVpcsParams(TypedDict, total=False):
    VpcIds: List[str]
    Filters: List[Filter]
    Offset: int
    Limit: int


def create_vpc(
    client: TencentCloudClient,
    params: CreateVpcParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a VPC. Returns ``Vpc`` and ``RequestId``."""
    response = client.call(SERVICE, VPC_VERSION, "CreateVpc", params, region=region)
    return select(response, 'Vpc')


def delete_vpc(
    client: TencentCloudClient,
    vpc_id: str,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Delete a VPC. Returns ``RequestId``.

    The VPC must be empty: no instances, subnets, gateways or peering
    connections may remain in it.
    """
    response = client.call(SERVICE, VPC_VERSION, "DeleteVpc", {'VpcId': vpc_id}, region=region)
    return select(response)


def describe_vpcs(
    client: TencentCloudClient,
    params: Optional[DescribeVpcsParams] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """List VPCs. Returns ``VpcSet``, ``TotalCount`` and ``RequestId``."""
    response = client.call(SERVICE, VPC_VERSION, "DescribeVpcs", params or {}, region=region)
    return select(response, 'VpcSet', 'TotalCount')
