"""
Create and tear down a minimal managed TKE cluster together with the VPC
and subnet it lives in.

Resources are named ``tencent-cloud-sdk-test-*`` so leftovers are easy to
find and clean up.
"""
import dataclasses
import time
from typing import Callable, Optional

from .api import subnet, tke, vpc
from .client import TencentCloudClient
from .log import get_logger

logger = get_logger(__name__)

RESOURCE_PREFIX = "tencent-cloud-sdk-test"


@dataclasses.dataclass(frozen=True)
class SimpleCluster:
    cluster_id: str
    vpc_id: str
    subnet_id: str
    request_id: str


@dataclasses.dataclass(frozen=True)
class SimpleClusterDeletion:
    cluster_job_id: Optional[str]
    subnet_request_id: str
    vpc_request_id: str


def region_from_zone(zone: str) -> str:
    """``ap-nanjing-1`` -> ``ap-nanjing``."""
    return "-".join(zone.split("-")[:2])


def _millis() -> int:
    return int(time.time() * 1000)


def create_simple_cluster(
    client: TencentCloudClient,
    cluster_name: str = f"{RESOURCE_PREFIX}-cluster",
    zone: str = "ap-nanjing-1",
    vpc_cidr: str = "10.0.0.0/16",
    subnet_cidr: str = "10.0.1.0/24",
    cluster_cidr: str = "172.16.0.0/16",
) -> SimpleCluster:
    """
    Create the cheapest managed cluster: a VPC, one subnet, and a
    MANAGED_CLUSTER with no nodes. Every call runs in the zone's region.

    Args:
        client: API client
        cluster_name: Cluster display name
        zone: Availability zone for the subnet, e.g. ap-nanjing-1
        vpc_cidr: VPC range
        subnet_cidr: Subnet range inside ``vpc_cidr``
        cluster_cidr: Pod network range, must not overlap the VPC

    Returns:
        SimpleCluster with the created resource ids
    """
    region = region_from_zone(zone)

    vpc_result = vpc.create_vpc(client, {
        'VpcName': f"{RESOURCE_PREFIX}-vpc-{_millis()}",
        'CidrBlock': vpc_cidr,
    }, region=region)
    vpc_id = vpc_result['Vpc']['VpcId']
    logger.info(f"VPC created successfully: {vpc_id}")

    subnet_result = subnet.create_subnet(client, {
        'VpcId': vpc_id,
        'SubnetName': f"{RESOURCE_PREFIX}-subnet-{_millis()}",
        'CidrBlock': subnet_cidr,
        'Zone': zone,
    }, region=region)
    subnet_id = subnet_result['Subnet']['SubnetId']
    logger.info(f"Subnet created successfully: {subnet_id}")

    cluster_result = tke.create_cluster(client, {
        'ClusterType': 'MANAGED_CLUSTER',
        'ClusterBasicSettings': {
            'ClusterName': cluster_name,
            'VpcId': vpc_id,
            'SubnetId': subnet_id,
            'ClusterDescription': 'Created by tencent-cloud-sdk test',
        },
        'ClusterCIDRSettings': {
            'ClusterCIDR': cluster_cidr,
        },
    }, region=region)
    cluster_id = cluster_result['ClusterId']
    logger.info(f"Cluster created successfully: {cluster_id}")

    return SimpleCluster(
        cluster_id=cluster_id,
        vpc_id=vpc_id,
        subnet_id=subnet_id,
        request_id=cluster_result['RequestId'],
    )


def delete_simple_cluster(
    client: TencentCloudClient,
    cluster_id: str,
    vpc_id: str,
    subnet_id: str,
    region: str = "ap-nanjing",
    settle_seconds: float = 30,
    sleep: Callable[[float], None] = time.sleep,
) -> SimpleClusterDeletion:
    """
    Delete a cluster made by :func:`create_simple_cluster`, then its subnet
    and VPC.

    Cluster deletion is asynchronous, so the subnet and VPC are only
    deleted after a fixed ``settle_seconds`` pause. If the subnet is still
    in use at that point the provider error is raised and the caller can
    retry later.
    """
    logger.info(f"Starting deletion of cluster {cluster_id}...")

    try:
        cluster_result = tke.delete_cluster(client, {
            'ClusterId': cluster_id,
            'InstanceDeleteMode': 'terminate',
        }, region=region)
    except Exception:
        logger.error(f"Failed to delete cluster {cluster_id}")
        raise
    logger.info(f"Cluster deletion task submitted: {cluster_result.get('JobId')}")

    logger.info(f"Waiting {settle_seconds} seconds for cluster deletion to progress...")
    sleep(settle_seconds)

    try:
        subnet_result = subnet.delete_subnet(client, subnet_id, region=region)
    except Exception:
        logger.error(f"Failed to delete subnet {subnet_id}")
        raise
    logger.info(f"Subnet deleted successfully: {subnet_id}")

    try:
        vpc_result = vpc.delete_vpc(client, vpc_id, region=region)
    except Exception:
        logger.error(f"Failed to delete VPC {vpc_id}")
        raise
    logger.info(f"VPC deleted successfully: {vpc_id}")

    return SimpleClusterDeletion(
        cluster_job_id=cluster_result.get('JobId'),
        subnet_request_id=subnet_result['RequestId'],
        vpc_request_id=vpc_result['RequestId'],
    )
