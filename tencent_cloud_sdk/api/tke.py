"""
TKE (Tencent Kubernetes Engine) cluster and node APIs.
"""
from typing import Any, Dict, List, Optional, TypedDict

from ..client import TencentCloudClient
from ..constants import TKE_VERSION
from ._response import select

SERVICE = "tke"


class Tag(TypedDict):
    Key: str
    Value: str


class Filter(TypedDict):
    Name: str
    Values: List[str]


class ClusterBasicSettings(TypedDict, total=False):
    ClusterName: str
    ClusterDescription: str
    VpcId: str
    SubnetId: str
    ClusterVersion: str
    ClusterOs: str
    ProjectId: int
    TagSpecification: List[Dict[str, Any]]


class ClusterCIDRSettings(TypedDict, total=False):
    ClusterCIDR: str
    MaxNodePodNum: int
    MaxClusterServiceNum: int
    ServiceCIDR: str
    EniSubnetIds: List[str]


class CreateClusterParams(TypedDict, total=False):
    ClusterType: str           # MANAGED_CLUSTER | INDEPENDENT_CLUSTER
    ClusterBasicSettings: ClusterBasicSettings
    ClusterCIDRSettings: ClusterCIDRSettings
    ClusterAdvancedSettings: Dict[str, Any]
    InstanceAdvancedSettings: Dict[str, Any]
    RunInstancesForNode: List[Dict[str, Any]]
    ExistedInstancesForNode: List[Dict[str, Any]]
    InstanceDataDiskMountSettings: List[Dict[str, Any]]
    ExtensionAddons: List[Dict[str, Any]]


class DeleteClusterParams(TypedDict, total=False):
    ClusterId: str
    InstanceDeleteMode: str    # terminate | retain
    ResourceDeleteOptions: List[Dict[str, Any]]


class DescribeClustersParams(TypedDict, total=False):
    ClusterIds: List[str]
    Offset: int
    Limit: int
    Filters: List[Filter]


class Cluster(TypedDict, total=False):
    ClusterId: str
    ClusterName: str
    ClusterDescription: str
    ClusterType: str
    ClusterVersion: str
    Region: str
    ClusterState: str
    CreatedTime: str
    ClusterNodeNum: int
    TagSpecification: List[Dict[str, Any]]


class ClusterKubeconfigParams(TypedDict, total=False):
    ClusterId: str
    IsExtranet: bool


class CreateClusterInstancesParams(TypedDict, total=False):
    ClusterId: str
    RunInstancePara: str       # JSON text of a CVM RunInstances request
    InstanceAdvancedSettings: Dict[str, Any]
    SkipValidateOptions: List[str]


class AddExistedInstancesParams(TypedDict, total=False):
    ClusterId: str
    InstanceIds: List[str]
    InstanceAdvancedSettings: Dict[str, Any]
    EnhancedService: Dict[str, Any]
    LoginSettings: Dict[str, Any]
    HostName: str
    SecurityGroupIds: List[str]
    NodePool: Dict[str, Any]
    SkipValidateOptions: List[str]


class DeleteClusterInstancesParams(TypedDict, total=False):
    ClusterId: str
    InstanceIds: List[str]
    InstanceDeleteMode: str    # terminate | retain
    ForceDelete: bool


class DescribeClusterInstancesParams(TypedDict, total=False):
    ClusterId: str
    Offset: int
    Limit: int
    InstanceIds: List[str]
    InstanceRole: str          # WORKER | MASTER | ETCD | MASTER_ETCD | ALL
    Filters: List[Filter]


class DescribeExistedInstancesParams(TypedDict, total=False):
    ClusterId: str
    InstanceIds: List[str]
    Filters: List[Filter]
    VagueIpAddress: str
    VagueInstanceName: str
    Offset: int
    Limit: int
    IpAddresses: List[str]


def create_cluster(
    client: TencentCloudClient,
    params: CreateClusterParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a cluster. Returns ``ClusterId`` and ``RequestId``."""
    response = client.call(SERVICE, TKE_VERSION, "CreateCluster", params, region=region)
    return select(response, 'ClusterId')


def delete_cluster(
    client: TencentCloudClient,
    params: DeleteClusterParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Delete a cluster. Returns ``JobId`` (when the provider issues one) and ``RequestId``.

    Deletion is asynchronous; the cluster keeps its VPC and subnet busy
    for a while after this call returns.
    """
    response = client.call(SERVICE, TKE_VERSION, "DeleteCluster", params, region=region)
    return select(response, 'JobId')


def describe_clusters(
    client: TencentCloudClient,
    params: Optional[DescribeClustersParams] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """List clusters. Returns ``Clusters``, ``TotalCount`` and ``RequestId``."""
    response = client.call(SERVICE, TKE_VERSION, "DescribeClusters", params or {}, region=region)
    return select(response, 'Clusters', 'TotalCount')


def describe_cluster_status(
    client: TencentCloudClient,
    cluster_ids: Optional[List[str]] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    params = {'ClusterIds': cluster_ids} if cluster_ids is not None else {}
    response = client.call(SERVICE, TKE_VERSION, "DescribeClusterStatus", params, region=region)
    return select(response, 'ClusterStatusSet', 'TotalCount')


def describe_cluster_kubeconfig(
    client: TencentCloudClient,
    params: ClusterKubeconfigParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Fetch the cluster kubeconfig. Returns ``Kubeconfig`` and ``RequestId``."""
    response = client.call(SERVICE, TKE_VERSION, "DescribeClusterKubeconfig", params, region=region)
    return select(response, 'Kubeconfig')


def describe_cluster_security(
    client: TencentCloudClient,
    cluster_id: str,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Fetch the cluster endpoint credentials.

    Returns ``UserName``, ``Password``, ``CertificationAuthority``,
    ``ClusterExternalEndpoint``, ``Domain``, ``PgwEndpoint``,
    ``SecurityPolicy``, ``Kubeconfig`` and ``RequestId``.
    """
    response = client.call(SERVICE, TKE_VERSION, "DescribeClusterSecurity",
                           {'ClusterId': cluster_id}, region=region)
    return select(response, 'UserName', 'Password', 'CertificationAuthority',
                  'ClusterExternalEndpoint', 'Domain', 'PgwEndpoint',
                  'SecurityPolicy', 'Kubeconfig')


def create_cluster_instances(
    client: TencentCloudClient,
    params: CreateClusterInstancesParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Buy new nodes for a cluster. Returns ``InstanceIdSet`` and ``RequestId``."""
    response = client.call(SERVICE, TKE_VERSION, "CreateClusterInstances", params, region=region)
    return select(response, 'InstanceIdSet')


def add_existed_instances(
    client: TencentCloudClient,
    params: AddExistedInstancesParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Join existing CVM instances to a cluster.

    Returns ``SuccInstanceIds``, ``FailedInstanceIds``,
    ``TimeoutInstanceIds``, ``FailedReasons`` and ``RequestId``.
    """
    response = client.call(SERVICE, TKE_VERSION, "AddExistedInstances", params, region=region)
    return select(response, 'SuccInstanceIds', 'FailedInstanceIds',
                  'TimeoutInstanceIds', 'FailedReasons')


def delete_cluster_instances(
    client: TencentCloudClient,
    params: DeleteClusterInstancesParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    response = client.call(SERVICE, TKE_VERSION, "DeleteClusterInstances", params, region=region)
    return select(response, 'SuccInstanceIds', 'FailedInstanceIds', 'NotFoundInstanceIds')


def describe_cluster_instances(
    client: TencentCloudClient,
    params: DescribeClusterInstancesParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """List cluster nodes. Returns ``InstanceSet``, ``TotalCount`` and ``RequestId``."""
    response = client.call(SERVICE, TKE_VERSION, "DescribeClusterInstances", params, region=region)
    return select(response, 'InstanceSet', 'TotalCount')


def describe_existed_instances(
    client: TencentCloudClient,
    params: Optional[DescribeExistedInstancesParams] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """List CVM instances that could join a cluster. Returns ``ExistedInstanceSet``, ``TotalCount`` and ``RequestId``."""
    response = client.call(SERVICE, TKE_VERSION, "DescribeExistedInstances", params or {}, region=region)
    return select(response, 'ExistedInstanceSet', 'TotalCount')
