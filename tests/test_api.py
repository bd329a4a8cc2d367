"""
Unit tests for the operation catalog.

Each operation is checked at the ``client.call`` seam: service, version,
action name, payload and region, plus the fields it picks from the
Response object.
"""

import base64

import pytest

from tencent_cloud_sdk.api import instance, subnet, tat, tke, vpc

CVM = ("cvm", "2017-03-12")
VPC = ("vpc", "2017-03-12")
TAT = ("tat", "2020-10-28")
TKE = ("tke", "2018-05-25")

# (operation, positional args, endpoint, action, expected payload, response fields)
CATALOG = [
    (instance.describe_instances, ({"Limit": 10, "Offset": 0},), CVM, "DescribeInstances",
     {"Limit": 10, "Offset": 0}, {"InstanceSet": [{"InstanceId": "ins-1"}], "TotalCount": 1}),
    (instance.describe_instances_status, ({"InstanceIds": ["ins-1"]},), CVM, "DescribeInstancesStatus",
     {"InstanceIds": ["ins-1"]},
     {"InstanceStatusSet": [{"InstanceId": "ins-1", "InstanceState": "RUNNING"}], "TotalCount": 1}),
    (instance.run_instances, ({"InstanceType": "SA9.MEDIUM4", "InstanceCount": 2},), CVM, "RunInstances",
     {"InstanceType": "SA9.MEDIUM4", "InstanceCount": 2}, {"InstanceIdSet": ["ins-1", "ins-2"]}),
    (instance.terminate_instances, (["ins-1"],), CVM, "TerminateInstances",
     {"InstanceIds": ["ins-1"], "ReleasePrepaidDataDisks": False}, {}),

    (vpc.create_vpc, ({"VpcName": "v", "CidrBlock": "10.0.0.0/16"},), VPC, "CreateVpc",
     {"VpcName": "v", "CidrBlock": "10.0.0.0/16"}, {"Vpc": {"VpcId": "vpc-1"}}),
    (vpc.delete_vpc, ("vpc-1",), VPC, "DeleteVpc", {"VpcId": "vpc-1"}, {}),
    (vpc.describe_vpcs, ({"VpcIds": ["vpc-1"]},), VPC, "DescribeVpcs",
     {"VpcIds": ["vpc-1"]}, {"VpcSet": [{"VpcId": "vpc-1"}], "TotalCount": 1}),

    (subnet.create_subnet, ({"VpcId": "vpc-1", "SubnetName": "s", "CidrBlock": "10.0.1.0/24",
                             "Zone": "ap-nanjing-1"},), VPC, "CreateSubnet",
     {"VpcId": "vpc-1", "SubnetName": "s", "CidrBlock": "10.0.1.0/24", "Zone": "ap-nanjing-1"},
     {"Subnet": {"SubnetId": "subnet-1"}}),
    (subnet.create_subnets, ({"VpcId": "vpc-1", "Subnets": []},), VPC, "CreateSubnets",
     {"VpcId": "vpc-1", "Subnets": []}, {"SubnetSet": []}),
    (subnet.delete_subnet, ("subnet-1",), VPC, "DeleteSubnet", {"SubnetId": "subnet-1"}, {}),
    (subnet.describe_subnets, ({"VpcIds": ["vpc-1"]},), VPC, "DescribeSubnets",
     {"VpcIds": ["vpc-1"]}, {"SubnetSet": [], "TotalCount": 0}),
    (subnet.check_default_subnet, ("vpc-1",), VPC, "CheckDefaultSubnet",
     {"VpcId": "vpc-1"}, {"CanCreate": True}),
    (subnet.modify_subnet_attribute, ({"SubnetId": "subnet-1", "SubnetName": "renamed"},), VPC,
     "ModifySubnetAttribute", {"SubnetId": "subnet-1", "SubnetName": "renamed"}, {}),
    (subnet.assign_ipv6_subnet_cidr_block, ({"SubnetId": "subnet-1", "Ipv6CidrBlock": "2402::/64"},),
     VPC, "AssignIpv6SubnetCidrBlock", {"SubnetId": "subnet-1", "Ipv6CidrBlock": "2402::/64"},
     {"Ipv6CidrBlock": "2402::/64"}),
    (subnet.unassign_ipv6_subnet_cidr_block, ({"SubnetId": "subnet-1", "Ipv6CidrBlock": "2402::/64"},),
     VPC, "UnassignIpv6SubnetCidrBlock", {"SubnetId": "subnet-1", "Ipv6CidrBlock": "2402::/64"}, {}),

    (tat.create_command, ({"CommandName": "c", "Content": "bHM="},), TAT, "CreateCommand",
     {"CommandName": "c", "Content": "bHM="}, {"CommandId": "cmd-1"}),
    (tat.delete_command, ("cmd-1",), TAT, "DeleteCommand", {"CommandId": "cmd-1"}, {}),
    (tat.describe_commands, ({"CommandIds": ["cmd-1"]},), TAT, "DescribeCommands",
     {"CommandIds": ["cmd-1"]}, {"CommandSet": [], "TotalCount": 0}),
    (tat.describe_invocations, ({"InvocationIds": ["inv-1"]},), TAT, "DescribeInvocations",
     {"InvocationIds": ["inv-1"]}, {"InvocationSet": [], "TotalCount": 0}),
    (tat.describe_invocation_tasks, ({"HideOutput": False},), TAT, "DescribeInvocationTasks",
     {"HideOutput": False}, {"InvocationTaskSet": [], "TotalCount": 0}),
    (tat.invoke_command, ({"Content": "bHM=", "InstanceIds": ["ins-1"]},), TAT, "RunCommand",
     {"Content": "bHM=", "InstanceIds": ["ins-1"]}, {"CommandId": "cmd-1", "InvocationId": "inv-1"}),

    (tke.create_cluster, ({"ClusterType": "MANAGED_CLUSTER"},), TKE, "CreateCluster",
     {"ClusterType": "MANAGED_CLUSTER"}, {"ClusterId": "cls-1"}),
    (tke.delete_cluster, ({"ClusterId": "cls-1", "InstanceDeleteMode": "terminate"},), TKE,
     "DeleteCluster", {"ClusterId": "cls-1", "InstanceDeleteMode": "terminate"}, {"JobId": "job-1"}),
    (tke.describe_clusters, ({"ClusterIds": ["cls-1"]},), TKE, "DescribeClusters",
     {"ClusterIds": ["cls-1"]}, {"Clusters": [{"ClusterId": "cls-1"}], "TotalCount": 1}),
    (tke.describe_cluster_status, (["cls-1"],), TKE, "DescribeClusterStatus",
     {"ClusterIds": ["cls-1"]}, {"ClusterStatusSet": [], "TotalCount": 0}),
    (tke.describe_cluster_kubeconfig, ({"ClusterId": "cls-1", "IsExtranet": True},), TKE,
     "DescribeClusterKubeconfig", {"ClusterId": "cls-1", "IsExtranet": True},
     {"Kubeconfig": "apiVersion: v1"}),
    (tke.describe_cluster_security, ("cls-1",), TKE, "DescribeClusterSecurity",
     {"ClusterId": "cls-1"},
     {"UserName": "admin", "Password": "pw", "CertificationAuthority": "ca",
      "ClusterExternalEndpoint": "", "Domain": "cls-1.ccs.tencent-cloud.com",
      "PgwEndpoint": "10.0.0.2", "SecurityPolicy": [], "Kubeconfig": "apiVersion: v1"}),
    (tke.create_cluster_instances, ({"ClusterId": "cls-1", "RunInstancePara": "{}"},), TKE,
     "CreateClusterInstances", {"ClusterId": "cls-1", "RunInstancePara": "{}"},
     {"InstanceIdSet": ["ins-1"]}),
    (tke.add_existed_instances, ({"ClusterId": "cls-1", "InstanceIds": ["ins-1"]},), TKE,
     "AddExistedInstances", {"ClusterId": "cls-1", "InstanceIds": ["ins-1"]},
     {"SuccInstanceIds": ["ins-1"], "FailedInstanceIds": [], "TimeoutInstanceIds": [],
      "FailedReasons": []}),
    (tke.delete_cluster_instances, ({"ClusterId": "cls-1", "InstanceIds": ["ins-1"]},), TKE,
     "DeleteClusterInstances", {"ClusterId": "cls-1", "InstanceIds": ["ins-1"]},
     {"SuccInstanceIds": ["ins-1"], "FailedInstanceIds": [], "NotFoundInstanceIds": []}),
    (tke.describe_cluster_instances, ({"ClusterId": "cls-1"},), TKE, "DescribeClusterInstances",
     {"ClusterId": "cls-1"}, {"InstanceSet": [], "TotalCount": 0}),
    (tke.describe_existed_instances, ({"ClusterId": "cls-1"},), TKE, "DescribeExistedInstances",
     {"ClusterId": "cls-1"}, {"ExistedInstanceSet": [], "TotalCount": 0}),
]


class TestCatalog:
    """Test every catalog operation at the client seam."""

    @pytest.mark.parametrize(
        "operation, args, endpoint, action, payload, fields",
        CATALOG,
        ids=[row[3] for row in CATALOG],
    )
    def test_operation(self, fake_client, operation, args, endpoint, action, payload, fields):
        """Test request routing and response field selection."""
        fake_client.responses[action] = {**fields, "Extra": "ignored", "RequestId": "req-1"}

        result = operation(fake_client, *args, region="ap-shanghai")

        assert fake_client.calls == [{
            'service': endpoint[0],
            'version': endpoint[1],
            'action': action,
            'payload': payload,
            'region': "ap-shanghai",
        }]
        assert result == {**fields, "RequestId": "req-1"}

    @pytest.mark.parametrize("operation, action", [
        (instance.describe_instances, "DescribeInstances"),
        (instance.describe_instances_status, "DescribeInstancesStatus"),
        (vpc.describe_vpcs, "DescribeVpcs"),
        (subnet.describe_subnets, "DescribeSubnets"),
        (tat.describe_commands, "DescribeCommands"),
        (tke.describe_clusters, "DescribeClusters"),
        (tke.describe_cluster_status, "DescribeClusterStatus"),
        (tke.describe_existed_instances, "DescribeExistedInstances"),
    ])
    def test_optional_params_default_to_empty(self, fake_client, operation, action):
        """Test list operations send an empty object when called bare."""
        operation(fake_client)

        assert fake_client.calls[0]['action'] == action
        assert fake_client.calls[0]['payload'] == {}
        assert fake_client.calls[0]['region'] is None

    def test_missing_fields_are_none(self, fake_client):
        """Test absent response fields come back as None."""
        fake_client.responses["DescribeVpcs"] = {"RequestId": "req-1"}

        assert vpc.describe_vpcs(fake_client) == {
            "VpcSet": None,
            "TotalCount": None,
            "RequestId": "req-1",
        }

    def test_terminate_instances_release_disks(self, fake_client):
        """Test the prepaid disk flag is forwarded."""
        instance.terminate_instances(fake_client, ["ins-1", "ins-2"], release_prepaid_data_disks=True)

        assert fake_client.calls[0]['payload'] == {
            "InstanceIds": ["ins-1", "ins-2"],
            "ReleasePrepaidDataDisks": True,
        }

    def test_run_instances_by_launch_template(self, fake_client):
        """Test the deprecated launch template shortcut."""
        fake_client.responses["RunInstances"] = {"InstanceIdSet": ["ins-9"], "RequestId": "req-1"}

        with pytest.warns(DeprecationWarning):
            result = instance.run_instances_by_launch_template(
                fake_client, "#!/bin/bash\necho hi\n", instance_count=3
            )

        assert result == {"InstanceIdSet": ["ins-9"], "RequestId": "req-1"}
        payload = fake_client.calls[0]['payload']
        assert payload == {
            "InstanceCount": 3,
            "UserData": base64.b64encode(b"#!/bin/bash\necho hi\n").decode('ascii'),
            "LaunchTemplate": {"LaunchTemplateId": "lt-0frkuglo"},
        }

    def test_subnet_resource_dashboard_returns_whole_response(self, fake_client):
        """Test the dashboard call returns every field."""
        response = {"ResourceStatisticsSet": [{"VpcId": "vpc-1"}], "RequestId": "req-1"}
        fake_client.responses["DescribeSubnetResourceDashboard"] = response

        result = subnet.describe_subnet_resource_dashboard(fake_client, ["subnet-1"])

        assert result == response
        assert result is not response
        assert fake_client.calls[0]['payload'] == {"SubnetIds": ["subnet-1"]}

    def test_subnet_resource_dashboard_without_ids(self, fake_client):
        """Test the dashboard call without a subnet filter."""
        subnet.describe_subnet_resource_dashboard(fake_client)

        assert fake_client.calls[0]['payload'] == {}
