"""
Unit tests for Kubernetes node server creation.
"""

import dataclasses
import re

import pytest
from unittest.mock import patch

from tencent_cloud_sdk.k8s import (
    DEFAULT_K8S_SERVER_CONFIG,
    K8sServerConfig,
    create_k8s_servers,
    merge_server_config,
    random_suffix,
)


class TestServerConfig:
    """Test the immutable server config."""

    def test_defaults(self):
        """Test default RunInstances parameters."""
        params = DEFAULT_K8S_SERVER_CONFIG.to_run_instances_params()

        assert params == {
            "InstanceChargeType": "SPOTPAID",
            "Placement": {"Zone": "ap-nanjing-1"},
            "InstanceType": "SA9.MEDIUM4",
            "ImageId": "img-mmytdhbn",
            "SystemDisk": {"DiskType": "CLOUD_BSSD", "DiskSize": 20},
            "InstanceName": "tencent-server-sdk-for-k8s-",
            "LoginSettings": {"Password": "123456@ABC"},
            "HostName": "tencent-server-sdk-for-k8s",
            "UserData": "TXlVc2VyRGF0YQo=",
            "DryRun": False,
        }

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_K8S_SERVER_CONFIG.zone = "ap-shanghai-2"

    def test_repr_hides_password(self):
        assert "123456@ABC" not in repr(DEFAULT_K8S_SERVER_CONFIG)

    def test_random_suffix(self):
        suffix = random_suffix()
        assert re.fullmatch(r"[0-9a-z]{6}", suffix)
        assert len(random_suffix(10)) == 10


class TestMergeServerConfig:
    """Test deriving configs without touching the defaults."""

    @patch('tencent_cloud_sdk.k8s.random_suffix', return_value="abc123")
    def test_shortcuts(self, mock_suffix):
        """Test keyword overrides and name suffixes."""
        config = merge_server_config(
            zone="ap-shanghai-2",
            instance_name="node",
            host_name="node-host",
            password="Secret#2024",
        )

        assert config.zone == "ap-shanghai-2"
        assert config.instance_name == "node-abc123"
        assert config.host_name == "node-host-abc123"
        assert config.password == "Secret#2024"
        assert DEFAULT_K8S_SERVER_CONFIG == K8sServerConfig()

    def test_override_mapping(self):
        """Test field overrides from a mapping."""
        config = merge_server_config(override={"instance_type": "S5.LARGE8", "dry_run": True})

        assert config.instance_type == "S5.LARGE8"
        assert config.dry_run is True
        assert config.instance_name == DEFAULT_K8S_SERVER_CONFIG.instance_name

    def test_shortcuts_apply_after_override(self):
        """Test keyword shortcuts win over the mapping."""
        config = merge_server_config(override={"zone": "ap-beijing-1"}, zone="ap-beijing-3")

        assert config.zone == "ap-beijing-3"

    def test_unknown_field(self):
        """Test unknown override keys are rejected."""
        with pytest.raises(TypeError):
            merge_server_config(override={"flavor": "big"})

    def test_no_changes(self):
        assert merge_server_config() == DEFAULT_K8S_SERVER_CONFIG


class TestCreateK8sServers:
    """Test node server creation."""

    @patch('tencent_cloud_sdk.k8s.random_suffix', return_value="xyz789")
    def test_create(self, mock_suffix, fake_client):
        """Test the RunInstances request built from the config."""
        fake_client.responses["RunInstances"] = {
            "InstanceIdSet": ["ins-1", "ins-2"], "RequestId": "req-1"
        }

        result = create_k8s_servers(
            fake_client,
            instance_count=2,
            instance_name="worker",
            region="ap-nanjing",
            VirtualPrivateCloud={"VpcId": "vpc-1", "SubnetId": "subnet-1"},
        )

        assert result == {"InstanceIdSet": ["ins-1", "ins-2"], "RequestId": "req-1"}
        call = fake_client.calls[0]
        assert (call['service'], call['action'], call['region']) == ("cvm", "RunInstances", "ap-nanjing")
        payload = call['payload']
        assert payload["InstanceCount"] == 2
        assert payload["InstanceName"] == "worker-xyz789"
        assert payload["VirtualPrivateCloud"] == {"VpcId": "vpc-1", "SubnetId": "subnet-1"}
        assert payload["InstanceChargeType"] == "SPOTPAID"

    def test_extra_params_take_precedence(self, fake_client):
        """Test pass-through parameters override config values."""
        create_k8s_servers(fake_client, DryRun=True, InstanceCount=5)

        payload = fake_client.calls[0]['payload']
        assert payload["DryRun"] is True
        assert payload["InstanceCount"] == 5
