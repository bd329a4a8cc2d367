#!/usr/bin/env python3
"""
Basic usage examples for the Tencent Cloud API client library.

This script signs a few read-only requests with the credentials from
TENCENTCLOUD_SECRET_ID / TENCENTCLOUD_SECRET_KEY (or a .env file) and
prints what comes back.
"""

import sys

from tencent_cloud_sdk import (
    APIError,
    ConfigurationError,
    SigningContext,
    TencentCloudClient,
    TencentCloudError,
    sign,
)
from tencent_cloud_sdk.api import instance, tke, vpc


def main():
    """Run basic usage examples."""

    print("=== Tencent Cloud API Client Basic Usage Examples ===\n")

    # Example 1: Offline signing, no network needed
    print("1. Signing a request offline...")
    authorization = sign(SigningContext(
        secret_id="AKID_TEST",
        secret_key="SECRET_TEST",
        host="cvm.tencentcloudapi.com",
        service="cvm",
        region="ap-nanjing",
        action="DescribeInstances",
        version="2017-03-12",
        timestamp=1700000000,
        payload={"Limit": 1, "Offset": 0},
    ))
    print(f"   Authorization: {authorization}\n")

    print("2. Creating client from environment...")
    try:
        client = TencentCloudClient.from_env()
    except ConfigurationError as e:
        print(f"   ✗ {e}")
        print("   Set TENCENTCLOUD_SECRET_ID and TENCENTCLOUD_SECRET_KEY to run the live examples.")
        return 1
    print(f"   Client created for region: {client.region}")
    print(f"   Secret id: {client.credential.secret_id[:8]}...\n")

    with client:
        # Example 2: CVM
        print("3. Listing CVM instances...")
        try:
            result = instance.describe_instances(client, {"Limit": 5, "Offset": 0})
            print(f"   ✓ {result['TotalCount']} instance(s)")
            for item in result['InstanceSet'] or []:
                print(f"   - {item['InstanceId']} {item.get('InstanceName')} {item.get('InstanceState')}")
        except TencentCloudError as e:
            print(f"   ✗ DescribeInstances error: {e}")
        print()

        # Example 3: VPC
        print("4. Listing VPCs...")
        try:
            result = vpc.describe_vpcs(client, {"Limit": 5})
            print(f"   ✓ {result['TotalCount']} VPC(s)")
            for item in result['VpcSet'] or []:
                print(f"   - {item['VpcId']} {item.get('CidrBlock')}")
        except TencentCloudError as e:
            print(f"   ✗ DescribeVpcs error: {e}")
        print()

        # Example 4: TKE
        print("5. Listing TKE clusters...")
        try:
            result = tke.describe_clusters(client, {"Limit": 5})
            print(f"   ✓ {result['TotalCount']} cluster(s)")
        except TencentCloudError as e:
            print(f"   ✗ DescribeClusters error: {e}")
        print()

    # Example 5: Error handling demonstration
    print("6. Demonstrating error handling...")
    print("   Testing with wrong secret key...")
    with TencentCloudClient(client.credential.secret_id, "wrong-secret-key", region=client.region) as wrong_client:
        try:
            instance.describe_instances(wrong_client, {"Limit": 1})
            print("   ✗ Unexpected success")
        except APIError as e:
            print(f"   ✓ Correctly rejected: {e.code} (RequestId {e.request_id})")

    print("\n=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
