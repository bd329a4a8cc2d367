"""
Operation catalog: one module per Tencent Cloud service.

Every function takes a :class:`~tencent_cloud_sdk.client.TencentCloudClient`
first and returns the documented response fields plus ``RequestId``.
"""

from . import instance, subnet, tat, tke, vpc

__all__ = ["instance", "subnet", "tat", "tke", "vpc"]
