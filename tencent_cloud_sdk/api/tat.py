"""
TAT (TencentCloud Automation Tools) remote command APIs.

Command content is always base64 encoded on the wire.
"""
from typing import Any, Dict, List, Optional, TypedDict

from ..client import TencentCloudClient
from ..constants import TAT_VERSION
from ._response import select

SERVICE = "tat"


class Filter(TypedDict):
    Name: str                  # command-id, invocation-id, instance-kind, ...
    Values: List[str]


class CreateCommandParams(TypedDict, total=False):
    CommandName: str           # at most 60 bytes
    Content: str               # base64, at most 64KB
    Description: str
    CommandType: str           # SHELL | POWERSHELL
    WorkingDirectory: str
    Timeout: int               # seconds, 1..86400
    EnableParameter: bool
    DefaultParameters: str     # JSON text
    Username: str


class DescribeCommandsParams(TypedDict, total=False):
    CommandIds: List[str]      # mutually exclusive with Filters
    Filters: List[Filter]
    Limit: int
    Offset: int


class DescribeInvocationsParams(TypedDict, total=False):
    InvocationIds: List[str]
    Filters: List[Filter]
    Limit: int
    Offset: int


class DescribeInvocationTasksParams(TypedDict, total=False):
    InvocationTaskIds: List[str]
    Filters: List[Filter]
    Limit: int
    Offset: int
    HideOutput: bool


class TaskResult(TypedDict, total=False):
    ExitCode: int
    Output: str                # base64
    Dropped: int
    OutputUrl: str
    ExecStartTime: str
    ExecEndTime: str


class InvocationTask(TypedDict, total=False):
    CommandId: str
    InvocationId: str
    InvocationTaskId: str
    TaskStatus: str
    InstanceId: str
    TaskResult: TaskResult
    ErrorInfo: str
    StartTime: str
    EndTime: str


class RunCommandParams(TypedDict, total=False):
    Content: str
    InstanceIds: List[str]     # at most 200
    CommandName: str
    Description: str
    CommandType: str
    WorkingDirectory: str
    Timeout: int
    SaveCommand: bool
    EnableParameter: bool
    DefaultParameters: str
    Parameters: str
    Username: str


def create_command(
    client: TencentCloudClient,
    params: CreateCommandParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Save a command. Returns ``CommandId`` and ``RequestId``."""
    response = client.call(SERVICE, TAT_VERSION, "CreateCommand", params, region=region)
    return select(response, 'CommandId')


def delete_command(
    client: TencentCloudClient,
    command_id: str,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Delete a saved command. Commands bound to an invoker cannot be deleted."""
    response = client.call(SERVICE, TAT_VERSION, "DeleteCommand", {'CommandId': command_id}, region=region)
    return select(response)


def describe_commands(
    client: TencentCloudClient,
    params: Optional[DescribeCommandsParams] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    response = client.call(SERVICE, TAT_VERSION, "DescribeCommands", params or {}, region=region)
    return select(response, 'CommandSet', 'TotalCount')


def describe_invocations(
    client: TencentCloudClient,
    params: Optional[DescribeInvocationsParams] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    response = client.call(SERVICE, TAT_VERSION, "DescribeInvocations", params or {}, region=region)
    return select(response, 'InvocationSet', 'TotalCount')


def describe_invocation_tasks(
    client: TencentCloudClient,
    params: Optional[DescribeInvocationTasksParams] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    response = client.call(SERVICE, TAT_VERSION, "DescribeInvocationTasks", params or {}, region=region)
    return select(response, 'InvocationTaskSet', 'TotalCount')


def invoke_command(
    client: TencentCloudClient,
    params: RunCommandParams,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """Run a command on instances. Returns ``CommandId``, ``InvocationId`` and ``RequestId``."""
    response = client.call(SERVICE, TAT_VERSION, "RunCommand", params, region=region)
    return select(response, 'CommandId', 'InvocationId')
