"""
Run shell commands on instances through TAT and wait for the results.
"""
import base64
import dataclasses
import time
from typing import Callable, List, Optional

from .api import tat
from .client import TencentCloudClient
from .constants import TASK_FAILURE_STATES, TASK_TERMINAL_STATES
from .exceptions import CommandError
from .log import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ExecutionResult:
    invocation_id: str
    command_id: str


@dataclasses.dataclass(frozen=True)
class TaskStatus:
    instance_id: str
    status: str
    output: Optional[str] = None
    exit_code: Optional[int] = None


@dataclasses.dataclass(frozen=True)
class InvocationStatus:
    status: str
    tasks: List[TaskStatus]


@dataclasses.dataclass(frozen=True)
class CommandResult:
    status: str                # SUCCESS | FAILED | TIMEOUT
    output: str
    exit_code: int


def _encode(text: str) -> str:
    return base64.b64encode(text.encode('utf-8')).decode('ascii')


def _decode(text: str) -> str:
    return base64.b64decode(text).decode('utf-8', errors='replace')


def execute_command(
    client: TencentCloudClient,
    instance_ids: List[str],
    content: str,
    command_name: Optional[str] = None,
    working_directory: str = "/root",
    timeout: int = 60,
    save_command: bool = False,
) -> ExecutionResult:
    """
    Start a shell command on one or more instances.

    Args:
        client: API client
        instance_ids: Target instances
        content: Shell script text (encoded before sending)
        command_name: Optional command name
        working_directory: Directory the script runs in
        timeout: Command timeout in seconds
        save_command: Keep the command for later reuse

    Returns:
        ExecutionResult with the invocation and command ids
    """
    params = {
        'Content': _encode(content),
        'InstanceIds': instance_ids,
        'WorkingDirectory': working_directory,
        'Timeout': timeout,
        'SaveCommand': save_command,
        'CommandType': 'SHELL',
    }
    if command_name:
        params['CommandName'] = command_name

    result = tat.invoke_command(client, params)
    logger.info(f"Started invocation {result['InvocationId']} on {len(instance_ids)} instance(s)")
    return ExecutionResult(
        invocation_id=result['InvocationId'],
        command_id=result['CommandId'],
    )


def get_invocation_status(client: TencentCloudClient, invocation_id: str) -> InvocationStatus:
    """
    Current state of an invocation and its per-instance tasks, without waiting.

    Raises:
        CommandError: If the invocation does not exist
    """
    invocations = tat.describe_invocations(client, {'InvocationIds': [invocation_id]})
    invocation_set = invocations.get('InvocationSet') or []
    if not invocation_set:
        raise CommandError(f"Invocation {invocation_id} does not exist")

    tasks = tat.describe_invocation_tasks(client, {
        'Filters': [{'Name': 'invocation-id', 'Values': [invocation_id]}],
        'HideOutput': False,
    })

    statuses = []
    for task in tasks.get('InvocationTaskSet') or []:
        task_result = task.get('TaskResult') or {}
        output = task_result.get('Output')
        statuses.append(TaskStatus(
            instance_id=task.get('InstanceId'),
            status=task.get('TaskStatus'),
            output=_decode(output) if output else None,
            exit_code=task_result.get('ExitCode'),
        ))

    return InvocationStatus(status=invocation_set[0].get('InvocationStatus'), tasks=statuses)


def wait_for_completion(
    client: TencentCloudClient,
    invocation_id: str,
    poll_interval: float = 2.0,
    max_wait_time: float = 300.0,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> CommandResult:
    """
    Poll an invocation until every task reaches a terminal state.

    The first FAILED or TIMEOUT task wins; otherwise the first task's
    output is returned as SUCCESS. If ``max_wait_time`` seconds pass
    first, a TIMEOUT result with exit code -1 is returned.
    """
    started = clock()

    while clock() - started < max_wait_time:
        status = get_invocation_status(client, invocation_id)

        # Tasks appear shortly after RunCommand returns; keep polling until they do.
        if status.tasks and all(task.status in TASK_TERMINAL_STATES for task in status.tasks):
            for task in status.tasks:
                if task.status in TASK_FAILURE_STATES:
                    logger.info(f"Invocation {invocation_id} ended with {task.status} on {task.instance_id}")
                    return CommandResult(
                        status=task.status,
                        output=task.output or '',
                        exit_code=task.exit_code if task.exit_code is not None else -1,
                    )

            first = status.tasks[0]
            return CommandResult(
                status='SUCCESS',
                output=first.output or '',
                exit_code=first.exit_code if first.exit_code is not None else 0,
            )

        sleep(poll_interval)

    logger.info(f"Gave up waiting for invocation {invocation_id} after {max_wait_time}s")
    return CommandResult(status='TIMEOUT', output='', exit_code=-1)
