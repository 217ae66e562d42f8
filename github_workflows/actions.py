"""GitHub Actions workflow endpoints.

API docs: https://docs.github.com/en/rest/actions/workflows
"""

from typing import TYPE_CHECKING
from urllib.parse import quote

from .errors import RequestError
from .models import (
    CreateWorkflowDispatchEventRequest,
    ListOptions,
    Workflow,
    Workflows,
    WorkflowUsage,
)

if TYPE_CHECKING:
    from .client import GitHubClient, Response

# A workflow is addressed either by its numeric ID or by its file name
WorkflowRef = int | str


def _workflow_path(owner: str, repo: str, workflow: WorkflowRef) -> str:
    if isinstance(workflow, bool) or not isinstance(workflow, (int, str)):
        raise RequestError(f"workflow must be an int ID or a file name, got {workflow!r}")
    if isinstance(workflow, str):
        if not workflow:
            raise RequestError("workflow file name must not be empty")
        segment = quote(workflow, safe="")
    else:
        segment = str(workflow)
    return f"repos/{owner}/{repo}/actions/workflows/{segment}"


class ActionsService:
    """Workflow operations of the GitHub Actions API."""

    def __init__(self, client: "GitHubClient"):
        self._client = client

    def list_workflows(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[Workflows, "Response"]:
        """List one page of workflows in a repository."""
        params = opts.to_params() if opts else {}
        req = self._client.new_request(
            "GET", f"repos/{owner}/{repo}/actions/workflows", params=params or None
        )
        workflows, resp = self._client.do(req, Workflows.model_validate)
        return workflows if workflows is not None else Workflows(), resp

    def _get_workflow(self, owner: str, repo: str, workflow: WorkflowRef) -> tuple[Workflow, "Response"]:
        req = self._client.new_request("GET", _workflow_path(owner, repo, workflow))
        result, resp = self._client.do(req, Workflow.model_validate)
        return result if result is not None else Workflow(), resp

    def get_workflow_by_id(self, owner: str, repo: str, workflow_id: int) -> tuple[Workflow, "Response"]:
        return self._get_workflow(owner, repo, workflow_id)

    def get_workflow_by_file_name(
        self, owner: str, repo: str, workflow_file_name: str
    ) -> tuple[Workflow, "Response"]:
        return self._get_workflow(owner, repo, workflow_file_name)

    def _get_workflow_usage(
        self, owner: str, repo: str, workflow: WorkflowRef
    ) -> tuple[WorkflowUsage, "Response"]:
        req = self._client.new_request("GET", f"{_workflow_path(owner, repo, workflow)}/timing")
        usage, resp = self._client.do(req, WorkflowUsage.model_validate)
        return usage if usage is not None else WorkflowUsage(), resp

    def get_workflow_usage_by_id(
        self, owner: str, repo: str, workflow_id: int
    ) -> tuple[WorkflowUsage, "Response"]:
        """Billable minutes of the current billing cycle, per runner OS."""
        return self._get_workflow_usage(owner, repo, workflow_id)

    def get_workflow_usage_by_file_name(
        self, owner: str, repo: str, workflow_file_name: str
    ) -> tuple[WorkflowUsage, "Response"]:
        """Billable minutes of the current billing cycle, per runner OS."""
        return self._get_workflow_usage(owner, repo, workflow_file_name)

    def _create_workflow_dispatch_event(
        self,
        owner: str,
        repo: str,
        workflow: WorkflowRef,
        event: CreateWorkflowDispatchEventRequest,
    ) -> "Response":
        req = self._client.new_request(
            "POST", f"{_workflow_path(owner, repo, workflow)}/dispatches", body=event
        )
        _, resp = self._client.do(req)
        return resp

    def create_workflow_dispatch_event_by_id(
        self,
        owner: str,
        repo: str,
        workflow_id: int,
        event: CreateWorkflowDispatchEventRequest,
    ) -> "Response":
        """Trigger a workflow_dispatch run. GitHub answers 204 with no body."""
        return self._create_workflow_dispatch_event(owner, repo, workflow_id, event)

    def create_workflow_dispatch_event_by_file_name(
        self,
        owner: str,
        repo: str,
        workflow_file_name: str,
        event: CreateWorkflowDispatchEventRequest,
    ) -> "Response":
        """Trigger a workflow_dispatch run. GitHub answers 204 with no body."""
        return self._create_workflow_dispatch_event(owner, repo, workflow_file_name, event)

    def _set_workflow_state(self, owner: str, repo: str, workflow: WorkflowRef, action: str) -> "Response":
        # enable/disable take no body, not even an empty JSON object
        req = self._client.new_request("PUT", f"{_workflow_path(owner, repo, workflow)}/{action}")
        _, resp = self._client.do(req)
        return resp

    def enable_workflow_by_id(self, owner: str, repo: str, workflow_id: int) -> "Response":
        return self._set_workflow_state(owner, repo, workflow_id, "enable")

    def enable_workflow_by_file_name(self, owner: str, repo: str, workflow_file_name: str) -> "Response":
        return self._set_workflow_state(owner, repo, workflow_file_name, "enable")

    def disable_workflow_by_id(self, owner: str, repo: str, workflow_id: int) -> "Response":
        return self._set_workflow_state(owner, repo, workflow_id, "disable")

    def disable_workflow_by_file_name(self, owner: str, repo: str, workflow_file_name: str) -> "Response":
        return self._set_workflow_state(owner, repo, workflow_file_name, "disable")
