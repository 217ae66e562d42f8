"""Typed client for the GitHub Actions workflows REST API.

Lists workflows, fetches them by ID or file name, reports billable usage,
creates workflow_dispatch events, and enables or disables workflows.
"""

from .actions import ActionsService
from .cli import main
from .client import GitHubClient, Rate, Response, get_client
from .errors import APIError, DecodeError, GitHubWorkflowsError, RateLimitError, RequestError
from .models import (
    CreateWorkflowDispatchEventRequest,
    ListOptions,
    Workflow,
    WorkflowBill,
    WorkflowEnvironment,
    Workflows,
    WorkflowUsage,
)

__all__ = [
    "main",
    "get_client",
    "GitHubClient",
    "ActionsService",
    "Response",
    "Rate",
    "GitHubWorkflowsError",
    "RequestError",
    "DecodeError",
    "APIError",
    "RateLimitError",
    "Workflow",
    "Workflows",
    "WorkflowUsage",
    "WorkflowEnvironment",
    "WorkflowBill",
    "CreateWorkflowDispatchEventRequest",
    "ListOptions",
]
