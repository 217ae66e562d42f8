"""Pydantic models for the GitHub Actions workflows endpoints.

Every optional field defaults to None, and None always means the key was
absent (or null) in the JSON. Decoding never substitutes a zero value.
"""

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    StrictInt,
    StrictStr,
)


class GitHubModel(BaseModel):
    """Base for API models: unknown keys are ignored, absent keys are not emitted."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Workflow(GitHubModel):
    """A workflow definition as reported by GitHub."""

    model_config = ConfigDict(frozen=True)

    id: StrictInt | None = None
    node_id: StrictStr | None = None
    name: StrictStr | None = None
    path: StrictStr | None = None
    state: StrictStr | None = None
    created_at: AwareDatetime | None = None
    updated_at: AwareDatetime | None = None
    url: StrictStr | None = None
    html_url: StrictStr | None = None
    badge_url: StrictStr | None = None


class Workflows(GitHubModel):
    """One page of a repository's workflows, in server order."""

    total_count: StrictInt | None = None
    workflows: list[Workflow] = Field(default_factory=list)


class WorkflowBill(GitHubModel):
    """Billable time for one runner operating system."""

    total_ms: StrictInt | None = None


class WorkflowEnvironment(GitHubModel):
    """Billable time broken down by runner OS. Unused runners are None."""

    ubuntu: WorkflowBill | None = Field(default=None, alias="UBUNTU")
    macos: WorkflowBill | None = Field(default=None, alias="MACOS")
    windows: WorkflowBill | None = Field(default=None, alias="WINDOWS")


class WorkflowUsage(GitHubModel):
    """Response of the workflow timing endpoint."""

    billable: WorkflowEnvironment | None = None


class CreateWorkflowDispatchEventRequest(GitHubModel):
    """Body of a workflow_dispatch event.

    ``ref`` is the branch, tag or commit SHA to run the workflow on. ``inputs``
    maps input names to any JSON-compatible value.
    """

    ref: StrictStr
    inputs: dict[str, JsonValue] | None = None

    def to_dict(self) -> dict:
        # exclude_none would also strip null values the caller put in inputs
        exclude = {"inputs"} if self.inputs is None else None
        return self.model_dump(mode="json", exclude=exclude)


class ListOptions(GitHubModel):
    """Pagination options. Unset values are not sent."""

    page: int | None = None
    per_page: int | None = None

    def to_params(self) -> dict[str, str]:
        return {k: str(v) for k, v in self.model_dump(exclude_none=True).items()}
