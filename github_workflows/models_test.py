"""Unit tests for models module."""

import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from .models import (
    CreateWorkflowDispatchEventRequest,
    ListOptions,
    Workflow,
    WorkflowBill,
    WorkflowEnvironment,
    Workflows,
    WorkflowUsage,
)

CREATED = datetime(2019, 1, 2, 15, 4, 5, tzinfo=timezone.utc)
UPDATED = datetime(2020, 1, 2, 15, 4, 5, tzinfo=timezone.utc)


def describe_timestamps():
    def it_parses_utc_z_suffix():
        assert Workflow.model_validate({"created_at": "2019-01-02T15:04:05Z"}).created_at == CREATED

    def it_keeps_offsets():
        parsed = Workflow.model_validate({"created_at": "2019-01-02T17:04:05+02:00"}).created_at
        assert parsed == CREATED
        assert parsed.utcoffset() == timedelta(hours=2)

    def it_parses_epoch_seconds():
        assert Workflow.model_validate({"created_at": 1546441445}).created_at == CREATED

    @pytest.mark.parametrize("value", ["yesterday", "2019-13-45T00:00:00Z", "", {}, [2019]])
    def it_rejects_malformed_values(value):
        with pytest.raises(ValidationError, match="created_at"):
            Workflow.model_validate({"id": 1, "created_at": value})

    def it_rejects_out_of_range_epochs():
        with pytest.raises(ValidationError, match="created_at"):
            Workflow.model_validate({"id": 1, "created_at": 10**20})

    def it_rejects_naive_timestamps():
        with pytest.raises(ValidationError, match="updated_at"):
            Workflow.model_validate({"updated_at": "2019-01-02T15:04:05"})

    def it_renders_utc_with_z():
        assert Workflow(created_at=CREATED).to_dict() == {"created_at": "2019-01-02T15:04:05Z"}


def describe_Workflow():
    def it_decodes_all_fields():
        data = {
            "id": 161335,
            "node_id": "MDg6V29ya2Zsb3cxNjEzMzU=",
            "name": "CI",
            "path": ".github/workflows/blank.yaml",
            "state": "active",
            "created_at": "2019-01-02T15:04:05Z",
            "updated_at": "2020-01-02T15:04:05Z",
            "url": "https://api.github.com/repos/octo-org/octo-repo/actions/workflows/161335",
            "html_url": "https://github.com/octo-org/octo-repo/blob/master/.github/workflows/161335",
            "badge_url": "https://github.com/octo-org/octo-repo/workflows/CI/badge.svg",
        }
        workflow = Workflow.model_validate(data)

        assert workflow.id == 161335
        assert workflow.name == "CI"
        assert workflow.state == "active"
        assert workflow.created_at == CREATED
        assert workflow.updated_at == UPDATED
        assert workflow.badge_url.endswith("badge.svg")

    def it_keeps_absent_fields_as_none():
        workflow = Workflow.model_validate({"name": "CI"})

        assert workflow.id is None
        assert workflow.created_at is None
        assert workflow.path is None

    def it_keeps_zero_distinct_from_absent():
        assert Workflow.model_validate({"id": 0}).id == 0
        assert Workflow.model_validate({}).id is None

    def it_ignores_unknown_keys():
        assert Workflow.model_validate({"id": 1, "extra": [1, 2]}) == Workflow(id=1)

    def it_rejects_wrong_types():
        with pytest.raises(ValidationError, match="id"):
            Workflow.model_validate({"id": "72844"})
        with pytest.raises(ValidationError, match="id"):
            Workflow.model_validate({"id": True})
        with pytest.raises(ValidationError, match="name"):
            Workflow.model_validate({"name": 5})

    def it_rejects_non_objects():
        with pytest.raises(ValidationError):
            Workflow.model_validate([{"id": 1}])

    def it_is_immutable():
        workflow = Workflow(id=1)
        with pytest.raises(ValidationError):
            workflow.id = 2

    def it_omits_absent_fields_when_encoding():
        workflow = Workflow(id=72844, created_at=CREATED)
        assert workflow.to_dict() == {"id": 72844, "created_at": "2019-01-02T15:04:05Z"}


def describe_Workflows():
    def it_preserves_server_order():
        data = {"total_count": 3, "workflows": [{"id": 3}, {"id": 1}, {"id": 2}]}
        result = Workflows.model_validate(data)

        assert result.total_count == 3
        assert [w.id for w in result.workflows] == [3, 1, 2]

    def it_treats_missing_list_as_empty():
        result = Workflows.model_validate({})

        assert result.total_count is None
        assert result.workflows == []

    def it_rejects_non_list_workflows():
        with pytest.raises(ValidationError):
            Workflows.model_validate({"workflows": {"id": 1}})


def describe_WorkflowUsage():
    def it_decodes_each_runner_os():
        data = {
            "billable": {
                "UBUNTU": {"total_ms": 180000},
                "MACOS": {"total_ms": 240000},
                "WINDOWS": {"total_ms": 300000},
            }
        }
        usage = WorkflowUsage.model_validate(data)

        assert usage.billable.ubuntu == WorkflowBill(total_ms=180000)
        assert usage.billable.macos == WorkflowBill(total_ms=240000)
        assert usage.billable.windows == WorkflowBill(total_ms=300000)

    def it_leaves_unused_runners_absent():
        usage = WorkflowUsage.model_validate({"billable": {"UBUNTU": {"total_ms": 0}}})

        assert usage.billable.ubuntu.total_ms == 0
        assert usage.billable.macos is None
        assert usage.billable.windows is None

    def it_leaves_missing_billable_absent():
        assert WorkflowUsage.model_validate({}).billable is None

    def it_keeps_bill_without_total_absent():
        assert WorkflowBill.model_validate({}).total_ms is None

    def it_rejects_boolean_totals():
        with pytest.raises(ValidationError, match="total_ms"):
            WorkflowBill.model_validate({"total_ms": True})

    def it_encodes_only_present_runners_with_api_keys():
        usage = WorkflowUsage(billable=WorkflowEnvironment(macos=WorkflowBill(total_ms=5)))
        assert usage.to_dict() == {"billable": {"MACOS": {"total_ms": 5}}}


def describe_CreateWorkflowDispatchEventRequest():
    def it_encodes_ref_and_inputs():
        event = CreateWorkflowDispatchEventRequest(ref="d4cfb6e7", inputs={"key": "value"})
        assert event.to_dict() == {"ref": "d4cfb6e7", "inputs": {"key": "value"}}

    def it_omits_absent_inputs():
        assert CreateWorkflowDispatchEventRequest(ref="main").to_dict() == {"ref": "main"}

    def it_keeps_empty_inputs():
        event = CreateWorkflowDispatchEventRequest(ref="main", inputs={})
        assert event.to_dict() == {"ref": "main", "inputs": {}}

    def it_preserves_arbitrary_json_values():
        inputs = {"s": "x", "n": 1.5, "b": False, "o": {"nested": [1, None]}, "a": [], "z": None}
        event = CreateWorkflowDispatchEventRequest(ref="main", inputs=inputs)

        decoded = CreateWorkflowDispatchEventRequest.model_validate(json.loads(json.dumps(event.to_dict())))

        assert decoded == event
        assert decoded.inputs["z"] is None

    def it_requires_ref():
        with pytest.raises(ValidationError, match="ref"):
            CreateWorkflowDispatchEventRequest.model_validate({"inputs": {}})

    def it_rejects_non_json_inputs():
        with pytest.raises(ValidationError):
            CreateWorkflowDispatchEventRequest(ref="main", inputs={"when": object()})


def describe_ListOptions():
    def it_renders_set_values_as_strings():
        assert ListOptions(page=2, per_page=2).to_params() == {"page": "2", "per_page": "2"}

    def it_omits_unset_values():
        assert ListOptions().to_params() == {}
        assert ListOptions(per_page=50).to_params() == {"per_page": "50"}
