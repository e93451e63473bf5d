"""Tests for WorkflowBuilder registration and build checks."""

import pytest

from bpmnflow.common.exceptions import WorkflowBuildError
from bpmnflow.models import FlowNodeType, Workflow
from bpmnflow.workflow import WorkflowBuilder


def minimal_builder() -> WorkflowBuilder:
    """Builder holding a valid S1 -> T1 -> E1 workflow."""
    return (
        WorkflowBuilder()
        .set_workflow_id("P1")
        .add_role("L1")
        .add_start_event("S1", "L1", None, "F1")
        .add_task("T1", "L1")
        .add_end_event("E1")
        .add_sequence_flow("S1", "T1", "F1")
        .add_sequence_flow("T1", "E1", "F2")
    )


def build_errors(builder: WorkflowBuilder) -> list[str]:
    with pytest.raises(WorkflowBuildError) as exc_info:
        builder.build()
    return exc_info.value.errors


class TestWorkflowBuilderSuccess:
    def test_build_minimal_workflow(self):
        workflow = minimal_builder().build()

        assert isinstance(workflow, Workflow)
        assert workflow.id == "P1"
        assert workflow.name is None
        assert [role.id for role in workflow.roles] == ["L1"]
        assert [node.id for node in workflow.flow_nodes] == ["S1", "T1", "E1"]
        assert [flow.id for flow in workflow.sequence_flows] == ["F1", "F2"]

    def test_registration_methods_chain(self):
        builder = WorkflowBuilder()
        assert builder.set_workflow_id("P1") is builder
        assert builder.set_workflow_name("Name") is builder
        assert builder.add_role("L1") is builder
        assert builder.add_start_event("S1") is builder
        assert builder.add_task("T1") is builder
        assert builder.add_exclusive_gateway("G1") is builder
        assert builder.add_end_event("E1") is builder
        assert builder.add_sequence_flow("S1", "E1", "F1") is builder

    def test_node_attributes_are_kept(self):
        workflow = (
            minimal_builder()
            .add_exclusive_gateway("G1", "L1", "Decide", "F3")
            .add_sequence_flow("G1", "E1", "F3", "fallback", "${x}")
            .build()
        )

        gateway = workflow.get_flow_node("G1")
        assert gateway.node_type is FlowNodeType.EXCLUSIVE_GATEWAY
        assert gateway.role_id == "L1"
        assert gateway.name == "Decide"
        assert gateway.default_flow_id == "F3"

        flow = workflow.get_sequence_flow("F3")
        assert flow.name == "fallback"
        assert flow.condition == "${x}"

    def test_references_resolved_at_build_time(self):
        """Nodes may refer to roles and flows registered after them."""
        workflow = (
            WorkflowBuilder()
            .set_workflow_id("late")
            .add_start_event("S1", "L1", None, "F1")
            .add_end_event("E1", "L1")
            .add_sequence_flow("S1", "E1", "F1")
            .add_role("L1")
            .build()
        )
        assert workflow.get_flow_node("S1").role_id == "L1"

    def test_workflow_name_last_set_wins(self):
        workflow = minimal_builder().set_workflow_name("a").set_workflow_name("b").build()
        assert workflow.name == "b"

    def test_build_can_be_called_twice(self):
        builder = minimal_builder()
        assert builder.build() == builder.build()


class TestWorkflowBuilderErrors:
    def test_missing_workflow_id(self):
        builder = (
            WorkflowBuilder()
            .add_start_event("S1")
            .add_end_event("E1")
            .add_sequence_flow("S1", "E1", "F1")
        )
        assert build_errors(builder) == ["Workflow id must be a non-empty string"]

    def test_empty_workflow_id(self):
        builder = minimal_builder().set_workflow_id("")
        assert "Workflow id must be a non-empty string" in build_errors(builder)

    def test_duplicate_node_id(self):
        builder = minimal_builder().add_task("T1")
        assert "Duplicate id 'T1' in workflow" in build_errors(builder)

    def test_duplicate_id_across_entity_kinds(self):
        builder = minimal_builder().add_role("F1")
        assert "Duplicate id 'F1' in workflow" in build_errors(builder)

    def test_unknown_role(self):
        builder = minimal_builder().add_task("T2", "ghost")
        assert "Flow node 'T2' references unknown role 'ghost'" in build_errors(builder)

    def test_unknown_default_flow(self):
        builder = minimal_builder().add_task("T2", None, None, "nowhere")
        assert (
            "Flow node 'T2' references unknown default flow 'nowhere'"
            in build_errors(builder)
        )

    def test_default_flow_must_leave_node(self):
        builder = minimal_builder().add_exclusive_gateway("G1", None, None, "F2")
        assert (
            "Default flow 'F2' of flow node 'G1' does not leave that node (source is 'T1')"
            in build_errors(builder)
        )

    def test_unknown_source_and_target(self):
        builder = minimal_builder().add_sequence_flow("X1", "X2", "F9")
        errors = build_errors(builder)
        assert "Sequence flow 'F9' references unknown source 'X1'" in errors
        assert "Sequence flow 'F9' references unknown target 'X2'" in errors

    def test_flow_leaving_end_event(self):
        builder = minimal_builder().add_sequence_flow("E1", "T1", "F9")
        assert "Sequence flow 'F9' cannot leave end event 'E1'" in build_errors(builder)

    def test_flow_entering_start_event(self):
        builder = minimal_builder().add_sequence_flow("T1", "S1", "F9")
        assert "Sequence flow 'F9' cannot enter start event 'S1'" in build_errors(builder)

    def test_missing_start_and_end_events(self):
        builder = WorkflowBuilder().set_workflow_id("P1").add_task("T1")
        assert build_errors(builder) == [
            "Workflow must have at least one start event",
            "Workflow must have at least one end event",
        ]

    def test_all_errors_reported_together(self):
        builder = (
            WorkflowBuilder()
            .add_task("T1", "ghost")
            .add_task("T1")
        )
        with pytest.raises(WorkflowBuildError) as exc_info:
            builder.build()

        error = exc_info.value
        assert error.error_count == 5
        assert error.workflow_id is None
        assert str(error).startswith("Workflow build failed with 5 errors:")

    def test_error_carries_workflow_id(self):
        with pytest.raises(WorkflowBuildError) as exc_info:
            minimal_builder().add_task("T1").build()
        assert exc_info.value.workflow_id == "P1"


class TestWorkflowBuildErrorFormatting:
    def test_single_error_message(self):
        error = WorkflowBuildError(["only problem"])
        assert error.message == "Workflow build failed with 1 error:\n  • only problem"
        assert error.get_error_summary() == "1 build error: only problem"

    def test_multiple_error_summary(self):
        error = WorkflowBuildError(["first", "second"])
        assert error.get_error_summary() == "2 build errors:\n  1. first\n  2. second"
