"""Workflow builder that accumulates entities and assembles a Workflow."""

import logging

from bpmnflow.common.exceptions import WorkflowBuildError
from bpmnflow.models import FlowNode, FlowNodeType, Role, SequenceFlow, Workflow

logger = logging.getLogger(__name__)


class WorkflowBuilder:
    """
    Collects roles, flow nodes and sequence flows, then builds a Workflow.

    Registration never validates references: nodes may name roles and flows
    that are registered later. All cross-entity checks run in ``build()``,
    which reports every problem at once.
    """

    def __init__(self):
        self._workflow_id: str | None = None
        self._workflow_name: str | None = None
        self._roles: list[Role] = []
        self._flow_nodes: list[FlowNode] = []
        self._sequence_flows: list[SequenceFlow] = []

    def set_workflow_id(self, workflow_id: str) -> "WorkflowBuilder":
        self._workflow_id = workflow_id
        return self

    def set_workflow_name(self, name: str | None) -> "WorkflowBuilder":
        self._workflow_name = name
        return self

    def add_role(self, id: str, name: str | None = None) -> "WorkflowBuilder":
        self._roles.append(Role(id=id, name=name))
        return self

    def add_start_event(
        self,
        id: str,
        role_id: str | None = None,
        name: str | None = None,
        default_flow_id: str | None = None,
    ) -> "WorkflowBuilder":
        return self._add_flow_node(
            FlowNodeType.START_EVENT, id, role_id, name, default_flow_id
        )

    def add_task(
        self,
        id: str,
        role_id: str | None = None,
        name: str | None = None,
        default_flow_id: str | None = None,
    ) -> "WorkflowBuilder":
        return self._add_flow_node(FlowNodeType.TASK, id, role_id, name, default_flow_id)

    def add_exclusive_gateway(
        self,
        id: str,
        role_id: str | None = None,
        name: str | None = None,
        default_flow_id: str | None = None,
    ) -> "WorkflowBuilder":
        return self._add_flow_node(
            FlowNodeType.EXCLUSIVE_GATEWAY, id, role_id, name, default_flow_id
        )

    def add_end_event(
        self, id: str, role_id: str | None = None, name: str | None = None
    ) -> "WorkflowBuilder":
        return self._add_flow_node(FlowNodeType.END_EVENT, id, role_id, name, None)

    def add_sequence_flow(
        self,
        source_id: str,
        target_id: str,
        id: str,
        name: str | None = None,
        condition: str | None = None,
    ) -> "WorkflowBuilder":
        self._sequence_flows.append(
            SequenceFlow(
                id=id,
                source_id=source_id,
                target_id=target_id,
                name=name,
                condition=condition,
            )
        )
        return self

    def _add_flow_node(
        self,
        node_type: FlowNodeType,
        id: str,
        role_id: str | None,
        name: str | None,
        default_flow_id: str | None,
    ) -> "WorkflowBuilder":
        self._flow_nodes.append(
            FlowNode(
                id=id,
                node_type=node_type,
                name=name,
                role_id=role_id,
                default_flow_id=default_flow_id,
            )
        )
        return self

    def build(self) -> Workflow:
        """
        Validate the registered entities and create the Workflow.

        Returns:
            Immutable Workflow

        Raises:
            WorkflowBuildError: If any structural or referential check fails
        """
        errors = self._collect_errors()
        if errors:
            logger.debug(f"Workflow '{self._workflow_id}' has {len(errors)} build errors")
            raise WorkflowBuildError(errors, workflow_id=self._workflow_id)

        return Workflow(
            id=self._workflow_id or "",
            name=self._workflow_name,
            roles=tuple(self._roles),
            flow_nodes=tuple(self._flow_nodes),
            sequence_flows=tuple(self._sequence_flows),
        )

    def _collect_errors(self) -> list[str]:
        errors: list[str] = []

        if not self._workflow_id:
            errors.append("Workflow id must be a non-empty string")

        errors.extend(self._check_unique_ids())

        role_ids = {role.id for role in self._roles}
        nodes = {node.id: node for node in self._flow_nodes}
        flows = {flow.id: flow for flow in self._sequence_flows}

        for node in self._flow_nodes:
            if node.role_id is not None and node.role_id not in role_ids:
                errors.append(
                    f"Flow node '{node.id}' references unknown role '{node.role_id}'"
                )
            if node.default_flow_id is None:
                continue
            default_flow = flows.get(node.default_flow_id)
            if default_flow is None:
                errors.append(
                    f"Flow node '{node.id}' references unknown default flow "
                    f"'{node.default_flow_id}'"
                )
            elif default_flow.source_id != node.id:
                errors.append(
                    f"Default flow '{default_flow.id}' of flow node '{node.id}' "
                    f"does not leave that node (source is '{default_flow.source_id}')"
                )

        for flow in self._sequence_flows:
            source = nodes.get(flow.source_id)
            target = nodes.get(flow.target_id)
            if source is None:
                errors.append(
                    f"Sequence flow '{flow.id}' references unknown source '{flow.source_id}'"
                )
            elif source.node_type is FlowNodeType.END_EVENT:
                errors.append(
                    f"Sequence flow '{flow.id}' cannot leave end event '{source.id}'"
                )
            if target is None:
                errors.append(
                    f"Sequence flow '{flow.id}' references unknown target '{flow.target_id}'"
                )
            elif target.node_type is FlowNodeType.START_EVENT:
                errors.append(
                    f"Sequence flow '{flow.id}' cannot enter start event '{target.id}'"
                )

        node_types = {node.node_type for node in self._flow_nodes}
        if FlowNodeType.START_EVENT not in node_types:
            errors.append("Workflow must have at least one start event")
        if FlowNodeType.END_EVENT not in node_types:
            errors.append("Workflow must have at least one end event")

        return errors

    def _check_unique_ids(self) -> list[str]:
        errors: list[str] = []
        seen: set[str] = set()
        all_ids = (
            [role.id for role in self._roles]
            + [node.id for node in self._flow_nodes]
            + [flow.id for flow in self._sequence_flows]
        )
        for entity_id in all_ids:
            if entity_id in seen:
                errors.append(f"Duplicate id '{entity_id}' in workflow")
            seen.add(entity_id)
        return errors
