"""
Workflow graph models.

A ``Workflow`` is the immutable result of reading a BPMN2 document: roles
(lanes), flow nodes and the sequence flows that connect them. Entities refer
to each other by id only.

Note: This module must NOT import from other bpmnflow modules except .enums
to keep the model layer free of reader and builder dependencies.
"""

from dataclasses import dataclass, field
from typing import Any

from .enums import FlowNodeType


@dataclass(frozen=True)
class Role:
    """A workflow role, read from a BPMN2 lane."""

    id: str
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class FlowNode:
    """A node of the workflow graph.

    Attributes:
        id: Unique node identifier
        node_type: Kind of node
        name: Optional display name
        role_id: Id of the owning role, None when the node has no lane
        default_flow_id: Id of the default outgoing sequence flow
    """

    id: str
    node_type: FlowNodeType
    name: str | None = None
    role_id: str | None = None
    default_flow_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.node_type.value,
            "name": self.name,
            "role": self.role_id,
            "default": self.default_flow_id,
        }


@dataclass(frozen=True)
class SequenceFlow:
    """A directed edge between two flow nodes."""

    id: str
    source_id: str
    target_id: str
    name: str | None = None
    condition: str | None = None  # raw expression text, never evaluated

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source_id,
            "target": self.target_id,
            "name": self.name,
            "condition": self.condition,
        }


@dataclass(frozen=True)
class Workflow:
    """Immutable workflow graph produced by ``WorkflowBuilder.build``.

    Collections keep the order in which entities were registered, which for
    documents read by ``Bpmn2Reader`` is document order per element kind.
    """

    id: str
    name: str | None = None
    roles: tuple[Role, ...] = ()
    flow_nodes: tuple[FlowNode, ...] = ()
    sequence_flows: tuple[SequenceFlow, ...] = ()
    _node_index: dict[str, FlowNode] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self):
        """Index flow nodes by id for lookups."""
        object.__setattr__(
            self, "_node_index", {node.id: node for node in self.flow_nodes}
        )

    def get_flow_node(self, node_id: str) -> FlowNode | None:
        """Get a flow node by id, or None if it does not exist."""
        return self._node_index.get(node_id)

    def get_role(self, role_id: str) -> Role | None:
        """Get a role by id, or None if it does not exist."""
        return next((role for role in self.roles if role.id == role_id), None)

    def get_sequence_flow(self, flow_id: str) -> SequenceFlow | None:
        """Get a sequence flow by id, or None if it does not exist."""
        return next((flow for flow in self.sequence_flows if flow.id == flow_id), None)

    @property
    def start_events(self) -> list[FlowNode]:
        return self._nodes_of_type(FlowNodeType.START_EVENT)

    @property
    def end_events(self) -> list[FlowNode]:
        return self._nodes_of_type(FlowNodeType.END_EVENT)

    @property
    def tasks(self) -> list[FlowNode]:
        return self._nodes_of_type(FlowNodeType.TASK)

    @property
    def exclusive_gateways(self) -> list[FlowNode]:
        return self._nodes_of_type(FlowNodeType.EXCLUSIVE_GATEWAY)

    def _nodes_of_type(self, node_type: FlowNodeType) -> list[FlowNode]:
        return [node for node in self.flow_nodes if node.node_type is node_type]

    def outgoing_flows(self, node_id: str) -> list[SequenceFlow]:
        """Sequence flows leaving ``node_id``, in registration order."""
        return [flow for flow in self.sequence_flows if flow.source_id == node_id]

    def incoming_flows(self, node_id: str) -> list[SequenceFlow]:
        """Sequence flows entering ``node_id``, in registration order."""
        return [flow for flow in self.sequence_flows if flow.target_id == node_id]

    def nodes_for_role(self, role_id: str) -> list[FlowNode]:
        """Flow nodes owned by ``role_id``."""
        return [node for node in self.flow_nodes if node.role_id == role_id]

    def to_dict(self) -> dict[str, Any]:
        """Convert workflow to dictionary for JSON/YAML serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "roles": [role.to_dict() for role in self.roles],
            "flow_nodes": [node.to_dict() for node in self.flow_nodes],
            "sequence_flows": [flow.to_dict() for flow in self.sequence_flows],
        }
