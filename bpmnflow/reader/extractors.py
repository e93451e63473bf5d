"""
Extraction passes that translate BPMN2 elements into builder registrations.

Each pass walks one element kind in document order and registers what it
finds with a ``WorkflowBuilder``. The passes are independent so they can be
exercised on their own; ``Bpmn2Reader`` runs them in the required order:
process, lanes, start events, tasks, exclusive gateways, end events and
finally sequence flows.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from lxml import etree

from bpmnflow.common.exceptions import MissingIdError
from bpmnflow.models import BPMN2_MODEL_NS
from bpmnflow.workflow import WorkflowBuilder

logger = logging.getLogger(__name__)

NodeRoles = dict[str, str]


def _bpmn_tag(local_name: str) -> str:
    return f"{{{BPMN2_MODEL_NS}}}{local_name}"


def iter_bpmn_elements(document, local_name: str) -> Iterator[etree._Element]:
    """Iterate over BPMN2 model elements named ``local_name`` in document order."""
    return document.iter(_bpmn_tag(local_name))


def get_attribute(element: etree._Element, name: str) -> str | None:
    """Return the value of attribute ``name``, or None when it is not set."""
    return element.get(name)


def element_tag_name(element: etree._Element) -> str:
    """Tag name as written in the source, including its namespace prefix."""
    local_name = etree.QName(element).localname
    return f"{element.prefix}:{local_name}" if element.prefix else local_name


def require_id(element: etree._Element, file_path: str | Path) -> str:
    """
    Return the element's id attribute.

    Raises:
        MissingIdError: If the id attribute is absent or empty
    """
    element_id = get_attribute(element, "id")
    if not element_id:
        raise MissingIdError(element_tag_name(element), str(file_path), element.sourceline)
    return element_id


def element_text(element: etree._Element) -> str:
    """Concatenated text content of ``element`` and its descendants."""
    return "".join(element.itertext())


def read_process(document, builder: WorkflowBuilder, file_path: str | Path) -> str:
    """
    Set the workflow id and name from the ``process`` elements.

    The last process carrying an id wins. Without any process id the file's
    base name, extension stripped, is used.

    Returns:
        The workflow id that was set
    """
    workflow_id = None
    for element in iter_bpmn_elements(document, "process"):
        process_id = get_attribute(element, "id")
        if process_id is not None:
            workflow_id = process_id

        name = get_attribute(element, "name")
        if name is not None:
            builder.set_workflow_name(name)

    if workflow_id is None:
        workflow_id = Path(file_path).stem
    builder.set_workflow_id(workflow_id)
    return workflow_id


def resolve_roles(document, builder: WorkflowBuilder, file_path: str | Path) -> NodeRoles:
    """
    Register every lane as a role and map flow node ids to their lane.

    A node referenced by several lanes belongs to the lane that comes last
    in document order.

    Returns:
        Mapping of flow node id to role id
    """
    node_roles: NodeRoles = {}
    for element in iter_bpmn_elements(document, "lane"):
        lane_id = require_id(element, file_path)
        builder.add_role(lane_id, get_attribute(element, "name"))

        for child in iter_bpmn_elements(element, "flowNodeRef"):
            node_roles[element_text(child)] = lane_id

    logger.debug(f"Resolved {len(node_roles)} flow node roles")
    return node_roles


def extract_start_events(
    document, builder: WorkflowBuilder, node_roles: NodeRoles, file_path: str | Path
) -> int:
    """Register start events. Returns the number registered."""
    count = 0
    for element in iter_bpmn_elements(document, "startEvent"):
        node_id = require_id(element, file_path)
        builder.add_start_event(
            node_id,
            node_roles.get(node_id),
            get_attribute(element, "name"),
            get_attribute(element, "default"),
        )
        count += 1
    return count


def extract_tasks(
    document, builder: WorkflowBuilder, node_roles: NodeRoles, file_path: str | Path
) -> int:
    """Register tasks. Returns the number registered."""
    count = 0
    for element in iter_bpmn_elements(document, "task"):
        node_id = require_id(element, file_path)
        builder.add_task(
            node_id,
            node_roles.get(node_id),
            get_attribute(element, "name"),
            get_attribute(element, "default"),
        )
        count += 1
    return count


def extract_exclusive_gateways(
    document, builder: WorkflowBuilder, node_roles: NodeRoles, file_path: str | Path
) -> int:
    """Register exclusive gateways. Returns the number registered."""
    count = 0
    for element in iter_bpmn_elements(document, "exclusiveGateway"):
        node_id = require_id(element, file_path)
        builder.add_exclusive_gateway(
            node_id,
            node_roles.get(node_id),
            get_attribute(element, "name"),
            get_attribute(element, "default"),
        )
        count += 1
    return count


def extract_end_events(
    document, builder: WorkflowBuilder, node_roles: NodeRoles, file_path: str | Path
) -> int:
    """Register end events. End events never carry a default flow."""
    count = 0
    for element in iter_bpmn_elements(document, "endEvent"):
        node_id = require_id(element, file_path)
        builder.add_end_event(
            node_id,
            node_roles.get(node_id),
            get_attribute(element, "name"),
        )
        count += 1
    return count


def read_condition(element: etree._Element) -> str | None:
    """Text of the first ``conditionExpression`` below ``element``, if any."""
    # extra conditionExpression children are ignored
    for child in iter_bpmn_elements(element, "conditionExpression"):
        return element_text(child)
    return None


def extract_sequence_flows(
    document, builder: WorkflowBuilder, file_path: str | Path
) -> int:
    """Register sequence flows in document order. Returns the number registered."""
    count = 0
    for element in iter_bpmn_elements(document, "sequenceFlow"):
        flow_id = require_id(element, file_path)
        builder.add_sequence_flow(
            get_attribute(element, "sourceRef"),
            get_attribute(element, "targetRef"),
            flow_id,
            get_attribute(element, "name"),
            read_condition(element),
        )
        count += 1
    return count


__all__ = [
    "NodeRoles",
    "get_attribute",
    "require_id",
    "read_process",
    "resolve_roles",
    "extract_start_events",
    "extract_tasks",
    "extract_exclusive_gateways",
    "extract_end_events",
    "extract_sequence_flows",
]
