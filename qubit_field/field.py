# qubit_field/field.py
"""
A field of independent single-qubit nodes joined by cosmetic links.

Links carry only a strength scalar for display and narration. They never
couple the states of the nodes they join: measuring one node leaves every
other node untouched.
"""
import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from . import config
from .apply_serial import apply_gate
from .bloch import BlochPoint, bloch_coordinates
from .errors import FieldError, InvalidArgument
from .gates import Gate
from .measurement import probability_of_one, measure, resolve_rng
from .state import QubitState, STATE_ZERO

logger = logging.getLogger(__name__)


class NodeType(Enum):
    PERSON = "person"
    PASSION = "passion"
    INTEREST = "interest"
    DREAM = "dream"


@dataclass
class QuantumNode:
    id: str
    label: str
    type: NodeType
    state: QubitState = STATE_ZERO


@dataclass
class EntanglementLink:
    source_id: str
    target_id: str
    strength: float = config.DEFAULT_LINK_STRENGTH

    def joins(self, a: str, b: str) -> bool:
        return {self.source_id, self.target_id} == {a, b}

    def touches(self, node_id: str) -> bool:
        return node_id in (self.source_id, self.target_id)


def strength_tier(strength: float) -> str:
    if strength > 0.8:
        return "absolute"
    if strength > 0.4:
        return "established"
    return "tenuous"


def _check_strength(value: float) -> float:
    value = float(value)
    if not (0.0 <= value <= 1.0):
        raise InvalidArgument(f"link strength must be in [0, 1], got {value}")
    return value


@dataclass
class Field:
    max_nodes: int = config.MAX_NODES
    max_label_length: int = config.MAX_LABEL_LENGTH
    rng: object = None
    nodes: Dict[str, QuantumNode] = field(default_factory=dict)
    links: List[EntanglementLink] = field(default_factory=list)

    def __post_init__(self):
        self.rng = resolve_rng(self.rng)

    # ---- nodes ----

    def add_node(self, label: str, kind: Union[NodeType, str] = NodeType.PERSON) -> QuantumNode:
        label = label.strip()
        if not label:
            raise FieldError("node label cannot be empty")
        if len(label) > self.max_label_length:
            raise FieldError(f"node label too long (max {self.max_label_length} chars)")
        if len(self.nodes) >= self.max_nodes:
            raise FieldError(f"field is full (max {self.max_nodes} nodes)")
        try:
            node_type = NodeType(kind)
        except ValueError:
            raise InvalidArgument(f"Unknown node type {kind!r}") from None

        node = QuantumNode(id=str(uuid.uuid4()), label=label, type=node_type)
        self.nodes[node.id] = node
        logger.info("node %s created (%s, %s)", node.id, label, node_type.value)
        return node

    def node(self, node_id: str) -> QuantumNode:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise FieldError(f"no node with id {node_id!r}") from None

    def remove_node(self, node_id: str) -> None:
        self.node(node_id)
        del self.nodes[node_id]
        self.links = [l for l in self.links if not l.touches(node_id)]

    def apply_gate(self, node_id: str, gate: Union[Gate, str]) -> QubitState:
        node = self.node(node_id)
        node.state = apply_gate(node.state, gate)
        return node.state

    def measure(self, node_id: str) -> int:
        node = self.node(node_id)
        collapsed, outcome = measure(node.state, self.rng)
        node.state = collapsed
        logger.info("node %s (%s) measured -> %d", node_id, node.label, outcome)
        return outcome

    # ---- links ----

    def find_link(self, a: str, b: str) -> Optional[EntanglementLink]:
        return next((l for l in self.links if l.joins(a, b)), None)

    def link(self, a: str, b: str, strength: float = config.DEFAULT_LINK_STRENGTH) -> EntanglementLink:
        self.node(a); self.node(b)
        if a == b:
            raise FieldError("cannot link a node to itself")
        if self.find_link(a, b) is not None:
            raise FieldError(f"nodes {a!r} and {b!r} are already linked")
        lk = EntanglementLink(a, b, _check_strength(strength))
        self.links.append(lk)
        return lk

    def _existing_link(self, a: str, b: str) -> EntanglementLink:
        lk = self.find_link(a, b)
        if lk is None:
            raise FieldError(f"no link between {a!r} and {b!r}")
        return lk

    def set_strength(self, a: str, b: str, value: float) -> EntanglementLink:
        lk = self._existing_link(a, b)
        lk.strength = _check_strength(value)
        return lk

    def unlink(self, a: str, b: str) -> None:
        self.links.remove(self._existing_link(a, b))

    def clear(self) -> None:
        self.nodes.clear()
        self.links.clear()

    # ---- export ----

    def snapshot(self) -> dict:
        """Plain data describing the field, for an external narrator or UI."""
        nodes = []
        for n in self.nodes.values():
            b: BlochPoint = bloch_coordinates(n.state)
            nodes.append({
                "id": n.id,
                "label": n.label,
                "type": n.type.value,
                "probability": probability_of_one(n.state),
                "bloch": tuple(b),
            })
        links = []
        for l in self.links:
            links.append({
                "source": self.nodes[l.source_id].label,
                "target": self.nodes[l.target_id].label,
                "strength": l.strength,
                "tier": strength_tier(l.strength),
            })
        return {"nodes": nodes, "links": links}
