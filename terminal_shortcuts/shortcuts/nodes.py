"""
Panel entries.

Every entry is a `TreeNode`; its `kind` says which payload it carries.
Groups hold their actions, leaves and config buttons hold the activation
dispatched when the user selects them, separators hold nothing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..core.models import DEFAULT_GROUP, ActionRecord

RUN_ACTION = "terminal.run"
OPEN_GLOBAL_ACTION = "config.open_global"
OPEN_WORKSPACE_ACTION = "config.open_workspace"


class NodeKind(str, Enum):
    GROUP = "group"
    LEAF = "leaf"
    CONFIG_BUTTON = "config_button"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class Activation:
    """Registered action name plus the positional arguments to call it with."""

    action: str
    args: Tuple[Optional[str], ...] = ()


@dataclass
class TreeNode:
    kind: NodeKind
    label: str
    tooltip: str = ""
    icon: Optional[str] = None
    activation: Optional[Activation] = None
    records: List[ActionRecord] = field(default_factory=list)

    @property
    def expandable(self) -> bool:
        return self.kind is NodeKind.GROUP


def group_node(name: Optional[str], records: List[ActionRecord]) -> TreeNode:
    label = name or DEFAULT_GROUP
    return TreeNode(NodeKind.GROUP, label, tooltip=f"Group: {label}", records=list(records))


def leaf_node(record: ActionRecord) -> TreeNode:
    return TreeNode(
        NodeKind.LEAF,
        record.display_label,
        tooltip=record.command,
        icon="terminal",
        activation=Activation(RUN_ACTION, (record.command, record.terminal)),
    )


def config_button(label: str, tooltip: str, action: str) -> TreeNode:
    return TreeNode(NodeKind.CONFIG_BUTTON, label, tooltip=tooltip, icon="gear", activation=Activation(action))


def separator() -> TreeNode:
    return TreeNode(NodeKind.SEPARATOR, "")
