from typing import List, Optional, Tuple

from balanced_tree.node_store import Node


def render_tree(node: Optional[Node], prefix: str = "") -> str:
    """
    Render a subtree as an indented outline, left child first.

        └── 20
            ├── 10
            └── 30
    """
    lines: List[str] = []
    stack: List[Tuple[str, Optional[Node], bool]] = [(prefix, node, False)]
    while stack:
        line_prefix, current, is_left = stack.pop()
        if current is None:
            continue
        lines.append(line_prefix + ("├── " if is_left else "└── ") + str(current.key))
        child_prefix = line_prefix + ("│   " if is_left else "    ")
        stack.append((child_prefix, current.right, False))
        stack.append((child_prefix, current.left, True))
    return "\n".join(lines)
