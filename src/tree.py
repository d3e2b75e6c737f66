"""Succession tree: nodes, traversal and line-of-succession queries."""

from collections import deque
from typing import Iterator
import weakref

from models import Member


class TreeNode:
    """
    A member plus their children in birth order.

    The parent link is a weak reference: a node reports `parent is None` once its
    parent has been detached and is no longer referenced anywhere else.
    """

    def __init__(self, member: Member):
        self.member = member
        self.children: list["TreeNode"] = []
        self._parent: weakref.ref | None = None

    @property
    def parent(self) -> "TreeNode | None":
        return self._parent() if self._parent is not None else None

    def add_child(self, child: "TreeNode"):
        """Append a child; insertion order is birth order."""
        self.children.append(child)
        child._parent = weakref.ref(self)

    def remove_child(self, child: "TreeNode") -> bool:
        """Detach a direct child. Returns False if `child` is not one."""
        for i, existing in enumerate(self.children):
            if existing is child:
                del self.children[i]
                child._parent = None
                return True
        return False

    def find_child(self, name: str) -> "TreeNode | None":
        """First direct child with this name (case-insensitive)."""
        return next((c for c in self.children if _matches(c, name)), None)

    def get_depth(self) -> int:
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    def __repr__(self) -> str:
        return f"TreeNode({self.member.name!r})"

    def __str__(self) -> str:
        return str(self.member)


def _matches(node: TreeNode, name: str) -> bool:
    return node.member.name.casefold() == name.casefold()


class TreeManager:
    """
    Owns the tree rooted at the monarch and answers queries over it.

    A manager built with `monarch=None` models the empty tree: every query returns
    an empty result instead of failing.
    """

    def __init__(self, monarch: Member | None):
        self._root = TreeNode(monarch) if monarch is not None else None

    @property
    def root(self) -> TreeNode | None:
        return self._root

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_child(self, parent: TreeNode, child: TreeNode):
        parent.add_child(child)

    def remove_child(self, parent: TreeNode, child: TreeNode) -> bool:
        return parent.remove_child(child)

    def add_member(self, parent_name: str, member: Member) -> TreeNode | None:
        """
        Attach `member` as the youngest child of the person named `parent_name`.

        Returns the new node, or None when no such parent exists.
        """
        parent = self.search_bfs(parent_name)
        if parent is None:
            return None

        node = TreeNode(member)
        parent.add_child(node)
        return node

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _iter_bfs(self) -> Iterator[TreeNode]:
        if self._root is None:
            return

        queue = deque([self._root])
        while queue:
            current = queue.popleft()
            yield current
            queue.extend(current.children)

    def _iter_dfs(self, node: TreeNode | None = None) -> Iterator[TreeNode]:
        # Pre-order: a parent precedes all of their descendants
        node = node or self._root
        if node is None:
            return

        yield node
        for child in node.children:
            yield from self._iter_dfs(child)

    def search_bfs(self, name: str) -> TreeNode | None:
        """Find a member by name (case-insensitive), level by level."""
        return next((n for n in self._iter_bfs() if _matches(n, name)), None)

    def search_dfs(self, name: str) -> TreeNode | None:
        """Find a member by name (case-insensitive), branch by branch."""
        return next((n for n in self._iter_dfs() if _matches(n, name)), None)

    def get_all_nodes_bfs(self) -> list[TreeNode]:
        return list(self._iter_bfs())

    def get_all_nodes_dfs(self) -> list[TreeNode]:
        return list(self._iter_dfs())

    def get_nodes_by_level(self) -> dict[int, list[TreeNode]]:
        """Group nodes by generation, each level in pre-order."""
        levels: dict[int, list[TreeNode]] = {}
        for node in self._iter_dfs():
            levels.setdefault(node.get_depth(), []).append(node)
        return levels

    # ------------------------------------------------------------------
    # Succession
    # ------------------------------------------------------------------

    def get_line_of_succession(self) -> list[TreeNode]:
        """
        Living descendants of the monarch in primogeniture order.

        A deceased member is skipped but their living descendants keep their place.
        """
        return [
            node
            for node in self._iter_dfs()
            if node is not self._root and node.member.is_alive
        ]

    def get_succession_position(self, name: str) -> int:
        """1-based place in the line of succession, or -1 if not in line."""
        node = self.search_bfs(name)
        if node is None or not node.member.is_alive:
            return -1

        for position, heir in enumerate(self.get_line_of_succession(), start=1):
            if heir is node:
                return position
        return -1

    def format_line_of_succession(self) -> str:
        lines = []
        for position, heir in enumerate(self.get_line_of_succession(), start=1):
            member = heir.member
            title = f" ({member.title})" if member.title else ""
            lines.append(f"{position}. {member.name}{title} - Born {member.date_of_birth.year}")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Text dump
    # ------------------------------------------------------------------

    def get_tree_display(self) -> str:
        """Indented text dump of the whole tree, one member per line."""
        lines: list[str] = []
        if self._root is not None:
            self._build_display(self._root, "", True, lines)
        return "".join(f"{line}\n" for line in lines)

    def _build_display(self, node: TreeNode, indent: str, is_last: bool, lines: list[str]):
        connector, extension = ("└─ ", "   ") if is_last else ("├─ ", "│  ")
        status = "✓" if node.member.is_alive else "✗"
        lines.append(
            f"{indent}{connector}{status} {node.member.name} ({node.member.date_of_birth.year})"
        )

        for i, child in enumerate(node.children):
            self._build_display(child, indent + extension, i == len(node.children) - 1, lines)
