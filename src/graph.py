"""NetworkX view of the succession tree."""

import networkx as nx

from tree import TreeManager


def build_graph(manager: TreeManager) -> nx.DiGraph:
    """
    Build a NetworkX directed graph from the succession tree.

    Nodes are keyed by their depth-first (pre-order) index, so the monarch is 0.
    Edges run parent -> child and record the child's birth order among siblings.
    """
    G = nx.DiGraph()
    nodes = manager.get_all_nodes_dfs()
    ids = {id(node): i for i, node in enumerate(nodes)}
    positions = {id(heir): pos for pos, heir in enumerate(manager.get_line_of_succession(), 1)}

    # Node keys are integers; the member's name lives in 'person_name'
    for i, node in enumerate(nodes):
        member = node.member
        G.add_node(
            i,
            person_name=member.name,
            title=member.title,
            birth_date=member.date_of_birth.isoformat(),
            is_alive=member.is_alive,
            depth=node.get_depth(),
            succession=positions.get(id(node)),
        )

    for node in nodes:
        for birth_order, child in enumerate(node.children):
            G.add_edge(
                ids[id(node)],
                ids[id(child)],
                relationship_type="PARENT_OF",
                birth_order=birth_order,
            )

    return G


def find_person_id(G: nx.DiGraph, name: str) -> int | None:
    """Return the id of the first node (lowest id) whose name matches, ignoring case."""
    wanted = name.casefold()
    for n, data in sorted(G.nodes(data=True)):
        if data.get("person_name", "").casefold() == wanted:
            return n
    return None


def get_ego_subgraph(G: nx.DiGraph, center_id: int, radius: int = 2) -> nx.DiGraph:
    """
    Extract a subgraph containing nodes within a given degree of a center node.

    Args:
        G: The full graph
        center_id: The person ID to center the subgraph on
        radius: Maximum distance from center (default 2)

    Returns:
        A subgraph containing only nodes within `radius` edges of `center_id`
    """
    if center_id not in G:
        raise ValueError(f"Person ID {center_id} not found in graph")

    # Undirected so both ancestors and descendants fall within the radius
    ego = nx.ego_graph(G.to_undirected(), center_id, radius=radius)
    return G.subgraph(ego.nodes()).copy()
