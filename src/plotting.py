"""Visualization functions for the succession tree graph."""

from pathlib import Path

import graphviz
import networkx as nx


LIVING_COLOR = "#C8E6C9"
DECEASED_COLOR = "#DCDCDC"
BORDER_COLOR = "#424242"
EDGE_COLOR = "#646464"


def node_label(data: dict) -> str:
    """Name, optional title, birth year and living status, as Graphviz label lines."""
    lines = [data.get("person_name", "")]
    if data.get("title"):
        lines.append(data["title"])
    birth_date = data.get("birth_date", "")
    lines.append(f"Born: {birth_date[:4]}")
    lines.append("✓ Living" if data.get("is_alive") else "✗ Deceased")
    return "\\n".join(lines)


def build_dot(G: nx.DiGraph) -> graphviz.Digraph:
    """
    Build a Graphviz chart of the tree.

    - Monarch at the top, one rank per generation
    - Living members filled green, deceased grey
    - Siblings kept left to right in birth order
    """
    dot = graphviz.Digraph("succession")
    dot.attr(rankdir="TB", nodesep="0.3", ranksep="0.8", ordering="out")
    dot.attr(
        "node",
        shape="box",
        style="rounded,filled",
        color=BORDER_COLOR,
        fontsize="10",
        width="2.1",
        height="1.1",
    )
    dot.attr("edge", color=EDGE_COLOR, penwidth="2", arrowhead="none")

    for node, data in G.nodes(data=True):
        dot.node(
            str(node),
            label=node_label(data),
            fillcolor=LIVING_COLOR if data.get("is_alive") else DECEASED_COLOR,
        )

    # Children in birth order so "ordering=out" keeps them left to right
    edges = sorted(G.edges(data=True), key=lambda e: (e[0], e[2].get("birth_order", 0)))
    for u, v, _ in edges:
        dot.edge(str(u), str(v))

    # Align each generation on its own rank
    generations: dict[int, list] = {}
    for node, data in G.nodes(data=True):
        generations.setdefault(data.get("depth", 0), []).append(node)
    for depth, nodes in sorted(generations.items()):
        with dot.subgraph(name=f"generation_{depth}") as sg:
            sg.attr(rank="same")
            for node in nodes:
                sg.node(str(node))

    return dot


def plot_tree(G: nx.DiGraph, output_path: Path | None = None):
    """
    Render the tree chart with Graphviz.

    Args:
        G: Graph produced by `graph.build_graph`
        output_path: Path to save the output image (png, svg or pdf). If None,
            displays interactively.
    """
    dot = build_dot(G)

    if output_path:
        ext = output_path.suffix.lower().lstrip(".")
        if ext not in ("png", "svg", "pdf"):
            ext = "png"

        outfile = output_path.with_suffix(f".{ext}")
        rendered = dot.render(outfile=str(outfile), format=ext, cleanup=True)
        print(f"Chart saved to {rendered}")
    else:
        import io

        import matplotlib.image as mpimg
        import matplotlib.pyplot as plt

        img = mpimg.imread(io.BytesIO(dot.pipe(format="png")), format="png")
        plt.figure(figsize=(16, 10))
        plt.imshow(img)
        plt.axis("off")
        plt.tight_layout()
        plt.show()
