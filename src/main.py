"""
Royal succession tree command line.

1) Seed the tree with the House of Windsor.
2) Apply requested changes (add or remove members).
3) Answer queries: search by name, line of succession, tree dump.
4) Optionally render a Graphviz chart of the whole tree or of one person's relatives.
"""

import argparse
from datetime import date
from pathlib import Path

from graph import build_graph, find_person_id, get_ego_subgraph
from models import Member
from parsing import parse_date_string
from plotting import plot_tree
from tree import TreeManager, TreeNode


# ============================================================================
# Seed data
# ============================================================================


def build_house_of_windsor() -> TreeManager:
    """The current monarch and his descendants, siblings in birth order."""
    tree = TreeManager(Member("King Charles III", date(1948, 11, 14), True, "King"))

    william = tree.add_member(
        "King Charles III", Member("William", date(1982, 6, 21), True, "Prince of Wales")
    )
    for name, born in [
        ("Prince George", date(2013, 7, 22)),
        ("Princess Charlotte", date(2015, 5, 2)),
        ("Prince Louis", date(2018, 4, 23)),
    ]:
        william.add_child(TreeNode(Member(name, born, True)))

    harry = tree.add_member(
        "King Charles III", Member("Harry", date(1984, 9, 15), True, "Duke of Sussex")
    )
    harry.add_child(TreeNode(Member("Prince Archie", date(2019, 5, 6), True)))
    harry.add_child(TreeNode(Member("Princess Lilibet", date(2021, 6, 4), True)))

    andrew = tree.add_member(
        "King Charles III", Member("Andrew", date(1960, 2, 19), True, "Duke of York")
    )
    beatrice = TreeNode(Member("Princess Beatrice", date(1988, 8, 8), True))
    eugenie = TreeNode(Member("Princess Eugenie", date(1990, 3, 23), True))
    andrew.add_child(beatrice)
    andrew.add_child(eugenie)
    beatrice.add_child(TreeNode(Member("Sienna", date(2021, 9, 18), True)))
    eugenie.add_child(TreeNode(Member("August", date(2021, 2, 9), True)))
    eugenie.add_child(TreeNode(Member("Ernest", date(2023, 5, 30), True)))

    edward = tree.add_member(
        "King Charles III", Member("Edward", date(1964, 3, 10), True, "Duke of Edinburgh")
    )
    edward.add_child(TreeNode(Member("Lady Louise", date(2003, 11, 8), True)))
    edward.add_child(TreeNode(Member("James", date(2007, 12, 17), True, "Earl of Wessex")))

    return tree


# ============================================================================
# Commands
# ============================================================================


def describe_search(tree: TreeManager, name: str, method: str) -> str:
    """Search result text: the member and their place in line, or a not-found message."""
    name = name.strip()
    result = tree.search_bfs(name) if method == "bfs" else tree.search_dfs(name)
    if result is None:
        return f"Member '{name}' not found."

    position = tree.get_succession_position(name)
    position_text = (
        f"Position in line to throne: {position}" if position > 0 else "Not in line of succession"
    )
    return f"Found ({method.upper()}):\n{result.member}\n{position_text}"


def add_member(
    tree: TreeManager,
    parent_name: str,
    child_name: str,
    born: date,
    title: str = "",
    is_alive: bool = True,
) -> str:
    parent_name, child_name = parent_name.strip(), child_name.strip()
    member = Member(child_name, born, is_alive, title.strip())
    if tree.add_member(parent_name, member) is None:
        return f"Parent '{parent_name}' not found in the family tree."
    return f"Successfully added {child_name} as a child of {parent_name}!"


def remove_member(tree: TreeManager, parent_name: str, child_name: str) -> str:
    parent_name, child_name = parent_name.strip(), child_name.strip()
    parent = tree.search_bfs(parent_name)
    if parent is None:
        return f"Parent '{parent_name}' not found in the family tree."

    child = parent.find_child(child_name)
    if child is None or not tree.remove_child(parent, child):
        return f"'{child_name}' is not a child of {parent_name}."
    return f"Removed {child.member.name} and their descendants from under {parent_name}."


def describe_succession(tree: TreeManager) -> str:
    listing = tree.format_line_of_succession()
    if not listing:
        return "No living heirs found in the line of succession."
    return f"Line of Succession to the Throne:\n\n{listing}"


# ============================================================================
# Main
# ============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="royal-tree", description="Royal family tree and line of succession"
    )
    parser.add_argument(
        "--add",
        nargs=3,
        action="append",
        default=[],
        metavar=("PARENT", "CHILD", "BORN"),
        help="add CHILD (born on BORN) as the youngest child of PARENT",
    )
    parser.add_argument(
        "--title",
        default="",
        help="title given to every member added with --add in this run",
    )
    parser.add_argument(
        "--deceased",
        action="store_true",
        help="mark every member added with --add in this run as deceased",
    )
    parser.add_argument(
        "--remove",
        nargs=2,
        action="append",
        default=[],
        metavar=("PARENT", "CHILD"),
        help="detach CHILD (and their descendants) from PARENT",
    )
    parser.add_argument("--search", metavar="NAME", help="look up a member by name")
    parser.add_argument("--method", choices=("bfs", "dfs"), default="bfs")
    parser.add_argument("--succession", action="store_true", help="print the line of succession")
    parser.add_argument("--tree", action="store_true", help="print the tree as text")
    parser.add_argument("--plot", type=Path, metavar="PATH", help="render a chart (png/svg/pdf)")
    parser.add_argument("--focus", metavar="NAME", help="chart only this member's relatives")
    parser.add_argument("--radius", type=int, default=2, help="relationship distance for --focus")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    tree = build_house_of_windsor()
    print(f"Loaded tree with {len(tree.get_all_nodes_bfs())} members")

    for parent_name, child_name, born_text in args.add:
        if not parent_name.strip() or not child_name.strip():
            parser.error("please enter both parent and child names")
        born = parse_date_string(born_text)
        if born is None:
            parser.error(f"could not parse date of birth '{born_text}'")
        print(add_member(tree, parent_name, child_name, born, args.title, not args.deceased))

    for parent_name, child_name in args.remove:
        if not parent_name.strip() or not child_name.strip():
            parser.error("please enter both parent and child names")
        print(remove_member(tree, parent_name, child_name))

    if args.search is not None:
        if not args.search.strip():
            parser.error("please enter a name to search")
        print(describe_search(tree, args.search, args.method))

    if args.succession:
        print(describe_succession(tree))

    if args.tree:
        print(tree.get_tree_display(), end="")

    if args.plot or args.focus:
        G = build_graph(tree)
        if args.focus:
            center_id = find_person_id(G, args.focus.strip())
            if center_id is None:
                print(f"Member '{args.focus}' not found.")
                return 1
            G = get_ego_subgraph(G, center_id, radius=args.radius)
            print(f"  Focus on {args.focus}: {G.number_of_nodes()} members within {args.radius}")
        plot_tree(G, args.plot)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
