from datetime import date

import pytest

from models import Member
from tree import TreeManager, TreeNode


def person(name, alive=True, born=date(2000, 1, 1), title=""):
    return TreeNode(Member(name, born, alive, title))


@pytest.fixture
def scenario():
    """King -> A (A1, A2 dead), B dead (B1)."""
    tree = TreeManager(Member("King", date(1940, 1, 1), True, "King"))
    a, b = person("A"), person("B", alive=False)
    a1, a2, b1 = person("A1"), person("A2", alive=False), person("B1")
    tree.root.add_child(a)
    tree.root.add_child(b)
    a.add_child(a1)
    a.add_child(a2)
    b.add_child(b1)
    return tree


@pytest.fixture
def make_node():
    return person
