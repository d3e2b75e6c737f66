"""Tests for the command line and the seeded House of Windsor."""

from datetime import date

import pytest

import main
from main import (
    add_member,
    build_house_of_windsor,
    describe_search,
    describe_succession,
    remove_member,
)
from tree import TreeManager


@pytest.fixture
def windsor():
    return build_house_of_windsor()


class TestHouseOfWindsor:
    def test_line_of_succession(self, windsor):
        heirs = [n.member.name for n in windsor.get_line_of_succession()]
        assert heirs[:6] == [
            "William", "Prince George", "Princess Charlotte", "Prince Louis",
            "Harry", "Prince Archie",
        ]
        assert heirs[-3:] == ["Edward", "Lady Louise", "James"]
        assert len(heirs) == 16

    def test_positions(self, windsor):
        assert windsor.get_succession_position("Prince George") == 2
        assert windsor.get_succession_position("Andrew") == 8
        assert windsor.get_succession_position("Ernest") == 13
        assert windsor.get_succession_position("King Charles III") == -1


class TestCommands:
    def test_search_found(self, windsor):
        text = describe_search(windsor, "harry", "dfs")
        assert text.splitlines() == [
            "Found (DFS):",
            "Harry (Duke of Sussex), Born: 1984-09-15, Alive",
            "Position in line to throne: 5",
        ]

    def test_search_monarch_not_in_line(self, windsor):
        assert describe_search(windsor, "King Charles III", "bfs").endswith(
            "Not in line of succession"
        )

    def test_search_not_found(self, windsor):
        assert describe_search(windsor, "Diana", "bfs") == "Member 'Diana' not found."

    def test_add_member(self, windsor):
        message = add_member(windsor, "Lady Louise", "Baby", date(2030, 1, 1))
        assert message == "Successfully added Baby as a child of Lady Louise!"
        assert windsor.get_succession_position("Baby") == 16

    def test_add_member_unknown_parent(self, windsor):
        message = add_member(windsor, "Diana", "Baby", date(2030, 1, 1))
        assert message == "Parent 'Diana' not found in the family tree."

    def test_remove_member(self, windsor):
        assert remove_member(windsor, "King Charles III", "harry").startswith("Removed Harry")
        assert windsor.search_bfs("Prince Archie") is None
        assert windsor.get_succession_position("Andrew") == 5

    def test_remove_member_not_a_child(self, windsor):
        message = remove_member(windsor, "William", "Harry")
        assert message == "'Harry' is not a child of William."

    def test_search_ignores_surrounding_spaces(self, windsor):
        text = describe_search(windsor, " Harry ", "bfs")
        assert text.startswith("Found (BFS):\nHarry (Duke of Sussex)")
        assert text.endswith("Position in line to throne: 5")

    def test_add_member_strips_names(self, windsor):
        message = add_member(windsor, " William ", "  Baby ", date(2030, 1, 1), " Lord ")
        assert message == "Successfully added Baby as a child of William!"
        baby = windsor.search_bfs("Baby")
        assert baby.parent is windsor.search_bfs("William")
        assert baby.member.title == "Lord"

    def test_remove_member_strips_names(self, windsor):
        assert remove_member(windsor, "Edward ", " james").startswith("Removed James")
        assert windsor.search_bfs("James") is None

    def test_succession_empty(self):
        tree = TreeManager(None)
        assert describe_succession(tree) == "No living heirs found in the line of succession."


class TestMain:
    def test_search_and_succession(self, capsys):
        assert main.main(["--search", "Sienna", "--succession"]) == 0
        out = capsys.readouterr().out
        assert "Found (BFS):" in out
        assert "Position in line to throne: 10" in out
        assert "1. William (Prince of Wales) - Born 1982" in out

    def test_add_then_tree(self, capsys):
        args = ["--add", "Prince George", "Heir", "1 JAN 2040", "--deceased", "--tree"]
        assert main.main(args) == 0
        out = capsys.readouterr().out
        assert "Successfully added Heir as a child of Prince George!" in out
        assert "✗ Heir (2040)" in out

    def test_bad_date(self):
        with pytest.raises(SystemExit) as excinfo:
            main.main(["--add", "William", "X", "someday"])
        assert excinfo.value.code == 2

    def test_focus_unknown(self, capsys):
        assert main.main(["--focus", "Diana"]) == 1
        assert "Member 'Diana' not found." in capsys.readouterr().out

    def test_focus_plot(self, tmp_path, monkeypatch, capsys):
        plotted = []
        monkeypatch.setattr(main, "plot_tree", lambda G, path: plotted.append((G, path)))
        args = ["--focus", "Harry", "--radius", "1", "--plot", str(tmp_path / "h.png")]
        assert main.main(args) == 0

        G, path = plotted[0]
        assert sorted(G.nodes[n]["person_name"] for n in G.nodes) == [
            "Harry", "King Charles III", "Prince Archie", "Princess Lilibet"
        ]
        assert path == tmp_path / "h.png"

    @pytest.mark.parametrize(
        "args",
        [
            ["--search", "   "],
            ["--add", "William", "  ", "2030-01-01"],
            ["--add", " ", "Baby", "2030-01-01"],
            ["--remove", "William", " "],
        ],
    )
    def test_blank_names_rejected(self, args, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main.main(args + ["--tree"])
        assert excinfo.value.code == 2
        out, err = capsys.readouterr()
        assert "please enter" in err
        assert "Successfully added" not in out

    def test_search_with_spaces(self, capsys):
        assert main.main(["--search", "  Harry  "]) == 0
        out = capsys.readouterr().out
        assert "Member '" not in out
        assert "Position in line to throne: 5" in out
