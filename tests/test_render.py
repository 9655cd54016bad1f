# tests/test_render.py
from gridpath.app.render import draw_board, legend
from gridpath.core.astar import find_path
from gridpath.core.maps import grid_from_rows


def test_board_layout():
    grid = grid_from_rows(["S#",
                           ".G"])
    lines = draw_board(grid).splitlines()
    assert lines == [
        "*-----*-----*",
        "|OOOOO|XXXXX|",
        "|OOOOO|XXXXX|",
        "*-----*-----*",
        "|     |*****|",
        "|     |*****|",
        "*-----*-----*",
    ]


def test_path_overlay_keeps_start_and_goal_glyphs():
    grid = grid_from_rows(["S..G"])
    res = find_path(grid)
    lines = draw_board(grid, res.path).splitlines()
    assert lines[1] == "|OOOOO|+++++|+++++|*****|"
    assert lines[1] == lines[2]


def test_legend_lists_five_glyphs():
    text = legend()
    for label in ("Start point", "End point", "Blocks", "Empty path", "Result path"):
        assert label in text
    for fill in ("|OOOOO|", "|*****|", "|XXXXX|", "|     |", "|+++++|"):
        assert fill in text
