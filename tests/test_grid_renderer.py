from dungeon_geometry import Direction
from dungeon_models import RoomType
from grid_renderer import print_layout, render_layout


def test_render_places_rooms_on_odd_cells(make_context, place_start, attach):
    context = make_context(width=3, height=3)
    start = place_start(context)
    attach(context, start, Direction.EAST)
    below = attach(context, start, Direction.SOUTH, RoomType.BOSS)
    context.grid.tile(0, 2).type = RoomType.SECRET
    context.grid.connect_secret(below, Direction.WEST)

    rows = render_layout(context.layout)

    assert len(rows) == 7
    assert rows[3] == "   S-o"
    assert rows[4] == "   |"
    assert rows[5] == " ?:B"


def test_secret_chance_overlay(make_context):
    context = make_context(width=3, height=3)
    context.grid.tile(0, 0).secret_chance = 2

    assert render_layout(context.layout)[1] == ""
    assert render_layout(context.layout, show_secret_chance=True)[1] == " 2"


def test_print_layout_writes_rows(make_context, place_start, capsys):
    context = make_context(width=3, height=3)
    place_start(context)

    print_layout(context.layout)

    assert "S" in capsys.readouterr().out
