import json

import pytest

from marbles.components.board_catalog import BoardCatalog, BoardSpec, BoardSpecError
from marbles.components.tile_kind import TileKind
from marbles.factories.boards import (
    DEFAULT_BOARD_SPECS,
    create_default_catalog,
    load_board_specs,
    load_catalog,
    parse_board_specs,
)
from tests.helpers import spec


def test_catalog_is_consumed_front_to_back():
    catalog = BoardCatalog([spec(2, 2, [(0, 0, "star")]), spec(2, 2, [(1, 1, "star")])])
    assert catalog.remaining == 2
    first = catalog.load_next()
    assert first.kind_at(0, 0) is TileKind.STAR
    assert not catalog.is_exhausted()
    second = catalog.load_next()
    assert second.kind_at(1, 1) is TileKind.STAR
    assert catalog.is_exhausted()
    assert catalog.remaining == 0


def test_exhausted_catalog_refuses_to_load():
    catalog = BoardCatalog([spec(1, 1)])
    catalog.load_next()
    with pytest.raises(IndexError):
        catalog.load_next()


def test_empty_catalog_rejected():
    with pytest.raises(BoardSpecError):
        BoardCatalog([])


def test_mismatched_dimensions_rejected():
    with pytest.raises(BoardSpecError):
        BoardCatalog([spec(3, 3), spec(3, 4)])


@pytest.mark.parametrize("override", [(3, 0, "star"), (0, 3, "star"), (-1, 0, "hole")])
def test_out_of_range_override_rejected_at_construction(override):
    with pytest.raises(BoardSpecError):
        BoardCatalog([spec(3, 3, [override])])


def test_unknown_kind_token_rejected():
    with pytest.raises(BoardSpecError):
        BoardSpec.from_tokens(3, 3, "plain", [(0, 0, "lava")])


def test_non_positive_dimensions_rejected():
    with pytest.raises(BoardSpecError):
        BoardCatalog([BoardSpec(rows=0, cols=3)])


def test_later_override_wins():
    board = spec(2, 2, [(0, 0, "hole"), (0, 0, "bumper")]).build()
    assert board.kind_at(0, 0) is TileKind.BUMPER


def test_default_catalog_is_valid():
    catalog = create_default_catalog()
    assert catalog.remaining == len(DEFAULT_BOARD_SPECS)
    while not catalog.is_exhausted():
        board = catalog.load_next()
        assert board.kind_at(0, 0) is TileKind.PLAIN
        stars = [cell for cell in board.cells() if cell[2] is TileKind.STAR]
        assert len(stars) == 1


def test_parse_board_specs_from_mappings():
    specs = parse_board_specs([
        {"rows": 2, "cols": 3, "default": "plain", "overrides": [[1, 2, "star"]]},
        {"rows": 2, "cols": 3, "overrides": [[0, 0, "hole"]]},
    ])
    assert specs[0].overrides == ((1, 2, TileKind.STAR),)
    assert specs[1].default is TileKind.PLAIN


@pytest.mark.parametrize("entry", [
    {"cols": 3},
    {"rows": 2, "cols": 3, "overrides": [[5, 0, "star"]]},
    {"rows": 2, "cols": 3, "default": "water"},
    ["rows", 2],
])
def test_parse_board_specs_rejects_malformed_entries(entry):
    with pytest.raises(BoardSpecError):
        parse_board_specs([entry])


def test_load_catalog_from_json(tmp_path):
    path = tmp_path / "levels.json"
    path.write_text(json.dumps({"boards": [
        {"rows": 3, "cols": 3, "overrides": [[1, 2, "star"]]},
        {"rows": 3, "cols": 3, "overrides": [[2, 2, "star"], [1, 1, "bumper"]]},
    ]}), encoding="utf-8")
    catalog = load_catalog(path)
    assert catalog.remaining == 2
    assert catalog.load_next().kind_at(1, 2) is TileKind.STAR


def test_load_board_specs_accepts_plain_list(tmp_path):
    path = tmp_path / "levels.json"
    path.write_text(json.dumps([{"rows": 1, "cols": 2}]), encoding="utf-8")
    assert len(load_board_specs(path)) == 1


def test_load_board_specs_rejects_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(BoardSpecError):
        load_board_specs(path)


def test_load_board_specs_rejects_non_list(tmp_path):
    path = tmp_path / "levels.json"
    path.write_text(json.dumps({"levels": []}), encoding="utf-8")
    with pytest.raises(BoardSpecError):
        load_board_specs(path)
