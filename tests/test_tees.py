import re

import pytest
from pydantic import ValidationError

from models import Tee
from ratings import (
    TEE_OPTIONS,
    HoleInputError,
    apply_tee_option,
    create_default_tee,
    estimate_ratings,
    normalize_tee,
    update_hole,
)


# ================================================================
# create_default_tee
# ================================================================

def test_default_tee_template():
    tee = create_default_tee()
    assert tee.name == "White"
    assert tee.color == "#FFFFFF"
    assert tee.gender == "male"
    assert tee.rating == 72.0
    assert tee.slope == 113
    assert tee.par == 72
    assert not tee.use_manual_ratings

    assert [h.number for h in tee.holes] == list(range(1, 19))
    assert all(h.par is None and h.yards is None and h.handicap is None for h in tee.holes)


def test_default_tee_ids_are_unique():
    first = create_default_tee()
    second = create_default_tee()
    assert first.id != second.id
    assert re.fullmatch(r"tee-\d+-[a-z0-9]{9}", first.id)


# ================================================================
# Tee presets
# ================================================================

def test_tee_options():
    names = [o.name for o in TEE_OPTIONS]
    assert names == ["Black", "Blue", "White", "Yellow", "Red", "Green", "Gold", "Silver"]


def test_apply_tee_option():
    tee = create_default_tee()
    red = apply_tee_option(tee, "Red")

    assert (red.name, red.color, red.gender) == ("Red", "#FF0000", "female")
    assert red.id == tee.id
    assert tee.name == "White"          # original untouched


def test_apply_unknown_tee_option_is_noop():
    tee = create_default_tee()
    assert apply_tee_option(tee, "Purple") is tee


# ================================================================
# update_hole
# ================================================================

def test_update_hole_returns_new_tee():
    tee = create_default_tee()
    updated = update_hole(tee, 0, "yards", "420")

    assert updated.holes[0].yards == 420
    assert tee.holes[0].yards is None   # snapshot unchanged
    assert estimate_ratings(updated).yards == 420


def test_update_hole_empty_input_defaults():
    tee = create_default_tee()
    assert update_hole(tee, 4, "par", "").holes[4].par == 4
    assert update_hole(tee, 4, "yards", "").holes[4].yards == 0
    assert update_hole(tee, 4, "handicap", "").holes[4].handicap == 5
    assert update_hole(tee, 4, "handicap", None).holes[4].handicap == 5


def test_update_hole_ignores_non_numeric_input():
    tee = create_default_tee()
    assert update_hole(tee, 0, "par", "abc") is tee


def test_update_hole_accepts_ints():
    tee = update_hole(create_default_tee(), 17, "par", 5)
    assert tee.holes[17].par == 5


def test_update_hole_rejects_unknown_field():
    with pytest.raises(ValueError):
        update_hole(create_default_tee(), 0, "number", "3")


def test_update_hole_validates_range():
    with pytest.raises(HoleInputError, match="Hole 1 par"):
        update_hole(create_default_tee(), 0, "par", "9")


@pytest.mark.parametrize("index", [-1, -18, 18, 30])
def test_update_hole_rejects_out_of_range_index(index):
    tee = create_default_tee()
    with pytest.raises(IndexError):
        update_hole(tee, index, "par", "5")
    assert tee.holes[17].par is None


@pytest.mark.parametrize("raw, expected", [
    ("4.5", 4),
    ("12abc", 12),
    ("  5", 5),
    ("+3", 3),
])
def test_update_hole_reads_leading_integer(raw, expected):
    tee = update_hole(create_default_tee(), 0, "yards", raw)
    assert tee.holes[0].yards == expected


def test_update_hole_fills_missing_entry():
    tee = create_default_tee()
    holes = list(tee.holes)
    holes[2] = None
    tee.holes = holes

    updated = update_hole(tee, 2, "par", "3")
    assert updated.holes[2].number == 3
    assert updated.holes[2].par == 3


def test_update_hole_without_holes():
    with pytest.raises(ValueError):
        update_hole(Tee(name="White"), 0, "par", "4")


# ================================================================
# normalize_tee
# ================================================================

def test_normalize_none():
    assert normalize_tee(None) is None


def test_normalize_empty_data():
    tee = normalize_tee({})
    assert tee.id.startswith("tee-")
    assert tee.name == "Standard"
    assert tee.rating == 72.0
    assert tee.slope == 113
    assert tee.par == 72
    assert len(tee.holes) == 18
    assert all(h.par == 4 and h.yards == 400 for h in tee.holes)
    assert [h.handicap for h in tee.holes] == list(range(1, 19))


def test_normalize_partial_data():
    tee = normalize_tee({
        "id": "tee-1",
        "name": "Blue",
        "rating": "70.5",
        "slope": 0,
        "gender": "junior",
        "holes": [{"number": 1, "par": 5, "yards": 510, "handicap": 3}],
    })
    assert tee.id == "tee-1"
    assert tee.rating == 70.5
    assert tee.slope == 113              # zero slope replaced
    assert tee.gender is None
    assert tee.holes[0].par == 5
    assert tee.holes[0].handicap == 3
    assert tee.holes[1].par == 4
    assert tee.holes[1].number == 2
    assert tee.par == 5 + 17 * 4         # derived from holes


def test_normalize_keeps_explicit_par():
    tee = normalize_tee({"name": "Gold", "par": 70, "holes": [None] * 18})
    assert tee.par == 70


def test_normalize_existing_tee():
    source = create_default_tee()
    tee = normalize_tee(source)
    assert tee.id == source.id
    assert tee.name == "White"
    assert tee.par == 72
    assert all(h.yards == 400 for h in tee.holes)


def test_normalize_out_of_range_hole_fails():
    with pytest.raises(ValidationError):
        normalize_tee({"holes": [{"number": 1, "par": 9}]})
