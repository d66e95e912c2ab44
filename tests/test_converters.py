from database.converters import (
    course_to_payload,
    course_to_row,
    hole_to_row,
    tee_from_rows,
    tee_holes_to_rows,
    tee_to_row,
)
from models import Course, Hole, Tee
from ratings import create_default_tee, estimate_ratings


def _tee() -> Tee:
    holes = [Hole(number=i, par=4, yards=400, handicap=i) for i in range(1, 19)]
    return Tee(id="tee-1", name="Blue", color="#0000FF", gender="male", holes=holes)


# ================================================================
# Model -> Row
# ================================================================

def test_tee_to_row_carries_estimate():
    row = tee_to_row(_tee())
    assert row == {
        "id": "tee-1",
        "name": "Blue",
        "color": "#0000FF",
        "gender": "male",
        "rating": 57.6,
        "slope": 173,
        "par": 72,
        "yards": 7200,
    }


def test_tee_to_row_uses_given_estimate():
    tee = _tee()
    estimate = estimate_ratings(create_default_tee())
    assert tee_to_row(tee, estimate)["slope"] == -187


def test_hole_rows_keyed_by_tee():
    rows = tee_holes_to_rows(_tee())
    assert len(rows) == 18
    assert rows[0] == {"tee_id": "tee-1", "hole_number": 1, "par": 4, "yards": 400, "handicap": 1}
    assert hole_to_row(Hole(number=7), "t")["par"] is None


def test_course_payload():
    course = Course(name="Pine Hills", city="Austin", state="TX", tees=[_tee(), create_default_tee()])
    payload = course_to_payload(course)

    assert payload["course"] == course_to_row(course)
    assert payload["course"]["name"] == "Pine Hills [User added course]"
    assert len(payload["tees"]) == 2
    assert len(payload["holes"]) == 36


# ================================================================
# Row -> Model
# ================================================================

def test_tee_round_trip():
    tee = _tee()
    rows = list(reversed(tee_holes_to_rows(tee)))     # storage order is not guaranteed

    rebuilt = tee_from_rows(tee_to_row(tee), rows)

    assert [h.number for h in rebuilt.holes] == list(range(1, 19))
    assert rebuilt.holes == tee.holes
    assert rebuilt.rating == 57.6
    assert rebuilt.slope == 173
    assert estimate_ratings(rebuilt) == estimate_ratings(tee)
