from __future__ import annotations

import pytest

from average_calculator.calculator import AverageCalculator
from average_calculator.categories import NUMBER_TYPES, get_option


def test_submit_sequence():
    c = AverageCalculator()
    for s in ["1", "2", "3"]:
        c.input_text = s
        c.submit()
    assert c.input_text == ""
    assert c.error == ""
    r = c.rendered()
    assert r["current"] == "1, 2, 3"
    assert r["previous"] == "1, 2"
    assert r["average"] == "2.00"


def test_invalid_on_empty_window():
    c = AverageCalculator()
    assert c.submit("abc") is None
    assert c.error == "Please enter a valid number"
    assert not c.has_results
    assert c.rendered() is None
    assert c.averager.window == ()


def test_invalid_keeps_state_and_next_success_clears_error():
    c = AverageCalculator()
    c.submit("4")
    c.submit("8")
    before = c.snapshot
    c.input_text = "oops"
    c.submit()
    assert c.error
    assert c.snapshot is before
    assert c.input_text == "oops"
    assert c.averager.window == (4.0, 8.0)
    c.submit("0")
    assert c.error == ""
    assert c.snapshot.previous_window == (4.0, 8.0)
    assert c.rendered()["average"] == "4.00"


def test_window_scenario_with_eviction():
    c = AverageCalculator()
    for i in range(1, 12):
        c.submit(str(i))
    r = c.rendered()
    assert r["previous"] == "1, 2, 3, 4, 5, 6, 7, 8, 9, 10"
    assert r["current"] == "2, 3, 4, 5, 6, 7, 8, 9, 10, 11"
    assert r["added"] == "11"
    assert r["average"] == "6.50"


def test_category_does_not_change_computation():
    results = []
    for opt in NUMBER_TYPES:
        c = AverageCalculator()
        c.select(opt.id)
        for s in ["1.5", "-2", "7"]:
            c.submit(s)
        assert c.selected_option == opt
        results.append(c.rendered())
    assert all(r == results[0] for r in results)


def test_select_unknown_type():
    c = AverageCalculator()
    with pytest.raises(KeyError):
        c.select("x")
    assert c.selected == "p"


def test_number_types():
    assert [o.id for o in NUMBER_TYPES] == ["p", "f", "e", "r"]
    assert [o.label for o in NUMBER_TYPES] == ["Prime", "Fibonacci", "Even", "Random"]
    assert get_option("e").description == "Calculate average of even numbers"
