import pytest

from aocsolve.y2015_d02 import paper, parse_boxes, ribbon, solve


def test_parse_boxes_sorts_and_skips_blank_lines():
    assert parse_boxes("2x3x4\n\n4x3x2\n") == [(2, 3, 4), (2, 3, 4)]


def test_paper_example():
    assert paper("2x3x4") == 58


def test_paper_second_example():
    assert paper("1x1x10") == 43


def test_ribbon_example():
    assert ribbon("2x3x4") == 34


def test_totals_are_additive():
    both = "2x3x4\n1x1x10"
    assert paper(both) == paper("2x3x4") + paper("1x1x10")
    assert ribbon(both) == ribbon("2x3x4") + ribbon("1x1x10")


def test_dimension_order_does_not_matter():
    assert ribbon("4x2x3") == ribbon("2x3x4")
    assert paper("3x4x2") == paper("2x3x4")


def test_solve_combines_parts():
    text = "2x3x4\n1x1x10\n"
    assert solve(text) == (paper(text), ribbon(text))


def test_too_few_dimensions_is_an_error():
    with pytest.raises(ValueError):
        parse_boxes("2x3")


def test_non_numeric_dimension_is_an_error():
    with pytest.raises(ValueError):
        parse_boxes("2xax3")