import pytest
from hypothesis import given
from hypothesis import strategies as st

from classicds.stack_problems import is_balanced, largest_rectangle_area


@pytest.mark.parametrize(
    "expression",
    ["", "()", "[]", "{}", "({[]})", "a(b)c[d]{e}", "(()[]{})"],
)
def test_balanced_expressions(expression):
    assert is_balanced(expression) is True


@pytest.mark.parametrize(
    "expression",
    ["(", ")", "(]", "({)}", "{[}", "((", "())", "]["],
)
def test_unbalanced_expressions(expression):
    assert is_balanced(expression) is False


@given(st.text(alphabet="()[]{}", max_size=10), st.text(alphabet="()[]{}", max_size=10))
def test_concatenation_of_balanced_is_balanced(left, right):
    if is_balanced(left) and is_balanced(right):
        assert is_balanced(left + right)
    else:
        assert not (is_balanced(left) and is_balanced(right))


def test_largest_rectangle_source_example():
    assert largest_rectangle_area([6, 2, 5, 4, 5, 1, 6]) == 12


def test_largest_rectangle_empty():
    assert largest_rectangle_area([]) == 0


def test_largest_rectangle_single_bar():
    assert largest_rectangle_area([7]) == 7


@given(st.integers(min_value=0, max_value=50), st.integers(min_value=1, max_value=30))
def test_uniform_histogram_is_full_rectangle(height, count):
    assert largest_rectangle_area([height] * count) == height * count


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=40))
def test_area_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


@given(st.lists(st.integers(min_value=0, max_value=100), max_size=40))
def test_area_invariant_under_reversal(heights):
    assert largest_rectangle_area(heights) == largest_rectangle_area(heights[::-1])