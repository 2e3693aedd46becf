"""Tests for utility functions."""

from datekit import element_at


class TestElementAt:
    """Test bounds-checked indexing."""

    def test_in_bounds(self):
        assert element_at([1, 2, 3], 1) == 2
        assert element_at("abc", 0) == "a"

    def test_out_of_bounds(self):
        assert element_at([1, 2, 3], 5) is None
        assert element_at([1, 2, 3], 3) is None
        assert element_at([], 0) is None

    def test_negative_index(self):
        """Negative indexes do not wrap."""
        assert element_at([1, 2, 3], -1) is None
