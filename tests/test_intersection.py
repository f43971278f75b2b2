from itertools import product

import pytest

from monodraw.intersection import clip_intersection, is_intersection_decision_tree


def _overlaps(first, second):
    return bool(set(first) & set(second))


def test_disjoint_ranges_do_not_intersect():
    assert is_intersection_decision_tree(4, 6, 7, 9) is False


def test_touching_ranges_do_not_intersect():
    assert is_intersection_decision_tree(4, 6, 6, 9) is False
    assert is_intersection_decision_tree(6, 9, 4, 6) is False


def test_overlapping_ranges_intersect():
    assert is_intersection_decision_tree(0, 10, 5, 15) is True


def test_matches_half_open_overlap_for_ordered_ranges():
    for a0, a1, v0, v1 in product(range(0, 6), repeat=4):
        if a0 >= a1 or v0 >= v1:
            continue
        expected = _overlaps(range(a0, a1), range(v0, v1))
        assert is_intersection_decision_tree(a0, a1, v0, v1) is expected


def test_wrapped_range_behaves_like_union_of_two_ends():
    for a0, a1, v0, v1 in product(range(0, 6), repeat=4):
        if a0 >= a1 or v0 <= v1:
            continue
        wrapped = set(range(v0, 100)) | set(range(-100, v1))
        expected = _overlaps(range(a0, a1), wrapped)
        assert is_intersection_decision_tree(a0, a1, v0, v1) is expected


def test_clip_inside_window_unchanged():
    assert clip_intersection(2, 5, 0, 10) == (2, 5)


@pytest.mark.parametrize("c,d", [(0, 10), (3, 7), (-4, 4)])
def test_clip_matches_set_intersection(c, d):
    for a in range(-8, 14):
        for length in range(1, 9):
            wanted = set(range(a, a + length)) & set(range(c, d))
            result = clip_intersection(a, length, c, d)
            if not wanted:
                assert result is None
            else:
                start, size = result
                assert set(range(start, start + size)) == wanted


def test_clip_negative_length_stays_within_window():
    start, size = clip_intersection(5, -2, 0, 10)
    assert start >= 0
    assert start + size <= 10


def test_clip_negative_length_beyond_window_covers_window():
    assert clip_intersection(12, -1, 0, 10) == (0, 10)