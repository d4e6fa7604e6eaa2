import random
import time

import numpy as np
import pytest

from pagediff.core import (
    DiffRanges,
    OffsetRange,
    compute_token_matches,
    diff_texts,
    simple_diff_ranges,
    tokenize,
)
from pagediff.core.diff import DEFAULT_CELL_BUDGET, _lcs_table


@pytest.mark.parametrize("text", ["", "a", "the cat sat", "  spaced   out  ", "\n"])
def test_identical_texts_have_no_ranges(text):
    assert diff_texts(text, text) == DiffRanges(base=[], target=[])


def test_empty_base_marks_whole_target():
    assert diff_texts("", "hello world") == DiffRanges(base=[], target=[OffsetRange(0, 11)])
    assert diff_texts("hello world", "") == DiffRanges(base=[OffsetRange(0, 11)], target=[])


def test_single_token_change():
    ranges = diff_texts("the cat sat", "the dog sat")
    assert ranges.base == [OffsetRange(4, 7)]
    assert ranges.target == [OffsetRange(4, 7)]


def test_change_isolated_between_prefix_and_suffix():
    ranges = diff_texts("A B C D", "A X C D")
    assert ranges.base == [OffsetRange(2, 3)]
    assert ranges.target == [OffsetRange(2, 3)]


def test_insertion_only_marks_target():
    ranges = diff_texts("a b c", "a x b c")
    assert ranges.base == []
    assert ranges.target == [OffsetRange(2, 3)]


def test_adjacent_unmatched_tokens_merge_across_whitespace():
    ranges = diff_texts("a b  c d", "a x y d")
    assert ranges.base == [OffsetRange(2, 6)]
    assert ranges.target == [OffsetRange(2, 5)]


def test_matches_inside_middle_split_ranges():
    base = "start one keep two end"
    target = "start uno keep dos end"
    ranges = diff_texts(base, target)
    assert [base[r.start : r.end] for r in ranges.base] == ["one", "two"]
    assert [target[r.start : r.end] for r in ranges.target] == ["uno", "dos"]


def test_swapped_tokens_prefer_consuming_base():
    # Both "A" and "B" are a valid LCS here; ties step towards the base side.
    ranges = diff_texts("A B", "B A")
    assert ranges.base == [OffsetRange(2, 3)]
    assert ranges.target == [OffsetRange(0, 1)]


def test_token_matches_flags():
    base = tokenize("x a b y")
    target = tokenize("x b a y")
    matches = compute_token_matches(base, target)
    assert matches is not None
    assert matches.base == [True, True, False, True]
    assert matches.target == [True, False, True, True]


def test_blank_base_uses_character_diff():
    base = "   "
    target = "hello"
    assert diff_texts(base, target) == simple_diff_ranges(base, target)
    assert diff_texts(base, target) == DiffRanges(
        base=[OffsetRange(0, 3)], target=[OffsetRange(0, 5)]
    )


def test_simple_diff_ranges_prefix_and_suffix():
    ranges = simple_diff_ranges("abcXYZdef", "abcQdef")
    assert ranges.base == [OffsetRange(3, 6)]
    assert ranges.target == [OffsetRange(3, 4)]


def test_simple_diff_suffix_does_not_overlap_prefix():
    ranges = simple_diff_ranges("aa", "aaa")
    assert ranges.base == []
    assert ranges.target == [OffsetRange(2, 3)]


def test_budget_exceeded_falls_back_to_character_diff():
    base = " ".join(f"a{i}" for i in range(2000))
    target = " ".join(f"b{i}" for i in range(2000))
    # (2000 + 1) * (2000 + 1) cells is above the default budget
    assert (2001 * 2001) > DEFAULT_CELL_BUDGET
    assert compute_token_matches(tokenize(base), tokenize(target)) is None
    assert diff_texts(base, target) == simple_diff_ranges(base, target)


def test_custom_budget_controls_fallback():
    base = "keep one two three keep"
    target = "keep uno two tres keep"
    # middle is 3 x 3 tokens -> 16 cells
    assert diff_texts(base, target, cell_budget=15) == simple_diff_ranges(base, target)
    ranges = diff_texts(base, target, cell_budget=16)
    assert [base[r.start : r.end] for r in ranges.base] == ["one", "three"]


def test_diff_is_deterministic():
    base = "lorem ipsum dolor sit amet consectetur"
    target = "lorem dolor ipsum sit amet elit"
    assert diff_texts(base, target) == diff_texts(base, target)


def test_blank_target_uses_character_diff():
    base = "hello"
    target = " \n "
    assert diff_texts(base, target) == simple_diff_ranges(base, target)
    assert diff_texts(base, target) == DiffRanges(
        base=[OffsetRange(0, 5)], target=[OffsetRange(0, 3)]
    )


def _nested_loop_table(base, target):
    table = [[0] * (len(target) + 1) for _ in range(len(base) + 1)]
    for i in range(1, len(base) + 1):
        for j in range(1, len(target) + 1):
            if base[i - 1] == target[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def test_lcs_table_matches_nested_loop_dp():
    rng = random.Random(1234)
    for _ in range(300):
        base = [rng.randrange(4) for _ in range(rng.randrange(1, 12))]
        target = [rng.randrange(4) for _ in range(rng.randrange(1, 12))]
        table = _lcs_table(np.array(base, dtype=np.int64), np.array(target, dtype=np.int64))
        assert table.tolist() == _nested_loop_table(base, target)


def test_lcs_table_is_symmetric_under_transpose():
    rng = random.Random(99)
    base = np.array([rng.randrange(3) for _ in range(17)], dtype=np.int64)
    target = np.array([rng.randrange(3) for _ in range(5)], dtype=np.int64)
    assert np.array_equal(_lcs_table(base, target), _lcs_table(target, base).T)
    assert _lcs_table(base, target).shape == (18, 6)


def test_tall_lcs_table_costs_the_same_as_wide():
    tall = np.zeros(1_900_000, dtype=np.int64)
    short = np.ones(1, dtype=np.int64)
    started = time.perf_counter()
    table = _lcs_table(tall, short)
    elapsed = time.perf_counter() - started
    assert table.shape == (1_900_001, 2)
    assert not table.any()
    assert elapsed < 2.0


def test_longer_base_middle_keeps_tie_break():
    ranges = diff_texts("A B C", "B A")
    assert ranges.base == [OffsetRange(2, 5)]
    assert ranges.target == [OffsetRange(0, 1)]
