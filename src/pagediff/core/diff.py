"""Token level text diff used to highlight changed words on a page.

The diff works on whitespace separated tokens.  Equal runs at both ends are
matched first; the remaining middle section is aligned with a classic LCS
table.  When either text has no tokens, or the table would need more than
``cell_budget`` cells, the whole comparison degrades to a single
common-prefix/common-suffix character diff.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from .tokens import tokenize
from .types import DiffRanges, OffsetRange, TextToken

logger = logging.getLogger(__name__)

DEFAULT_CELL_BUDGET = 4_000_000


@dataclass
class TokenMatches:
    base: List[bool]
    target: List[bool]


def _whole_text_ranges(base_text: str, target_text: str) -> Optional[DiffRanges]:
    if not base_text and not target_text:
        return DiffRanges(base=[], target=[])
    if not base_text:
        return DiffRanges(base=[], target=[OffsetRange(0, len(target_text))])
    if not target_text:
        return DiffRanges(base=[OffsetRange(0, len(base_text))], target=[])
    return None


def simple_diff_ranges(base_text: str, target_text: str) -> DiffRanges:
    """Character diff reporting the single gap between common prefix and suffix."""

    trivial = _whole_text_ranges(base_text, target_text)
    if trivial is not None:
        return trivial

    base_len = len(base_text)
    target_len = len(target_text)
    max_prefix = min(base_len, target_len)
    prefix = 0
    while prefix < max_prefix and base_text[prefix] == target_text[prefix]:
        prefix += 1

    suffix = 0
    while (
        suffix < base_len - prefix
        and suffix < target_len - prefix
        and base_text[base_len - 1 - suffix] == target_text[target_len - 1 - suffix]
    ):
        suffix += 1

    base_end = base_len - suffix
    target_end = target_len - suffix
    return DiffRanges(
        base=[OffsetRange(prefix, base_end)] if prefix < base_end else [],
        target=[OffsetRange(prefix, target_end)] if prefix < target_end else [],
    )


def _token_ids(base: Sequence[TextToken], target: Sequence[TextToken]):
    vocabulary: Dict[str, int] = {}
    base_ids = np.fromiter(
        (vocabulary.setdefault(token.value, len(vocabulary)) for token in base),
        dtype=np.int64,
        count=len(base),
    )
    target_ids = np.fromiter(
        (vocabulary.setdefault(token.value, len(vocabulary)) for token in target),
        dtype=np.int64,
        count=len(target),
    )
    return base_ids, target_ids


def _lcs_table(base_ids: np.ndarray, target_ids: np.ndarray) -> np.ndarray:
    # Iterate over the shorter side so the Python loop stays within
    # sqrt(cells); LCS lengths are symmetric, so the transpose is the same table.
    if len(base_ids) > len(target_ids):
        return _lcs_table(target_ids, base_ids).T
    rows = len(base_ids) + 1
    cols = len(target_ids) + 1
    table = np.zeros((rows, cols), dtype=np.uint32)
    for i in range(1, rows):
        previous = table[i - 1]
        equal = target_ids == base_ids[i - 1]
        # On equality the diagonal wins, otherwise "up"; the running maximum
        # then folds in the "left" neighbour along the row.
        candidate = np.where(equal, previous[:-1] + 1, previous[1:])
        table[i, 1:] = np.maximum.accumulate(candidate)
    return table


def compute_token_matches(
    base_tokens: Sequence[TextToken],
    target_tokens: Sequence[TextToken],
    cell_budget: int = DEFAULT_CELL_BUDGET,
) -> Optional[TokenMatches]:
    """Flag the tokens of each side that take part in the alignment.

    Returns ``None`` when the LCS table for the untrimmed middle section
    would exceed ``cell_budget`` cells.
    """

    base_len = len(base_tokens)
    target_len = len(target_tokens)
    base_matches = [False] * base_len
    target_matches = [False] * target_len

    start = 0
    while (
        start < base_len
        and start < target_len
        and base_tokens[start].value == target_tokens[start].value
    ):
        base_matches[start] = True
        target_matches[start] = True
        start += 1

    end_base = base_len - 1
    end_target = target_len - 1
    while (
        end_base >= start
        and end_target >= start
        and base_tokens[end_base].value == target_tokens[end_target].value
    ):
        base_matches[end_base] = True
        target_matches[end_target] = True
        end_base -= 1
        end_target -= 1

    base_mid = end_base - start + 1
    target_mid = end_target - start + 1
    if base_mid <= 0 or target_mid <= 0:
        return TokenMatches(base=base_matches, target=target_matches)

    cells = (base_mid + 1) * (target_mid + 1)
    if cells > cell_budget:
        logger.debug("LCS table of %d cells exceeds budget of %d", cells, cell_budget)
        return None

    middle_base = base_tokens[start : end_base + 1]
    middle_target = target_tokens[start : end_target + 1]
    base_ids, target_ids = _token_ids(middle_base, middle_target)
    table = _lcs_table(base_ids, target_ids)

    i = base_mid
    j = target_mid
    while i > 0 and j > 0:
        if base_ids[i - 1] == target_ids[j - 1]:
            base_matches[start + i - 1] = True
            target_matches[start + j - 1] = True
            i -= 1
            j -= 1
            continue
        up = table[i - 1, j]
        left = table[i, j - 1]
        if up >= left:
            i -= 1
        else:
            j -= 1

    return TokenMatches(base=base_matches, target=target_matches)


def build_ranges_from_matches(tokens: Sequence[TextToken], matches: Sequence[bool]) -> List[OffsetRange]:
    """Merge consecutive unmatched tokens into offset ranges."""

    ranges: List[OffsetRange] = []
    range_start: Optional[int] = None
    range_end = 0
    for token, matched in zip(tokens, matches):
        if not matched:
            if range_start is None:
                range_start = token.start
            range_end = token.end
            continue
        if range_start is not None:
            ranges.append(OffsetRange(range_start, range_end))
            range_start = None
    if range_start is not None:
        ranges.append(OffsetRange(range_start, range_end))
    return ranges


def diff_texts(
    base_text: str,
    target_text: str,
    *,
    cell_budget: int = DEFAULT_CELL_BUDGET,
) -> DiffRanges:
    """Return the unmatched character ranges of ``base_text`` and ``target_text``."""

    trivial = _whole_text_ranges(base_text, target_text)
    if trivial is not None:
        return trivial

    base_tokens = tokenize(base_text)
    target_tokens = tokenize(target_text)
    if not base_tokens or not target_tokens:
        return simple_diff_ranges(base_text, target_text)

    matches = compute_token_matches(base_tokens, target_tokens, cell_budget)
    if matches is None:
        logger.debug("falling back to character diff (%d x %d tokens)", len(base_tokens), len(target_tokens))
        return simple_diff_ranges(base_text, target_text)

    return DiffRanges(
        base=build_ranges_from_matches(base_tokens, matches.base),
        target=build_ranges_from_matches(target_tokens, matches.target),
    )
