"""Fuzzy matching and the scorers built on it.

``fuzzy_match`` matches if all query characters appear in order (not
necessarily consecutive). Lower match score = better match. Scorers invert
this: they return ``None`` to hide an option and a higher number to rank it
earlier.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

_WORD_BOUNDARY_RE = re.compile(r"[\s\-_./:]")
_ALPHA_NUM_RE = re.compile(r"^(?P<letters>[^\W\d_]+)(?P<digits>[0-9]+)$")
_NUM_ALPHA_RE = re.compile(r"^(?P<digits>[0-9]+)(?P<letters>[^\W\d_]+)$")

# (filter input, option value, stringified option, original index) -> score
Scorer = Callable[[str, Any, str, int], Optional[float]]


@dataclass
class FuzzyMatch:
    matches: bool
    score: float


def fuzzy_match(query: str, text: str) -> FuzzyMatch:
    query_folded = query.casefold()
    text_folded = text.casefold()

    def match_query(normalized_query: str) -> FuzzyMatch:
        if len(normalized_query) == 0:
            return FuzzyMatch(matches=True, score=0)

        if len(normalized_query) > len(text_folded):
            return FuzzyMatch(matches=False, score=0)

        query_index = 0
        score: float = 0
        last_match_index = -1
        consecutive_matches = 0

        for i, ch in enumerate(text_folded):
            if query_index >= len(normalized_query):
                break
            if ch != normalized_query[query_index]:
                continue

            at_boundary = i == 0 or bool(_WORD_BOUNDARY_RE.match(text_folded[i - 1]))

            if last_match_index == i - 1:
                consecutive_matches += 1
                score -= consecutive_matches * 5
            else:
                consecutive_matches = 0
                if last_match_index >= 0:
                    score += (i - last_match_index - 1) * 2

            if at_boundary:
                score -= 10

            score += i * 0.1
            last_match_index = i
            query_index += 1

        if query_index < len(normalized_query):
            return FuzzyMatch(matches=False, score=0)

        return FuzzyMatch(matches=True, score=score)

    primary = match_query(query_folded)
    if primary.matches:
        return primary

    # "abc12" also matches "12abc", slightly penalised
    alpha_numeric = _ALPHA_NUM_RE.match(query_folded)
    numeric_alpha = _NUM_ALPHA_RE.match(query_folded)
    if alpha_numeric:
        swapped = alpha_numeric.group("digits") + alpha_numeric.group("letters")
    elif numeric_alpha:
        swapped = numeric_alpha.group("letters") + numeric_alpha.group("digits")
    else:
        return primary

    swapped_match = match_query(swapped)
    if not swapped_match.matches:
        return primary
    return FuzzyMatch(matches=True, score=swapped_match.score + 5)


# ---------------------------------------------------------------------------
# Scorers
# ---------------------------------------------------------------------------


def default_scorer(filter_input: str, option: Any, string_value: str, index: int) -> float | None:
    match = fuzzy_match(filter_input, string_value)
    if not match.matches:
        return None
    return -match.score


def substring_scorer(filter_input: str, option: Any, string_value: str, index: int) -> float | None:
    """Case-insensitive substring filter; every kept option scores 0."""
    if filter_input.casefold() in string_value.casefold():
        return 0
    return None


def score_options(
    scorer: Scorer,
    filter_input: str,
    options: Sequence[Any],
    string_options: Sequence[str],
) -> list[int]:
    """Return the original indices kept by *scorer*, best score first.

    The sort is stable, so ties keep ascending original-index order.
    """
    scored: list[tuple[int, float]] = []
    for index, (option, string_value) in enumerate(zip(options, string_options)):
        score = scorer(filter_input, option, string_value, index)
        if score is not None:
            scored.append((index, score))

    scored.sort(key=lambda item: -item[1])
    return [index for index, _ in scored]
