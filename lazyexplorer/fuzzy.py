from __future__ import annotations

from collections.abc import Iterable

from .entries import Entry

SUBSTRING_BASE_SCORE = 10_000


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Score ``query`` as an ordered subsequence of ``candidate``.

    Consecutive runs and hits at word starts score higher; ``None`` means the
    characters do not all appear in order.
    """
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate_folded[idx - 1] in "_- .":
            score += 35
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score


def abbreviation_score(abbreviation: str, name: str) -> int | None:
    """Rank ``name`` for ``abbreviation``; substring hits beat scattered ones."""
    if not abbreviation:
        return 0
    idx = name.casefold().find(abbreviation.casefold())
    if idx >= 0:
        return SUBSTRING_BASE_SCORE - (idx * 50) - len(name)
    return fuzzy_score(abbreviation, name)


def entry_matches(abbreviation: str, entry: Entry) -> bool:
    return abbreviation_score(abbreviation, entry.name) is not None


def order_matching_entries(entries: Iterable[Entry], abbreviation: str) -> list[Entry]:
    """Return entries matching ``abbreviation``, best first.

    With no abbreviation every entry matches and the order is directories
    first, then case-insensitive name.
    """
    if not abbreviation:
        return sorted(entries, key=lambda entry: (not entry.is_dir, entry.name.casefold()))

    scored: list[tuple[int, str, Entry]] = []
    for entry in entries:
        score = abbreviation_score(abbreviation, entry.name)
        if score is None:
            continue
        scored.append((score, entry.name.casefold(), entry))
    scored.sort(key=lambda item: (-item[0], item[1]))
    return [entry for _score, _name, entry in scored]


__all__ = ["abbreviation_score", "entry_matches", "fuzzy_score", "order_matching_entries"]
