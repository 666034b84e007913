"""Query engine: "kw1 OR kw2" over a built KeywordIndex.

Both keywords are normalized the same way documents were, their ranked
occurrence lists are merged by frequency, and the first ``limit`` distinct
documents are returned.
"""

from __future__ import annotations

from dataclasses import dataclass

from wordcore.store import KeywordIndex, Occurrence
from wordcore.text import extract_keyword

TOP_K = 5


@dataclass
class SearchResult:
    document: str
    frequency: int
    keyword: str

    def to_dict(self) -> dict:
        return {
            "document": self.document,
            "frequency": self.frequency,
            "keyword": self.keyword,
        }


def lookup(token: str, index: KeywordIndex) -> tuple[str | None, tuple[Occurrence, ...]]:
    """Normalize a query token and fetch its ranked occurrences.

    Noise words, malformed tokens and unknown keywords all yield ().
    """
    keyword = extract_keyword(token, index.noise_words)
    if keyword is None:
        return None, ()
    return keyword, index.get(keyword)


def search(kw1: str, kw2: str, index: KeywordIndex, limit: int = TOP_K) -> list[SearchResult]:
    """Merge the two ranked lists into at most ``limit`` distinct documents.

    Higher frequency wins.  On a tie both heads are taken, kw1's first.
    """
    key1, first = lookup(kw1, index)
    key2, second = lookup(kw2, index)

    results: list[SearchResult] = []
    seen: set[str] = set()

    def take(occ: Occurrence, keyword: str) -> None:
        if occ.document in seen or len(results) >= limit:
            return
        seen.add(occ.document)
        results.append(SearchResult(occ.document, occ.frequency, keyword))

    i = j = 0
    while len(results) < limit and (i < len(first) or j < len(second)):
        if j >= len(second):
            take(first[i], key1)
            i += 1
        elif i >= len(first):
            take(second[j], key2)
            j += 1
        elif first[i].frequency > second[j].frequency:
            take(first[i], key1)
            i += 1
        elif first[i].frequency < second[j].frequency:
            take(second[j], key2)
            j += 1
        else:
            take(first[i], key1)
            take(second[j], key2)
            i += 1
            j += 1

    return results


def top5_search(kw1: str, kw2: str, index: KeywordIndex) -> list[str]:
    """Names of the top five documents containing kw1 or kw2."""
    return [r.document for r in search(kw1, kw2, index, TOP_K)]
