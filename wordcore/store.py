"""In-memory keyword index for wordfind.

Holds three things: the noise-word set, the keyword → ranked occurrence
lists, and the order in which documents were merged.  The index is written
while documents are merged and becomes read-only once ``freeze()`` is
called; nothing is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass

from wordcore.ranking import insert_ranked


@dataclass(frozen=True)
class Occurrence:
    document: str
    frequency: int

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"

    def to_dict(self) -> dict:
        return {"document": self.document, "frequency": self.frequency}


class KeywordIndex:
    def __init__(self, noise_words: frozenset[str] | set[str] = frozenset()):
        self.noise_words = frozenset(noise_words)
        self._postings: dict[str, list[Occurrence]] = {}
        self._documents: list[str] = []
        self._frozen = False

    # ── Write phase ─────────────────────────────────────────────────

    def merge(self, document: str, keywords: dict[str, Occurrence]) -> None:
        """Fold one document's keyword counts into the index."""
        if self._frozen:
            raise RuntimeError("Index is read-only once indexing has finished.")
        if document in self._documents:
            raise ValueError(f"Document '{document}' has already been merged.")
        strays = sorted({o.document for o in keywords.values() if o.document != document})
        if strays:
            raise ValueError(f"Occurrences for '{document}' name other documents: {strays}")

        for keyword, occurrence in keywords.items():
            occs = self._postings.get(keyword)
            if occs is None:
                self._postings[keyword] = [occurrence]
            else:
                insert_ranked(occs, occurrence)
        self._documents.append(document)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Read phase ──────────────────────────────────────────────────

    def get(self, keyword: str) -> tuple[Occurrence, ...]:
        """Ranked occurrences for a normalized keyword; empty if unknown."""
        return tuple(self._postings.get(keyword, ()))

    def keywords(self) -> list[str]:
        return sorted(self._postings)

    def documents(self) -> tuple[str, ...]:
        return tuple(self._documents)

    def as_dict(self) -> dict[str, list[Occurrence]]:
        return {kw: list(occs) for kw, occs in self._postings.items()}

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._postings

    def __len__(self) -> int:
        return len(self._postings)
