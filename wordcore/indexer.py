"""Indexer: reads the document list and noise words, counts keywords per
document, and merges every document into a KeywordIndex.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable

from wordcore.store import KeywordIndex, Occurrence
from wordcore.text import extract_keyword, load_noise_words, read_tokens

log = logging.getLogger(__name__)


# ── Per-document counting ──────────────────────────────────────────

def count_keywords(
    document: str,
    lines: Iterable[str],
    noise_words: frozenset[str] | set[str],
) -> dict[str, Occurrence]:
    """Count every keyword in one document's lines.

    Returns {keyword: Occurrence(document, count)}, one entry per distinct
    keyword.
    """
    counts: Counter[str] = Counter()
    for line in lines:
        for token in line.split():
            keyword = extract_keyword(token, noise_words)
            if keyword is not None:
                counts[keyword] += 1

    return {kw: Occurrence(document, freq) for kw, freq in counts.items()}


def resolve_document(document: str, documents_dir: str | Path | None = None) -> Path:
    path = Path(document)
    if documents_dir is not None and not path.is_absolute():
        path = Path(documents_dir) / path
    return path


def load_keywords(
    document: str,
    noise_words: frozenset[str] | set[str],
    documents_dir: str | Path | None = None,
) -> dict[str, Occurrence]:
    """Read a document from disk and count its keywords.

    Raises OSError (FileNotFoundError, IsADirectoryError, ...) if the
    document cannot be opened.
    """
    path = resolve_document(document, documents_dir)
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return count_keywords(document, f, noise_words)


# ── Merging ────────────────────────────────────────────────────────

def merge_keywords(index: KeywordIndex, document: str, keywords: dict[str, Occurrence]) -> None:
    """Merge one document's counts into the index, keeping each list ranked."""
    index.merge(document, keywords)
    log.debug("Merged %s (%d keywords)", document, len(keywords))


# ── Main entry point ───────────────────────────────────────────────

def index_documents(
    docs_file: str | Path,
    noise_words_file: str | Path,
    documents_dir: str | Path | None = None,
) -> tuple[KeywordIndex, dict]:
    """Build the keyword index for every document listed in ``docs_file``.

    A missing noise-word file or document list raises FileNotFoundError.
    A document that cannot be opened is logged and skipped.  Returns the frozen index and
    a summary dict with counts.
    """
    noise_words = load_noise_words(noise_words_file)
    documents = read_tokens(docs_file)

    index = KeywordIndex(noise_words)
    if documents_dir is None:
        documents_dir = Path(docs_file).parent

    log.info("Indexing %d documents from %s", len(documents), docs_file)

    missing: list[str] = []
    duplicates: list[str] = []
    seen: set[str] = set()

    for document in documents:
        if document in seen:
            log.warning("Skipping duplicate document entry: %s", document)
            duplicates.append(document)
            continue
        seen.add(document)

        try:
            keywords = load_keywords(document, index.noise_words, documents_dir)
        except OSError as e:
            log.warning("Can't open document %s (%s), skipping", document, e.strerror or e)
            missing.append(document)
            continue

        merge_keywords(index, document, keywords)

    index.freeze()

    summary = {
        "documents": len(documents),
        "indexed": len(index.documents()),
        "missing": missing,
        "duplicates": duplicates,
        "keywords": len(index),
        "noise_words": len(noise_words),
    }
    log.info(
        "Indexed %d of %d documents, %d keywords",
        summary["indexed"],
        summary["documents"],
        summary["keywords"],
    )
    return index, summary


def make_index(
    docs_file: str | Path,
    noise_words_file: str | Path,
    documents_dir: str | Path | None = None,
) -> KeywordIndex:
    index, _ = index_documents(docs_file, noise_words_file, documents_dir=documents_dir)
    return index
