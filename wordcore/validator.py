"""Two-level source validation: structural, then content.

Structural = both input files exist and the document list is non-empty.
Content    = listed documents resolve, no duplicates, usable noise words.
Structural problems are errors (indexing would abort); content problems
are warnings (indexing would skip or ignore them).
"""

from __future__ import annotations

from pathlib import Path

from wordcore.indexer import resolve_document
from wordcore.text import LETTERS, read_tokens


# ── Structural Validation ───────────────────────────────────────────

def validate_structure(docs_file: str | Path, noise_words_file: str | Path) -> list[str]:
    """Check that both sources exist.  Returns list of error strings."""
    errors: list[str] = []

    if not Path(docs_file).is_file():
        errors.append(f"Document list not found: {docs_file}")
    if not Path(noise_words_file).is_file():
        errors.append(f"Noise-word file not found: {noise_words_file}")
    if errors:
        return errors  # can't read contents

    if not read_tokens(docs_file):
        errors.append(f"Document list is empty: {docs_file}")

    return errors


# ── Content Validation ──────────────────────────────────────────────

def validate_documents(documents: list[str], documents_dir: str | Path) -> list[str]:
    """Check that every listed document resolves to a file, exactly once."""
    warnings: list[str] = []
    seen: set[str] = set()

    for document in documents:
        if document in seen:
            warnings.append(f"Document '{document}' is listed more than once; repeats are skipped.")
            continue
        seen.add(document)
        if not resolve_document(document, documents_dir).is_file():
            warnings.append(f"Document '{document}' not found in {documents_dir}; it will be skipped.")

    return warnings


def validate_noise_words(noise_words: list[str]) -> list[str]:
    """Flag noise words that can never match a keyword."""
    unusable = sorted({w for w in noise_words if not all(ch in LETTERS for ch in w)})
    if not unusable:
        return []
    return [
        f"Noise words that are not purely alphabetic never match a keyword: {unusable}."
    ]


# ── Top-level validate ──────────────────────────────────────────────

def validate_sources(
    docs_file: str | Path,
    noise_words_file: str | Path,
    documents_dir: str | Path | None = None,
) -> tuple[bool, list[str], list[str]]:
    """Validate the two indexing sources.

    Returns (passed, errors, warnings).
    """
    errors = validate_structure(docs_file, noise_words_file)
    if errors:
        return False, errors, []

    if documents_dir is None:
        documents_dir = Path(docs_file).parent

    warnings = validate_documents(read_tokens(docs_file), documents_dir)
    warnings.extend(validate_noise_words(read_tokens(noise_words_file)))

    return True, [], warnings
