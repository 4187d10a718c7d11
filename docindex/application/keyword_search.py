# docindex/application/keyword_search.py

import re
from typing import List, Optional, Sequence

from docindex.domain.models import Document, KeywordMatch, Page


MIN_KEYWORD_LENGTH = 3


def search_keyword(keyword: str, documents: Sequence[Document]) -> List[str]:
    """
    Return one context snippet per document containing `keyword`.

    Snippets follow the input document order. Documents without a match are
    skipped. An empty document collection gives an empty list.
    """
    return [match.snippet for match in find_keyword_matches(keyword, documents)]


def find_keyword_matches(
    keyword: str,
    documents: Sequence[Document],
) -> List[KeywordMatch]:
    """
    Case-insensitive substring search, stopping at the first matching page
    of each document.
    """
    if keyword is None or len(keyword) < MIN_KEYWORD_LENGTH:
        raise ValueError(
            f"Keyword must be at least {MIN_KEYWORD_LENGTH} letters long."
        )

    # Literal match; offsets stay aligned with the original page text
    pattern = re.compile(re.escape(keyword), re.IGNORECASE)
    matches: List[KeywordMatch] = []

    for document in documents:
        match = _first_match_in_document(pattern, document)
        if match is not None:
            matches.append(match)

    return matches


def _first_match_in_document(
    pattern: re.Pattern[str],
    document: Document,
) -> Optional[KeywordMatch]:
    for page in sorted(document.pages, key=lambda p: p.page_number):
        hit = pattern.search(page.content)
        if hit is None:
            continue

        return KeywordMatch(
            document_id=document.document_id,
            document_name=document.name,
            page_number=page.page_number,
            offset=hit.start(),
            snippet=_build_snippet(page, hit.start(), hit.end()),
        )
    return None


def _build_snippet(page: Page, start: int, end: int) -> str:
    """
    Matched source text, prefixed by the word before the token that holds it.
    """
    content = page.content
    matched = content[start:end]

    # Walk back to the start of the token containing the match
    token_start = start
    while token_start > 0 and not content[token_start - 1].isspace():
        token_start -= 1

    preceding = content[:token_start].rsplit(None, 1)
    if not preceding:
        return matched
    return f"{preceding[-1]} {matched}"
