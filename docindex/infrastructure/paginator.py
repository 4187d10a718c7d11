# docindex/infrastructure/paginator.py

from typing import List, Optional

from docindex.domain.models import Page


# Fixed page width in characters. Boundaries ignore word breaks.
PAGE_SIZE = 100


def paginate(content: Optional[str]) -> List[Page]:
    """
    Split raw text into consecutive pages of PAGE_SIZE characters.

    No trimming or whitespace normalization: joining the page contents in
    order gives back the input. Missing or empty input yields a single
    empty page numbered 1.
    """
    if not content:
        return [Page(page_number=1, content="")]

    return [
        Page(page_number=index + 1, content=content[start:start + PAGE_SIZE])
        for index, start in enumerate(range(0, len(content), PAGE_SIZE))
    ]
