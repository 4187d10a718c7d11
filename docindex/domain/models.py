# docindex/domain/models.py

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Page:
    """
    A fixed-size slice of a document's text. Page numbers are 1-based.
    """
    page_number: int
    content: str
    document_id: Optional[int] = None
    page_id: Optional[int] = None


@dataclass
class Document:
    """
    A named document holding its pages in page-number order.
    """
    document_id: int
    name: str
    pages: List[Page] = field(default_factory=list)
    content_hash: Optional[str] = field(default=None, repr=False)

    @property
    def text(self) -> str:
        """Reassemble the full text from the pages."""
        return "".join(page.content for page in self.pages)


@dataclass
class KeywordMatch:
    """
    First keyword hit inside a document, with the word preceding it.
    """
    document_id: int
    document_name: str
    page_number: int
    offset: int
    snippet: str

    def __repr__(self) -> str:
        return (
            f"KeywordMatch(document='{self.document_name}', "
            f"page={self.page_number}, snippet='{self.snippet}')"
        )
