# docindex/domain/interfaces.py

from abc import ABC, abstractmethod
from typing import List, Optional

from .models import Document, Page


class DocumentRepositoryPort(ABC):
    """
    Port for document storage.
    Pages arrive already paginated; the repository only assigns identities.
    """

    @abstractmethod
    def add_document(
        self,
        name: str,
        pages: List[Page],
        content_hash: Optional[str] = None,
    ) -> Document: ...

    @abstractmethod
    def get_document(self, document_id: int) -> Optional[Document]: ...

    @abstractmethod
    def list_documents(self) -> List[Document]:
        """Return all stored documents in insertion order."""
        ...

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Document]: ...

    @abstractmethod
    def update_page(
        self,
        document_id: int,
        page_number: int,
        name: str,
        content: str,
    ) -> bool:
        """
        Rename the document and overwrite a single page's content.
        Returns False when the document or the page does not exist.
        The content is stored as given, without re-pagination, so an edited
        page may be longer or shorter than PAGE_SIZE.
        """
        ...

    @abstractmethod
    def replace_pages(
        self,
        document_id: int,
        pages: List[Page],
        content_hash: Optional[str] = None,
    ) -> bool: ...

    @abstractmethod
    def delete_document(self, document_id: int) -> bool: ...
