# docindex/infrastructure/document_repository.py

from dataclasses import replace
from typing import Dict, List, Optional

from docindex.domain.interfaces import DocumentRepositoryPort
from docindex.domain.models import Document, Page


class InMemoryDocumentRepository(DocumentRepositoryPort):
    """
    Dict-backed document store.

    Owns identity assignment: document ids and page ids are increasing
    integers starting at 1 and are never reused after a delete.
    Nothing survives the process; durable storage is a separate adapter.
    """

    def __init__(self):
        self._documents: Dict[int, Document] = {}
        self._next_document_id = 1
        self._next_page_id = 1

    def add_document(
        self,
        name: str,
        pages: List[Page],
        content_hash: Optional[str] = None,
    ) -> Document:
        if not pages:
            raise ValueError("A document needs at least one page.")

        document_id = self._next_document_id
        self._next_document_id += 1

        document = Document(
            document_id=document_id,
            name=name,
            pages=self._assign_page_ids(document_id, pages),
            content_hash=content_hash,
        )
        self._documents[document_id] = document
        print(f"[DocumentRepository] Stored '{name}' as #{document_id} "
              f"({len(document.pages)} page(s))")
        return document

    def get_document(self, document_id: int) -> Optional[Document]:
        return self._documents.get(document_id)

    def list_documents(self) -> List[Document]:
        # dicts keep insertion order
        return list(self._documents.values())

    def find_by_name(self, name: str) -> Optional[Document]:
        for document in self._documents.values():
            if document.name == name:
                return document
        return None

    def update_page(
        self,
        document_id: int,
        page_number: int,
        name: str,
        content: str,
    ) -> bool:
        """
        Overwrites the page verbatim. Edits are not re-paginated: a page may
        end up longer than PAGE_SIZE, and later pages keep their numbers.
        """
        document = self._documents.get(document_id)
        if document is None:
            return False

        for page in document.pages:
            if page.page_number == page_number:
                page.content = content
                document.name = name
                # Page edits break the link to the imported file
                document.content_hash = None
                return True
        return False

    def replace_pages(
        self,
        document_id: int,
        pages: List[Page],
        content_hash: Optional[str] = None,
    ) -> bool:
        document = self._documents.get(document_id)
        if document is None:
            return False
        if not pages:
            raise ValueError("A document needs at least one page.")

        document.pages = self._assign_page_ids(document_id, pages)
        document.content_hash = content_hash
        return True

    def delete_document(self, document_id: int) -> bool:
        removed = self._documents.pop(document_id, None)
        if removed is not None:
            print(f"[DocumentRepository] Deleted #{document_id} '{removed.name}'")
        return removed is not None

    def _assign_page_ids(self, document_id: int, pages: List[Page]) -> List[Page]:
        stored: List[Page] = []
        for page in sorted(pages, key=lambda p: p.page_number):
            stored.append(replace(page, document_id=document_id, page_id=self._next_page_id))
            self._next_page_id += 1
        return stored
