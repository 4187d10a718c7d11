# docindex/application/document_service.py

from pathlib import Path
from typing import List, Optional, Tuple

from docindex.application.keyword_search import search_keyword
from docindex.domain.interfaces import DocumentRepositoryPort
from docindex.domain.models import Document
from docindex.infrastructure.document_loader import TextFileLoader
from docindex.infrastructure.file_hasher import compute_directory_hashes, compute_text_hash
from docindex.infrastructure.paginator import paginate
from docindex.infrastructure.tfidf import CorpusIndex, TfIdfScorer


class DocumentService:
    """
    Single entry point for document use cases: CRUD, import, keyword
    search and TF-IDF analysis.

    Every document created or imported is paginated before it reaches the
    repository and its full text is appended to the corpus. The corpus is
    append-only, so later edits and deletes do not remove statistics.
    """

    def __init__(
        self,
        repository: DocumentRepositoryPort,
        corpus: Optional[CorpusIndex] = None,
        scorer: Optional[TfIdfScorer] = None,
        loader: Optional[TextFileLoader] = None,
    ):
        self._repository = repository
        self._corpus = corpus if corpus is not None else CorpusIndex()
        self._scorer = scorer if scorer is not None else TfIdfScorer(self._corpus)
        self._loader = loader if loader is not None else TextFileLoader()

    # ─── CRUD ─────────────────────────────────────────────────────────────────

    def create_file(self, name: str, content: str) -> bool:
        if not name:
            print("[DocumentService] ⚠ Refusing to create a document without a name.")
            return False

        content = content or ""
        self._repository.add_document(
            name=name,
            pages=paginate(content),
            content_hash=compute_text_hash(content),
        )
        self._corpus.add_document_to_corpus(content)
        return True

    def update_file(self, document_id: int, name: str, page_number: int, content: str) -> bool:
        if not name:
            return False
        return self._repository.update_page(document_id, page_number, name, content or "")

    def delete_file(self, document_id: int) -> bool:
        return self._repository.delete_document(document_id)

    def get_file(self, document_id: int) -> Optional[Document]:
        return self._repository.get_document(document_id)

    def get_all_files(self) -> List[Document]:
        return self._repository.list_documents()

    # ─── Import ───────────────────────────────────────────────────────────────

    def import_text_file(self, file_path: Path, name: Optional[str]) -> bool:
        """
        Read a text file and store it under `name`.
        Failures are reported as False, never raised.
        """
        if not name:
            print(f"[DocumentService] ⚠ No name given for '{file_path}' — skipped.")
            return False

        try:
            content = self._loader.load_file(Path(file_path))
        except OSError as error:
            print(f"[DocumentService] ⚠ Failed to load '{file_path}': {error}")
            return False

        if content is None:
            print(f"[DocumentService] ⚠ Unsupported file type: '{file_path}'")
            return False

        return self.create_file(name, content)

    def import_directory(self, directory_path: str) -> List[str]:
        """
        Import every supported file whose content changed since the last
        import. Documents are named by their path relative to the directory.
        Returns the names that were (re)imported.
        """
        current_hashes = compute_directory_hashes(directory_path)
        imported: List[str] = []

        for name, file_hash in current_hashes.items():
            existing = self._repository.find_by_name(name)
            if existing is not None and existing.content_hash == file_hash:
                continue

            try:
                content = self._loader.load_file(Path(directory_path) / name)
            except OSError as error:
                print(f"[DocumentService] ⚠ Failed to load '{name}': {error}")
                continue

            if existing is None:
                self._repository.add_document(name, paginate(content), file_hash)
            else:
                self._repository.replace_pages(
                    existing.document_id, paginate(content), file_hash
                )
            self._corpus.add_document_to_corpus(content)
            imported.append(name)

        print(f"[DocumentService] Imported {len(imported)} new/modified file(s) "
              f"from {directory_path}")
        return imported

    # ─── Retrieval ────────────────────────────────────────────────────────────

    def search(self, keyword: str) -> List[str]:
        return search_keyword(keyword, self._repository.list_documents())

    def calculate_tfidf(self, text: str) -> float:
        return self._scorer.calculate_document_tfidf(text)

    def analyze_file(self, document_id: int, limit: int = 5) -> List[Tuple[str, float]]:
        """Top TF-IDF terms of a stored document, highest first."""
        document = self._repository.get_document(document_id)
        if document is None:
            raise KeyError(f"No document with id {document_id}.")
        return self._scorer.top_terms(document.text, limit=limit)
