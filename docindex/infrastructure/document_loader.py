# docindex/infrastructure/document_loader.py

from typing import Optional
from pathlib import Path


SUPPORTED_EXTENSIONS = {".txt", ".md"}


class TextFileLoader:
    """
    Reads plain-text files for import.

    Content is returned untouched: no whitespace cleanup, no header
    stripping. Pagination must be able to reproduce the file exactly.
    """

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def load_file(self, file_path: Path) -> Optional[str]:
        """
        Load a single .txt / .md file.
        Returns None if the file type is unsupported.
        """
        file_path = Path(file_path)
        if not self.is_supported(file_path):
            return None
        # Decode bytes directly so line endings are not translated
        return file_path.read_bytes().decode(self._encoding, errors="ignore")

    @staticmethod
    def is_supported(file_path: Path) -> bool:
        return Path(file_path).suffix.lower() in SUPPORTED_EXTENSIONS
