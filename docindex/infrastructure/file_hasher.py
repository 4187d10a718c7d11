import hashlib
from pathlib import Path

from docindex.infrastructure.document_loader import TextFileLoader


def compute_text_hash(text: str) -> str:
    """SHA-256 of the UTF-8 encoded text. Identifies a document's content."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def compute_file_hash(file_path: str) -> str:
    """SHA-256 of a file's raw bytes, read in 8 KiB blocks."""
    sha256 = hashlib.sha256()
    with open(file_path, "rb") as f:
        for block in iter(lambda: f.read(8192), b""):
            sha256.update(block)
    return sha256.hexdigest()


def compute_directory_hashes(directory_path: str) -> dict[str, str]:
    """
    Hash every importable file under a directory, subfolders included.
    Keys are POSIX paths relative to the directory, so `a/notes.txt` and
    `b/notes.txt` stay distinct.
    """
    data_dir = Path(directory_path)
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Import directory not found: {directory_path}")

    hashes = {
        file_path.relative_to(data_dir).as_posix(): compute_file_hash(str(file_path))
        for file_path in sorted(data_dir.rglob("*"))
        if file_path.is_file() and TextFileLoader.is_supported(file_path)
    }
    print(f"[FileHasher] Hashed {len(hashes)} importable file(s) in {directory_path}")
    return hashes
