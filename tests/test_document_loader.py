# tests/test_document_loader.py

import hashlib

import pytest
from docindex.infrastructure.document_loader import TextFileLoader
from docindex.infrastructure.file_hasher import (
    compute_directory_hashes,
    compute_file_hash,
    compute_text_hash,
)


@pytest.fixture
def loader() -> TextFileLoader:
    return TextFileLoader()


def test_load_file_preserves_content(loader, tmp_path):
    content = "Line 1\nLine 2  with  spaces\n\n\nالسلام عليكم"
    file_path = tmp_path / "doc.txt"
    file_path.write_bytes(content.encode("utf-8"))

    assert loader.load_file(file_path) == content


def test_load_file_ignores_undecodable_bytes(loader, tmp_path):
    file_path = tmp_path / "broken.txt"
    file_path.write_bytes(b"ok \xff\xfe done")

    assert loader.load_file(file_path) == "ok  done"


def test_unsupported_suffix_returns_none(loader, tmp_path):
    file_path = tmp_path / "data.csv"
    file_path.write_text("a,b", encoding="utf-8")

    assert loader.load_file(file_path) is None


def test_missing_file_raises(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load_file(tmp_path / "missing.txt")


def test_hashes(tmp_path):
    (tmp_path / "a.txt").write_text("alpha", encoding="utf-8")
    (tmp_path / "skip.pdf").write_bytes(b"%PDF")

    expected = hashlib.sha256(b"alpha").hexdigest()

    assert compute_text_hash("alpha") == expected
    assert compute_file_hash(str(tmp_path / "a.txt")) == expected
    assert compute_directory_hashes(str(tmp_path)) == {"a.txt": expected}


def test_line_endings_are_kept(loader, tmp_path):
    file_path = tmp_path / "crlf.txt"
    file_path.write_bytes(b"one\r\ntwo\rthree\n")

    assert loader.load_file(file_path) == "one\r\ntwo\rthree\n"


def test_directory_hashes_filter_and_sort(tmp_path):
    (tmp_path / "b.md").write_text("b", encoding="utf-8")
    (tmp_path / "a.TXT").write_text("a", encoding="utf-8")
    (tmp_path / "c.pdf").write_bytes(b"%PDF")

    assert list(compute_directory_hashes(str(tmp_path))) == ["a.TXT", "b.md"]


def test_directory_hashes_key_by_relative_path(tmp_path):
    for folder, text in [("a", "alpha text"), ("b", "beta text")]:
        (tmp_path / folder).mkdir()
        (tmp_path / folder / "notes.txt").write_text(text, encoding="utf-8")

    hashes = compute_directory_hashes(str(tmp_path))

    assert hashes == {
        "a/notes.txt": compute_text_hash("alpha text"),
        "b/notes.txt": compute_text_hash("beta text"),
    }


def test_directory_hashes_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        compute_directory_hashes(str(tmp_path / "missing"))
