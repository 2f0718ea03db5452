"""Tests for the documentation loader and its cache."""

from pathlib import Path

import pytest

from ng_explorer.loader import (
    DocumentationLoader,
    DocumentationLoadError,
    DocumentationNotFoundError,
    DocumentationParseError,
)


def test_load_sample(sample_loader: DocumentationLoader):
    """Test loading the sample documentation."""
    doc = sample_loader.load()

    assert len(doc.components) == 5
    assert doc.classes[0].name == "User"


def test_load_is_cached(temp_dir: Path, sample_doc_path: Path):
    """Test the file is read once and later calls reuse the result."""
    doc_file = temp_dir / "documentation.json"
    doc_file.write_text(sample_doc_path.read_text(encoding="utf-8"), encoding="utf-8")
    loader = DocumentationLoader(doc_file)

    first = loader.load()
    doc_file.unlink()

    assert loader.load() is first


def test_clear_cache_forces_reload(temp_dir: Path):
    """Test clear_cache makes the next load hit the disk again."""
    doc_file = temp_dir / "documentation.json"
    doc_file.write_text('{"classes": [{"name": "A"}]}', encoding="utf-8")
    loader = DocumentationLoader(doc_file)
    loader.load()

    doc_file.write_text('{"classes": [{"name": "A"}, {"name": "B"}]}', encoding="utf-8")
    assert len(loader.load().classes) == 1

    loader.clear_cache()
    assert len(loader.load().classes) == 2


def test_missing_file(temp_dir: Path):
    """Test a missing document explains how to regenerate it."""
    loader = DocumentationLoader(temp_dir / "missing.json")

    with pytest.raises(DocumentationNotFoundError) as excinfo:
        loader.load()

    message = str(excinfo.value)
    assert "not found" in message
    assert "compodoc" in message


def test_invalid_json(temp_dir: Path):
    """Test unparsable JSON reports a corruption hint."""
    doc_file = temp_dir / "documentation.json"
    doc_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(DocumentationParseError) as excinfo:
        DocumentationLoader(doc_file).load()

    assert "corrupted" in str(excinfo.value)


def test_non_object_document(temp_dir: Path):
    """Test a JSON array at the top level is a load error."""
    doc_file = temp_dir / "documentation.json"
    doc_file.write_text("[]", encoding="utf-8")

    with pytest.raises(DocumentationLoadError):
        DocumentationLoader(doc_file).load()


def test_directory_instead_of_file(temp_dir: Path):
    """Test other read failures surface as generic load errors."""
    with pytest.raises(DocumentationLoadError):
        DocumentationLoader(temp_dir).load()


def test_relative_path_resolved_against_cwd(temp_dir: Path, monkeypatch):
    """Test relative paths are resolved from the working directory."""
    monkeypatch.chdir(temp_dir)
    loader = DocumentationLoader("documentation.json")

    assert loader.doc_path == (temp_dir / "documentation.json").resolve()


def test_from_dict_prepopulates_cache():
    """Test in-memory loaders never touch the filesystem."""
    loader = DocumentationLoader.from_dict({"pipes": [{"name": "UpperPipe"}]})

    assert loader.load().pipes[0].name == "UpperPipe"
