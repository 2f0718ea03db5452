"""Pytest configuration and fixtures for ng-explorer tests."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Generator

# Keep a developer's ~/.ng-explorer/config.toml out of the test run
os.environ["NG_EXPLORER_HOME"] = tempfile.mkdtemp(prefix="ng-explorer-home-")
os.environ.pop("NG_EXPLORER_DOC_PATH", None)

import pytest

from ng_explorer.loader import DocumentationLoader
from ng_explorer.searcher import Searcher


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_doc_path() -> Path:
    """Path to the sample Compodoc documentation.json."""
    return Path(__file__).parent / "fixtures" / "documentation.json"


@pytest.fixture
def sample_payload(sample_doc_path: Path) -> Dict[str, Any]:
    return json.loads(sample_doc_path.read_text(encoding="utf-8"))


@pytest.fixture
def sample_loader(sample_doc_path: Path) -> DocumentationLoader:
    return DocumentationLoader(sample_doc_path)


@pytest.fixture
def sample_searcher(sample_loader: DocumentationLoader) -> Searcher:
    return Searcher(sample_loader)


@pytest.fixture
def make_searcher():
    """Build a Searcher over an in-memory documentation payload."""
    def _make(payload: Dict[str, Any]) -> Searcher:
        return Searcher(DocumentationLoader.from_dict(payload))
    return _make
