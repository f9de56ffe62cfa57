"""Shared test fixtures for planspec."""

import pytest

from planspec.config import ProjectConfig
from planspec.specblock import SPECS_END, SPECS_START


class MemoryStore:
    """In-memory DocumentStore with optional hooks around writes."""

    def __init__(self, documents=None):
        self.documents = dict(documents or {})
        self.writes = 0
        self.after_write = None

    def read_text(self, path):
        return self.documents.get(str(path))

    def write_text(self, path, text):
        self.documents[str(path)] = text
        self.writes += 1
        if self.after_write:
            self.after_write(str(path), text)
        return len(text.encode("utf-8"))


@pytest.fixture
def memory_store():
    return MemoryStore


@pytest.fixture
def empty_plan():
    return f"# Plan\n\n## Required Specs\n{SPECS_START}\n{SPECS_END}\n\n## Notes\nkeep me\n"


@pytest.fixture
def project(tmp_path):
    return ProjectConfig(root=tmp_path)
