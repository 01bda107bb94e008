"""
Global test configuration and fixtures for exception analysis tests.

Provides Java source samples, a parser fixture and a helper that lays out
project trees under tmp_path.
"""

from pathlib import Path
from textwrap import dedent
from typing import Callable

import pytest

from exception_audit.models.exception_record import ExceptionRecord
from exception_audit.parser import tree_sitter_parser
from exception_audit.parser.extractor import JavaThrowExtractor


@pytest.fixture
def java_extractor() -> JavaThrowExtractor:
    """Create a JavaThrowExtractor instance."""
    return JavaThrowExtractor()


@pytest.fixture
def parse_java() -> Callable[[str], tuple]:
    """Parse a Java snippet and return (tree, content)."""
    def _parse(source: str):
        content = dedent(source).encode("utf-8")
        return tree_sitter_parser.parse_bytes(content, "java"), content
    return _parse


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Write {relative_path: source} into a fresh workspace root and return it."""
    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "workspace"
        root.mkdir(exist_ok=True)
        for relative_path, source in files.items():
            path = root / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dedent(source), encoding="utf-8")
        return root
    return _make


@pytest.fixture
def valid_service_source() -> str:
    """A Java class with two construction throws and one rethrow."""
    return """\
        package com.example;

        public class OrderService {
            public void place(Order order) {
                if (order == null) {
                    throw new IllegalArgumentException("order is required");
                }
                try {
                    repository.save(order);
                } catch (RepositoryException cachedError) {
                    throw cachedError;
                }
                throw new UnsupportedOperationException();
            }
        }
        """


@pytest.fixture
def broken_source() -> str:
    """Java source that tree-sitter cannot parse without errors."""
    return """\
        public class Broken {
            void run( {
                throw new IllegalStateException("never seen");
        """


@pytest.fixture
def sample_records() -> list[ExceptionRecord]:
    """Unsorted records across two projects, with a duplicate text."""
    return [
        ExceptionRecord("beta", "Zeta.java", "IllegalStateException", '("late")', 40),
        ExceptionRecord("alpha", "B.java", "IllegalArgumentException", '("bad")', 12),
        ExceptionRecord("alpha", "A.java", "RuntimeException", "()", 100),
        ExceptionRecord("alpha", "A.java", "IOException", '("bad")', 9),
        ExceptionRecord("beta", "Zeta.java", "Unknown", "cause", 3),
        ExceptionRecord("alpha", "A.java", "Unknown", "   ", 20),
    ]
