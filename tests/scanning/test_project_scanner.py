"""
Tests for ProjectScanner

Covers the segment-based exclusion filter, per-file fault isolation and
per-project walk failures.
"""

import logging
from pathlib import PurePosixPath

import pytest

from exception_audit.parser.extractor import ThrowPolicy
from exception_audit.scanning import ProjectScanner
from exception_audit.scanning.project_scanner import has_excluded_segment

THROWING_SOURCE = """\
    class {name} {{
        void run() {{ throw new IllegalStateException("{name}"); }}
    }}
    """


@pytest.fixture
def scanner() -> ProjectScanner:
    return ProjectScanner()


class TestEligibility:

    @pytest.mark.parametrize(
        "relative_path",
        [
            "target/Generated.java",
            "module/target/classes/Generated.java",
            "src/test/java/FooTest.java",
        ],
    )
    def test_excluded_segments(self, scanner, relative_path):
        assert not scanner.is_eligible(PurePosixPath(relative_path))

    @pytest.mark.parametrize(
        "relative_path",
        [
            "testing-utils/Helper.java",
            "latest/Release.java",
            "src/main/java/test.java",
            "src/Target/Upper.java",
        ],
    )
    def test_segment_match_is_exact(self, scanner, relative_path):
        assert scanner.is_eligible(PurePosixPath(relative_path))

    def test_wrong_extension(self, scanner):
        assert not scanner.is_eligible(PurePosixPath("src/Main.kt"))

    def test_has_excluded_segment_only_checks_directories(self):
        assert not has_excluded_segment(PurePosixPath("test"), frozenset({"test"}))
        assert has_excluded_segment(PurePosixPath("a/test/b.java"), frozenset({"test"}))


class TestScan:

    def test_collects_records_from_eligible_files(self, make_tree, scanner):
        root = make_tree({
            "shop/src/main/java/Cart.java": THROWING_SOURCE.format(name="Cart"),
            "shop/testing-utils/Helper.java": THROWING_SOURCE.format(name="Helper"),
            "shop/target/Generated.java": THROWING_SOURCE.format(name="Generated"),
            "shop/src/test/java/CartTest.java": THROWING_SOURCE.format(name="CartTest"),
            "shop/README.md": "# shop",
        })

        result = scanner.scan(root / "shop")

        assert result.project_name == "shop"
        assert sorted(r.file_name for r in result.records) == ["Cart.java", "Helper.java"]
        assert result.stats.scanned_files == 2
        assert result.stats.total_records == 2
        assert result.stats.skipped_files == 1

    def test_unparsable_file_is_isolated(self, make_tree, scanner, broken_source, caplog):
        root = make_tree({
            "shop/A.java": THROWING_SOURCE.format(name="A"),
            "shop/B.java": THROWING_SOURCE.format(name="B"),
            "shop/C.java": THROWING_SOURCE.format(name="C"),
            "shop/Broken.java": broken_source,
        })

        with caplog.at_level(logging.WARNING):
            result = scanner.scan(root / "shop")

        assert [r.file_name for r in result.records] == ["A.java", "B.java", "C.java"]
        assert result.stats.failed_files == 1
        assert result.stats.scanned_files == 3
        assert any("Broken.java" in message for message in caplog.messages)

    def test_walk_failure_yields_no_records(self, tmp_path, scanner, caplog):
        missing = tmp_path / "ghost"

        with caplog.at_level(logging.WARNING):
            result = scanner.scan(missing)

        assert result.records == []
        assert result.stats.failed_projects == 1
        assert any("ghost" in message for message in caplog.messages)

    def test_project_name_override(self, make_tree, scanner):
        root = make_tree({"dir/A.java": THROWING_SOURCE.format(name="A")})

        result = scanner.scan(root / "dir", project_name="Billing")

        assert {r.project_name for r in result.records} == {"Billing"}

    def test_policy_passed_to_extractor(self, make_tree):
        root = make_tree({
            "shop/Rethrow.java": """\
                class Rethrow {
                    void run(RuntimeException e) { throw e; }
                }
                """,
        })

        strict = ProjectScanner(policy=ThrowPolicy.STRICT).scan(root / "shop")
        inclusive = ProjectScanner(policy=ThrowPolicy.INCLUSIVE).scan(root / "shop")

        assert strict.records == []
        assert [r.exception_text for r in inclusive.records] == ["e"]

    def test_file_name_is_base_name_by_default(self, make_tree, scanner):
        root = make_tree({
            "shop/a/Util.java": THROWING_SOURCE.format(name="Util"),
            "shop/b/Util.java": THROWING_SOURCE.format(name="Util"),
        })

        result = scanner.scan(root / "shop")

        assert [r.file_name for r in result.records] == ["Util.java", "Util.java"]

    def test_relative_path_grouping(self, make_tree):
        root = make_tree({
            "shop/a/Util.java": THROWING_SOURCE.format(name="Util"),
            "shop/b/Util.java": THROWING_SOURCE.format(name="Util"),
        })

        result = ProjectScanner(group_by_relative_path=True).scan(root / "shop")

        assert [r.file_name for r in result.records] == ["a/Util.java", "b/Util.java"]

    def test_custom_exclusions(self, make_tree):
        root = make_tree({
            "shop/generated/A.java": THROWING_SOURCE.format(name="A"),
            "shop/test/B.java": THROWING_SOURCE.format(name="B"),
        })

        result = ProjectScanner(excluded_segments=frozenset({"generated"})).scan(root / "shop")

        assert [r.file_name for r in result.records] == ["B.java"]

    def test_excluded_project_directory_has_no_files(self, make_tree, scanner):
        root = make_tree({"test/src/A.java": THROWING_SOURCE.format(name="A")})

        result = scanner.scan(root / "test")

        assert result.records == []
        assert result.stats.total_files == 0
        assert result.stats.failed_projects == 0

    def test_empty_file_contributes_nothing(self, make_tree, scanner, caplog):
        root = make_tree({
            "shop/Empty.java": "",
            "shop/A.java": THROWING_SOURCE.format(name="A"),
        })

        with caplog.at_level(logging.WARNING):
            result = scanner.scan(root / "shop")

        assert [r.file_name for r in result.records] == ["A.java"]
        assert result.stats.scanned_files == 2
        assert result.stats.failed_files == 0
        assert not any("Empty.java" in message for message in caplog.messages)
