"""
Tests for WorkspaceScanner
"""

import pytest

from exception_audit.scanning import ProjectScanner, WorkspaceScanner

SOURCE = """\
    class {name} {{
        void a() {{ throw new IllegalStateException("{name}-a"); }}
        void b() {{ throw new IllegalArgumentException("{name}-b"); }}
    }}
    """


@pytest.fixture
def workspace(make_tree):
    return make_tree({
        "orders/src/Order.java": SOURCE.format(name="Order"),
        "billing/src/Invoice.java": SOURCE.format(name="Invoice"),
        "empty/README.md": "nothing here",
        "loose-file.java": SOURCE.format(name="Loose"),
    })


class TestWorkspaceScanner:

    def test_projects_are_immediate_subdirectories(self, workspace):
        result = WorkspaceScanner().scan(workspace)

        assert result.projects == ["billing", "empty", "orders"]
        assert {r.project_name for r in result.records} == {"billing", "orders"}
        assert result.stats.total_projects == 3

    def test_records_merged_in_project_order(self, workspace):
        result = WorkspaceScanner().scan(workspace)

        assert [r.project_name for r in result.records] == ["billing", "billing", "orders", "orders"]

    def test_parallel_scan_matches_sequential(self, workspace):
        sequential = WorkspaceScanner(max_workers=1).scan(workspace)
        parallel = WorkspaceScanner(ProjectScanner(), max_workers=4).scan(workspace)

        assert parallel.records == sequential.records
        assert parallel.projects == sequential.projects
        assert parallel.stats.total_records == sequential.stats.total_records == 4

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(OSError):
            WorkspaceScanner().scan(tmp_path / "nope")

    def test_project_named_after_excluded_segment_is_skipped(self, make_tree):
        root = make_tree({
            "test/A.java": SOURCE.format(name="A"),
            "target/B.java": SOURCE.format(name="B"),
            "orders/src/Order.java": SOURCE.format(name="Order"),
        })

        result = WorkspaceScanner().scan(root)

        assert result.projects == ["orders", "target", "test"]
        assert {r.project_name for r in result.records} == {"orders"}
        assert result.stats.failed_projects == 0
