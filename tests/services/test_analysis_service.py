"""
Tests for ExceptionAnalysisService, end to end over a temporary workspace.
"""

from datetime import datetime

import pytest

from exception_audit.core.config import Settings
from exception_audit.parser.extractor import UNKNOWN_EXCEPTION_TYPE, ThrowPolicy
from exception_audit.reporting import CatalogueRenderer, HtmlReportRenderer, TemplateReportRenderer
from exception_audit.services import ExceptionAnalysisService

GENERATED_AT = datetime(2024, 2, 29, 8, 30, 0)


@pytest.fixture
def workspace(make_tree, valid_service_source, broken_source):
    return make_tree({
        "orders/src/main/java/OrderService.java": valid_service_source,
        "orders/src/main/java/Broken.java": broken_source,
        "orders/target/generated/Stub.java": valid_service_source,
        "payments/src/main/java/PaymentGateway.java": """\
            class PaymentGateway {
                void charge(int cents) {
                    if (cents <= 0) throw new IllegalArgumentException("order is required");
                }
            }
            """,
        "docs/README.md": "no code",
    })


class TestExceptionAnalysisService:

    def test_strict_run_writes_report_and_catalogue(self, tmp_path, workspace):
        settings = Settings(output_dir=tmp_path / "reports")

        run = ExceptionAnalysisService(settings).run(workspace, generated_at=GENERATED_AT)

        assert run.write_result.ok
        assert {p.name for p in run.write_result.written} == {
            "exception_analysis_report.html",
            "unique_exception_texts.txt",
        }
        assert [(r.project_name, r.file_name, r.line_number) for r in run.aggregates.records] == [
            ("orders", "OrderService.java", 6),
            ("orders", "OrderService.java", 13),
            ("payments", "PaymentGateway.java", 3),
        ]
        assert run.aggregates.unique_texts == ['("order is required")', "()"]
        assert run.stats.failed_files == 1

    def test_inclusive_run_records_rethrows_and_skips_catalogue(self, tmp_path, workspace):
        settings = Settings(output_dir=tmp_path / "reports", throw_policy=ThrowPolicy.INCLUSIVE)

        run = ExceptionAnalysisService(settings).run(workspace, generated_at=GENERATED_AT)

        unknown = [r for r in run.aggregates.records if r.exception_type == UNKNOWN_EXCEPTION_TYPE]
        assert [(r.exception_text, r.line_number) for r in unknown] == [("cachedError", 11)]
        assert [p.name for p in run.write_result.written] == ["exception_analysis_report.html"]
        assert not (tmp_path / "reports" / "unique_exception_texts.txt").exists()

    def test_all_projects_listed_in_totals(self, tmp_path, workspace):
        run = ExceptionAnalysisService(Settings(output_dir=tmp_path)).run(workspace, GENERATED_AT)

        assert [(t.project_name, t.total_exceptions) for t in run.aggregates.totals] == [
            ("docs", 0),
            ("orders", 2),
            ("payments", 1),
        ]

    def test_repeated_runs_are_identical(self, tmp_path, workspace):
        service = ExceptionAnalysisService(Settings(output_dir=tmp_path / "one"))
        first = service.run(workspace, GENERATED_AT)
        service.settings = Settings(output_dir=tmp_path / "two")
        second = service.run(workspace, GENERATED_AT)

        assert first.aggregates == second.aggregates
        for name in ("exception_analysis_report.html", "unique_exception_texts.txt"):
            assert (tmp_path / "one" / name).read_bytes() == (tmp_path / "two" / name).read_bytes()

    def test_report_template_selects_template_renderer(self, tmp_path, workspace):
        template = tmp_path / "report.html.j2"
        template.write_text("{{ total_exceptions }} throws in {{ total_files }} files\n", encoding="utf-8")
        settings = Settings(output_dir=tmp_path / "reports", report_template=template)
        service = ExceptionAnalysisService(settings)

        renderers = service.build_renderers()
        service.run(workspace, GENERATED_AT)

        assert isinstance(renderers[0], TemplateReportRenderer)
        report = tmp_path / "reports" / "exception_analysis_report.html"
        assert report.read_text(encoding="utf-8") == "3 throws in 2 files\n"

    def test_builtin_renderer_without_template(self):
        renderers = ExceptionAnalysisService(Settings()).build_renderers()

        assert isinstance(renderers[0], HtmlReportRenderer)
        assert isinstance(renderers[1], CatalogueRenderer)
