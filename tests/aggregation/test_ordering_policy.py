"""
Tests for OrderingPolicy
"""

from exception_audit.aggregation import DEFAULT_ORDERING, OrderingPolicy
from exception_audit.models.exception_record import ExceptionRecord


class TestOrderingPolicy:

    def test_line_numbers_compare_numerically(self):
        records = [
            ExceptionRecord("p", "F.java", "E", "()", 10),
            ExceptionRecord("p", "F.java", "E", "()", 9),
            ExceptionRecord("p", "F.java", "E", "()", 0),
        ]

        assert [r.line_number for r in DEFAULT_ORDERING.sort_records(records)] == [0, 9, 10]

    def test_names_compare_lexically(self):
        records = [
            ExceptionRecord("b", "A.java", "E", "()", 1),
            ExceptionRecord("a", "b.java", "E", "()", 1),
            ExceptionRecord("a", "B.java", "E", "()", 1),
        ]

        assert [(r.project_name, r.file_name) for r in DEFAULT_ORDERING.sort_records(records)] == [
            ("a", "B.java"),
            ("a", "b.java"),
            ("b", "A.java"),
        ]

    def test_unique_texts_drops_blank_and_none(self):
        policy = OrderingPolicy()

        assert policy.unique_texts(["(x)", "", "  ", None, "\t", "(x)", "()"]) == ["()", "(x)"]

    def test_unique_texts_exact_equality(self):
        assert OrderingPolicy().unique_texts(["(a)", "(a) ", "(A)"]) == ["(A)", "(a)", "(a) "]
