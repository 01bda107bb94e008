from exception_audit.aggregation.engine import AnalysisAggregates, aggregate
from exception_audit.aggregation.ordering import DEFAULT_ORDERING, OrderingPolicy

__all__ = [
    "AnalysisAggregates",
    "aggregate",
    "DEFAULT_ORDERING",
    "OrderingPolicy",
]
