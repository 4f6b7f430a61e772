"""Multi-source property aggregation."""

from propbrief.aggregation.address import parse_address
from propbrief.aggregation.aggregator import PropertyAggregator, compute_data_quality
from propbrief.aggregation.models import AggregatedRecord, DataQuality, PropertyBrief
from propbrief.aggregation.store import PropertyStore

__all__ = [
    "AggregatedRecord",
    "DataQuality",
    "PropertyAggregator",
    "PropertyBrief",
    "PropertyStore",
    "compute_data_quality",
    "parse_address",
]
