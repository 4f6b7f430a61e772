"""Property Brief: multi-source property data aggregation with AI summaries."""

__version__ = "0.1.0"
