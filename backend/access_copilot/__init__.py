"""Patient Access co-pilot: LLM-backed analysis of patient access call scenarios."""

__version__ = "1.0.0"
