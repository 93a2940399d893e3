"""chunkwise - document store with sentence-aware chunking and vector search."""

__version__ = "0.1.0"
