"""HTTP surface for vedasweph (FastAPI)."""
