"""HTTP API: seeded samples and sketch scenes over FastAPI."""
