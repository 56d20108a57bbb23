"""In-memory todo API built on FastAPI."""
