"""FastAPI router, schemas and dependency wiring for the market context."""
