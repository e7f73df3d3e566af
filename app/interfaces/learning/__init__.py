"""FastAPI router, schemas and dependency wiring for the learning context."""
