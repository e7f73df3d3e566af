"""FastAPI router, schemas and dependency wiring for the advisor context."""
