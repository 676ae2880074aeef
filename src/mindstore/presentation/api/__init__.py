"""FastAPI presentation layer for the MindStore admin backend."""
