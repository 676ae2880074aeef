"""MindStore - administrative backend for an e-commerce catalog.

Layers:
- domain: people, roles, products, categories, ratings
- application: resolver, request validation, admin use cases
- infrastructure: SQLAlchemy persistence, password hashing, tokens
- presentation: FastAPI admin API and Typer CLI
"""

__version__ = "0.1.0"
