"""
notekeeper.

Note management service: FastAPI endpoints over a single relational table.

- api/: HTTP endpoints (notes, health)
- core/: configuration, logging, storage gateway, error handling
- models/: SQLAlchemy models
- repositories/: data access
- services/: business rules
- schemas/: request and response schemas
"""

__version__ = "0.1.0"
