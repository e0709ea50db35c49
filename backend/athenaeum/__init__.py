"""
Athenaeum Backend

Content-management backend for biographies, articles, research notes,
glossary terms, dialogue transcripts and a product catalog.

Package Structure:
==================
    athenaeum/
    ├── api/        ← FastAPI application
    ├── shared/     ← Models, repositories, services, schemas
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn athenaeum.api.main:app --reload
"""

__version__ = "1.0.0"
