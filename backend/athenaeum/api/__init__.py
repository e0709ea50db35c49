"""
API Module

FastAPI surface over the content core.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← Database, admin token, pagination, services
    ├── handlers/         ← Route handlers (one router per content type)
    └── middleware/       ← Exception handlers

Usage:
======
    uvicorn athenaeum.api.main:app --reload
"""
