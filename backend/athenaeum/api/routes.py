"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live   → Health check endpoints
    /biographies             → Biography entries
    /biography-annexes       → Biography annexes
    /articles                → Articles
    /research                → Research notes
    /glossary                → Glossary terms
    /dialogues               → Dialogue transcripts
    /catalog                 → Catalog items

Usage:
======
    from athenaeum.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from athenaeum.api.handlers import (
    article_handler,
    biography_handler,
    catalog_item_handler,
    dialogue_transcript_handler,
    glossary_term_handler,
    health_handler,
    research_note_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(health_handler.router, tags=["Health"])

    app.include_router(biography_handler.router, prefix="/biographies", tags=["Biographies"])
    app.include_router(
        biography_handler.annex_router,
        prefix="/biography-annexes",
        tags=["Biography Annexes"],
    )
    app.include_router(article_handler.router, prefix="/articles", tags=["Articles"])
    app.include_router(research_note_handler.router, prefix="/research", tags=["Research"])
    app.include_router(glossary_term_handler.router, prefix="/glossary", tags=["Glossary"])
    app.include_router(
        dialogue_transcript_handler.router,
        prefix="/dialogues",
        tags=["Dialogues"],
    )
    app.include_router(catalog_item_handler.router, prefix="/catalog", tags=["Catalog"])
