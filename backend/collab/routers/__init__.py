"""
collab.routers package

Each module exposes one `router`; main.py includes them:

    from .routers import questions_router
"""

from .questions import router as questions_router

__all__ = ["questions_router"]
