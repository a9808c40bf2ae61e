"""
collab.models package

Re-export the response schemas so imports like:

    from collab.models import Question

work consistently.
"""

from .schemas import Health, Question, Version

__all__ = [
    "Health",
    "Question",
    "Version",
]
