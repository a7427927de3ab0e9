"""
Content module for the Study Buddy English tutor.

Contains static lesson content:
- Study tips, vocabulary and grammar notes
- Practice questions
- Fixed tutor messages and their formatters
"""

from .lessons import (
    LessonCatalog,
    LessonTip,
    PracticeQuestion,
    VocabularyEntry,
    get_default_catalog,
)

__all__ = [
    "LessonCatalog",
    "LessonTip",
    "PracticeQuestion",
    "VocabularyEntry",
    "get_default_catalog",
]
