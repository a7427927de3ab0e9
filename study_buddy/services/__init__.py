"""
Services module for the Study Buddy tutor.

This module provides the core tutor services:
- AnalysisService: Rule-based sentence feedback and rewrites
- TutorDialogueEngine: Keyword dispatch and the practice-question flow
"""

from .analysis_service import AnalysisService, assess_sentence_quality
from .dialogue_service import DialogueSession, Route, TutorDialogueEngine

__all__ = [
    "AnalysisService",
    "DialogueSession",
    "Route",
    "TutorDialogueEngine",
    "assess_sentence_quality",
]
