"""
Study Buddy

A rule-based console tutor for English learners featuring:
- Study tips and vocabulary lookups
- Grammar topic explanations
- Quick sentence feedback
- A stateful practice-question flow
"""

__version__ = "0.1.0"
__app_name__ = "study-buddy"
