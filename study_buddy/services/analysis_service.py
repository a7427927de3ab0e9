"""
Analysis Service for quick sentence feedback.

This service looks at a single learner sentence and provides:
- A list of rule-based issues (capitalization, punctuation, spacing, tense)
- A bulleted feedback message, or a "looks good" message
- A lightly rewritten version of the sentence for supportive replies
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from study_buddy.content.lessons import (
    EMPTY_SENTENCE_ENCOURAGEMENT,
    LOOKS_GOOD,
    QUICK_FIXES_HEADER,
    SHORT_INPUT_ENCOURAGEMENT,
)

TERMINAL_PUNCTUATION = (".", "!", "?")
MIN_REWRITE_LENGTH = 4

_FIRST_TOKEN = re.compile(r"\S*")
_WORD = re.compile(r"\w+(?:['’]\w+)*")


def capitalize_words(text: str) -> str:
    """Capitalize every word in text; apostrophes stay inside a word, hyphens split words."""
    return _WORD.sub(lambda match: match.group(0).capitalize(), text)


@dataclass
class SentenceIssue:
    """A single issue found in a sentence."""

    rule: str
    message: str


@dataclass
class SentenceAssessment:
    """Complete feedback for one sentence."""

    issues: List[SentenceIssue] = field(default_factory=list)

    @property
    def looks_good(self) -> bool:
        return not self.issues

    def to_text(self) -> str:
        """Render the feedback as the tutor's reply."""
        if self.looks_good:
            return LOOKS_GOOD
        bullet_list = "\n".join(f"• {issue.message}" for issue in self.issues)
        return f"{QUICK_FIXES_HEADER}\n{bullet_list}"


class AnalysisService:
    """
    Service for checking learner sentences.

    Rules run in a fixed order, so the feedback always lists issues the same
    way for the same sentence:
    1. Capitalization of the first word
    2. Ending punctuation
    3. Double spaces
    4. Present tense after 'yesterday'
    5. 'i am wanting' instead of 'I want'
    """

    def assess_sentence(self, sentence: str) -> SentenceAssessment:
        """
        Check a sentence against the feedback rules.

        Args:
            sentence: The learner's sentence, used as given

        Returns:
            SentenceAssessment listing every issue found, in rule order
        """
        assessment = SentenceAssessment()
        issues = assessment.issues

        if sentence and not sentence[0].isupper():
            first_word = _FIRST_TOKEN.match(sentence).group(0)
            issues.append(
                SentenceIssue(
                    rule="capitalization",
                    message=f"Capitalize the first word: {first_word} → {capitalize_words(first_word)}",
                )
            )

        if not sentence.endswith(TERMINAL_PUNCTUATION):
            issues.append(
                SentenceIssue(
                    rule="punctuation",
                    message="Add ending punctuation to show sentence completion (., !, or ?).",
                )
            )

        if "  " in sentence:
            issues.append(
                SentenceIssue(
                    rule="spacing",
                    message="Reduce extra spaces so the sentence reads smoothly.",
                )
            )

        lower = sentence.lower()
        if "yesterday" in lower and " go " in lower:
            issues.append(
                SentenceIssue(
                    rule="past_tense",
                    message="Use the simple past after time markers like 'yesterday': try 'went'.",
                )
            )

        if "i am wanting" in lower:
            issues.append(
                SentenceIssue(
                    rule="stative_verb",
                    message="Use 'want' instead of 'am wanting' for states: 'I want'.",
                )
            )

        logger.debug(
            f"Assessed sentence ({len(sentence)} chars): "
            f"{[issue.rule for issue in issues] or 'no issues'}"
        )
        return assessment

    def assess_sentence_quality(self, sentence: str) -> str:
        """Check a sentence and return the feedback text."""
        return self.assess_sentence(sentence).to_text()

    def rewrite_sentence(self, sentence: str) -> str:
        """
        Suggest a more natural version of a sentence.

        Ensures ending punctuation, capitalizes the first letter and fixes two
        common learner patterns. Very short inputs get an encouragement
        instead of a rewrite.

        Args:
            sentence: The learner's sentence

        Returns:
            The suggested sentence, or an encouragement message
        """
        trimmed = sentence.strip()
        if not trimmed:
            return EMPTY_SENTENCE_ENCOURAGEMENT

        if len(trimmed) < MIN_REWRITE_LENGTH:
            return SHORT_INPUT_ENCOURAGEMENT

        suggestion = trimmed
        if not suggestion.endswith(TERMINAL_PUNCTUATION):
            suggestion += "."

        suggestion = suggestion[0].upper() + suggestion[1:]

        lower = suggestion.lower()
        if lower.startswith("i want learn"):
            suggestion = suggestion.replace("I want learn", "I want to learn")

        lower = suggestion.lower()
        if lower.startswith("i go") and "yesterday" in lower:
            suggestion = suggestion.replace("I go", "I went")

        return suggestion


# Global service instance (singleton pattern)
_analysis_service: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create the global analysis service instance."""
    global _analysis_service
    if _analysis_service is None:
        _analysis_service = AnalysisService()
    return _analysis_service


def assess_sentence_quality(sentence: str) -> str:
    """
    Check a sentence and return the tutor's feedback text.

    Args:
        sentence: The learner's sentence

    Returns:
        "Looks good" text when nothing is flagged, otherwise a bulleted list
    """
    return get_analysis_service().assess_sentence_quality(sentence)
