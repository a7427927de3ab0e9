from study_buddy.content.lessons import LOOKS_GOOD, SHORT_INPUT_ENCOURAGEMENT
from study_buddy.services.analysis_service import (
    AnalysisService,
    assess_sentence_quality,
    capitalize_words,
    get_analysis_service,
)


def test_lowercase_present_tense_sentence_flags_capital_and_past_tense() -> None:
    feedback = assess_sentence_quality("i go to gym yesterday")
    assert feedback.startswith("Here are some quick fixes:")
    assert "Capitalize" in feedback
    assert "i → I" in feedback
    assert "past" in feedback


def test_clean_sentence_looks_good() -> None:
    assert assess_sentence_quality("I went to the gym.") == LOOKS_GOOD


def test_issues_are_listed_in_rule_order() -> None:
    assessment = AnalysisService().assess_sentence("i am wanting  a coffee")
    assert [issue.rule for issue in assessment.issues] == [
        "capitalization",
        "punctuation",
        "spacing",
        "stative_verb",
    ]

    assessment = AnalysisService().assess_sentence("yesterday we go  home")
    assert [issue.rule for issue in assessment.issues] == [
        "capitalization",
        "punctuation",
        "spacing",
        "past_tense",
    ]


def test_feedback_is_bulleted_one_issue_per_line() -> None:
    feedback = assess_sentence_quality("hello there")
    lines = feedback.splitlines()
    assert lines[0] == "Here are some quick fixes:"
    assert lines[1] == "• Capitalize the first word: hello → Hello"
    assert lines[2].startswith("• Add ending punctuation")
    assert len(lines) == 3


def test_capitalization_uses_first_whitespace_token() -> None:
    feedback = assess_sentence_quality("i'm ready now.")
    assert "i'm → I'm" in feedback


def test_question_and_exclamation_marks_count_as_ending_punctuation() -> None:
    assert assess_sentence_quality("Are you ready?") == LOOKS_GOOD
    assert assess_sentence_quality("What a day!") == LOOKS_GOOD


def test_empty_sentence_only_needs_punctuation() -> None:
    assessment = AnalysisService().assess_sentence("")
    assert [issue.rule for issue in assessment.issues] == ["punctuation"]


def test_capitalization_splits_hyphenated_words() -> None:
    feedback = assess_sentence_quality("hello-world is here.")
    assert "Capitalize the first word: hello-world → Hello-World" in feedback


def test_capitalize_words_keeps_apostrophes_inside_words() -> None:
    assert capitalize_words("i'm") == "I'm"
    assert capitalize_words("don’t-stop") == "Don’t-Stop"


def test_rewrite_adds_punctuation_and_capital() -> None:
    service = AnalysisService()
    assert service.rewrite_sentence("  my cat likes fish ") == "My cat likes fish."
    assert service.rewrite_sentence("is it raining?") == "Is it raining?"


def test_rewrite_fixes_common_learner_patterns() -> None:
    service = AnalysisService()
    assert service.rewrite_sentence("i want learn english") == "I want to learn english."
    assert service.rewrite_sentence("i go to school yesterday") == "I went to school yesterday."
    assert service.rewrite_sentence("i go to school today") == "I go to school today."


def test_rewrite_short_input_gets_encouragement() -> None:
    assert AnalysisService().rewrite_sentence("hey") == SHORT_INPUT_ENCOURAGEMENT


def test_global_service_is_shared() -> None:
    assert get_analysis_service() is get_analysis_service()
