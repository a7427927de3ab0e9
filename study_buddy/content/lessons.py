"""
Lesson content for the Study Buddy English tutor.

This module contains all static content used by the dialogue engine:
1. Study tips, vocabulary, grammar notes and practice questions
2. Fixed tutor messages (greeting, help, farewell, prompts)
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Tuple


@dataclass(frozen=True)
class LessonTip:
    """A short study idea with an example."""

    title: str
    detail: str
    example: str


@dataclass(frozen=True)
class VocabularyEntry:
    """A vocabulary word with meaning, example and synonyms."""

    word: str
    meaning: str
    example: str
    synonyms: Tuple[str, ...] = ()

    def matches(self, term: str) -> bool:
        """Check if a lowercased term is this word or one of its synonyms."""
        if term == self.word.lower():
            return True
        return any(term == synonym.lower() for synonym in self.synonyms)


@dataclass(frozen=True)
class PracticeQuestion:
    """A practice prompt with the answer we expect and a hint."""

    prompt: str
    expected_answer: str
    hint: str


@dataclass(frozen=True)
class LessonCatalog:
    """
    All lesson content available to a tutor.

    Grammar lessons are an ordered tuple of (topic, explanation) pairs. When
    an input mentions several topics, the earliest topic in this order wins.
    """

    tips: Tuple[LessonTip, ...]
    vocabulary: Tuple[VocabularyEntry, ...]
    grammar_lessons: Tuple[Tuple[str, str], ...]
    practice_questions: Tuple[PracticeQuestion, ...]
    openers: Tuple[str, ...] = field(default=())

    def __post_init__(self):
        if not self.tips:
            raise ValueError("Lesson catalog needs at least one tip")
        if not self.vocabulary:
            raise ValueError("Lesson catalog needs at least one vocabulary entry")
        if not self.practice_questions:
            raise ValueError("Lesson catalog needs at least one practice question")
        if not self.openers:
            raise ValueError("Lesson catalog needs at least one opener phrase")

        topics = [topic.lower() for topic, _ in self.grammar_lessons]
        duplicates = sorted({topic for topic in topics if topics.count(topic) > 1})
        if duplicates:
            raise ValueError(f"Duplicate grammar topics: {', '.join(duplicates)}")

    def find_vocabulary(self, term: str) -> Optional[VocabularyEntry]:
        """Return the first entry whose word or synonym equals the term."""
        term = term.lower()
        for entry in self.vocabulary:
            if entry.matches(term):
                return entry
        return None

    def find_grammar_lesson(self, text: str) -> Optional[Tuple[str, str]]:
        """Return the first (topic, explanation) whose topic appears in text."""
        text = text.lower()
        for topic, explanation in self.grammar_lessons:
            if topic.lower() in text:
                return topic, explanation
        return None


# ===========================================
# Fixed tutor messages
# ===========================================
GREETING = (
    "Hello! I’m your English study buddy. Ask me to explain grammar, check a "
    "sentence, or say 'quiz' for practice. Type 'help' to see options or "
    "'exit' to finish."
)

HELP_MESSAGE = (
    "Commands: 'quiz' for a question, 'tip' for a study idea, "
    "'check: <sentence>' for feedback, or ask about grammar topics like "
    "conditionals or articles."
)

FAREWELL = "Great work today. Keep practicing, and come back anytime!"

EMPTY_INPUT_PROMPT = (
    "Try telling me what you want: grammar help, a vocabulary word, or a "
    "practice question."
)

GOODBYE = "Goodbye!"

PRACTICE_SUCCESS = "Great job! That sounds natural. Want another quiz?"

PRACTICE_RETRY = (
    "Not quite. Check tense and word order. Type 'hint' for help or 'skip' "
    "to see an example."
)

SHORT_INPUT_ENCOURAGEMENT = (
    "Can you share a longer idea? For example: 'I want to improve my "
    "pronunciation.'"
)

EMPTY_SENTENCE_ENCOURAGEMENT = "Let's build a sentence together about your day."

LOOKS_GOOD = "Looks good! Try reading it aloud to check rhythm and stress."

QUICK_FIXES_HEADER = "Here are some quick fixes:"


# ===========================================
# Lesson data
# ===========================================
TIPS = (
    LessonTip(
        title="Shadow native speakers",
        detail=(
            "Listen to a short clip, then repeat it aloud. Focus on intonation "
            "and chunking phrases rather than individual words."
        ),
        example="Try shadowing the phrase: 'I didn’t catch that—could you say it again?'",
    ),
    LessonTip(
        title="Upgrade simple verbs",
        detail=(
            "Replace basic verbs like 'get' or 'do' with precise alternatives "
            "to sound more natural."
        ),
        example=(
            "Instead of 'get better', try 'improve'. Instead of 'do exercise', "
            "try 'work out'."
        ),
    ),
    LessonTip(
        title="Use time markers",
        detail=(
            "Words like 'already', 'yet', 'still', and 'just' clarify when "
            "actions happen and pair well with perfect tenses."
        ),
        example="'I’ve already eaten, but I’m still hungry.'",
    ),
)

VOCABULARY = (
    VocabularyEntry(
        word="concise",
        meaning="Expressing something clearly in a few words.",
        example="Your email was concise and easy to follow.",
        synonyms=("brief", "succinct", "to the point"),
    ),
    VocabularyEntry(
        word="nuance",
        meaning="A subtle difference in meaning, sound, or feeling.",
        example="He explained the nuance between 'listen' and 'hear'.",
        synonyms=("subtlety", "shade", "distinction"),
    ),
    VocabularyEntry(
        word="reliable",
        meaning="Consistently good in quality or performance; dependable.",
        example="She is a reliable teammate who meets every deadline.",
        synonyms=("dependable", "trustworthy", "steady"),
    ),
    VocabularyEntry(
        word="curious",
        meaning="Eager to learn or know something.",
        example="Stay curious and ask why native speakers use certain phrases.",
        synonyms=("inquisitive", "interested", "eager"),
    ),
)

GRAMMAR_LESSONS = (
    (
        "present perfect",
        "Use it to connect past actions with the present. Structure: "
        "have/has + past participle (e.g., 'I have visited London twice.').",
    ),
    (
        "conditionals",
        "Zero: facts (If you heat ice, it melts). First: likely future (If it "
        "rains, we’ll stay in). Second: unreal present (If I had time, I would "
        "travel). Third: unreal past (If I had studied, I would have passed).",
    ),
    (
        "phrasal verbs",
        "Combine verbs with particles (look up, run into). The meaning often "
        "changes, so learn them in context with an object (e.g., 'look up a "
        "word').",
    ),
    (
        "articles",
        "Use 'a/an' for non-specific singular nouns, 'the' for specific items "
        "or when both speaker and listener know the reference. Zero article "
        "with plural or uncountable nouns when speaking generally.",
    ),
    (
        "prepositions",
        "'In' for months/years/long periods, 'on' for days/dates, 'at' for "
        "precise times/locations. Check collocations: 'interested in', 'good "
        "at'.",
    ),
)

PRACTICE_QUESTIONS = (
    PracticeQuestion(
        prompt="Rewrite in natural English: 'I go to gym yesterday.'",
        expected_answer="I went to the gym yesterday.",
        hint="Use past tense and include an article before 'gym'.",
    ),
    PracticeQuestion(
        prompt="Respond politely: Someone says 'Could you help me move this table?'",
        expected_answer="Sure, I’d be happy to help.",
        hint="Start with a friendly confirmation and keep it short.",
    ),
    PracticeQuestion(
        prompt="Choose the best option: 'I have lived / lived in Paris since 2019.'",
        expected_answer="I have lived in Paris since 2019.",
        hint="Use the perfect tense to connect past and present.",
    ),
)

OPENERS = (
    "Nice question! Here's a more natural way to say it:",
    "Let's polish that sentence:",
    "Great effort! Try this phrasing:",
    "To sound more fluent, you could say:",
)


@lru_cache()
def get_default_catalog() -> LessonCatalog:
    """
    Get the built-in lesson catalog.

    Returns:
        The cached LessonCatalog built from this module's lesson data
    """
    return LessonCatalog(
        tips=TIPS,
        vocabulary=VOCABULARY,
        grammar_lessons=GRAMMAR_LESSONS,
        practice_questions=PRACTICE_QUESTIONS,
        openers=OPENERS,
    )


def format_tip(tip: LessonTip) -> str:
    """Render a study tip as one line."""
    return f"Tip — {tip.title}: {tip.detail} Example: {tip.example}"


def format_vocabulary_entry(entry: VocabularyEntry) -> str:
    """Render a vocabulary entry with its synonyms."""
    synonym_list = ", ".join(entry.synonyms)
    return (
        f"{entry.word.capitalize()}: {entry.meaning} "
        f"Example: {entry.example} Synonyms: {synonym_list}."
    )


def format_grammar_lesson(topic: str, explanation: str) -> str:
    """Render a grammar note under its title-cased topic."""
    return f"Grammar — {topic.title()}: {explanation}"


def format_practice_prompt(question: PracticeQuestion) -> str:
    """Render a practice question with the answer instructions."""
    return f"Practice: {question.prompt} (Type your answer, or 'hint'/'skip')"


def format_hint(question: PracticeQuestion) -> str:
    """Render the hint for a queued question."""
    return f"Hint: {question.hint}"


def format_model_answer(question: PracticeQuestion) -> str:
    """Render the expected answer after a skip."""
    return f"No problem. A natural answer is: {question.expected_answer}"
