"""
Dialogue Service for the rule-based English tutor.

This service turns one line of learner input into one line of tutor text.
Input is matched against an ordered dispatch table; the first rule whose
predicate accepts the input produces the reply:

1. Empty input -> ask the learner to pick a topic
2. 'help' / 'exit' -> command list / farewell
3. Queued practice question -> answer evaluation
4. Quiz request -> next practice question
5. Tip request -> study tip
6. Vocabulary lookup -> definition
7. Sentence check -> rule-based feedback
8. Grammar topic -> explanation
9. Anything else -> supportive rewrite

Session state (queued question, rotation index) lives in a DialogueSession
owned by the caller and passed to every reply() call.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from loguru import logger

from study_buddy.content.lessons import (
    EMPTY_INPUT_PROMPT,
    FAREWELL,
    GREETING,
    HELP_MESSAGE,
    PRACTICE_RETRY,
    PRACTICE_SUCCESS,
    LessonCatalog,
    PracticeQuestion,
    VocabularyEntry,
    format_grammar_lesson,
    format_hint,
    format_model_answer,
    format_practice_prompt,
    format_tip,
    format_vocabulary_entry,
    get_default_catalog,
)
from study_buddy.services.analysis_service import AnalysisService, get_analysis_service

QUIZ_KEYWORDS = ("quiz", "practice", "question")
TIP_KEYWORDS = ("tip", "advice")
CHECK_KEYWORDS = ("check", "correct", "fix")
DEFINITION_FILLERS = ("?", "meaning of", "define", "what does")
TRAILING_DEFINITION_FILLERS = ("mean", "means")


class Route(str, Enum):
    """Which branch of the dialogue produced a reply."""

    EMPTY = "empty"
    HELP = "help"
    EXIT = "exit"
    ANSWER = "answer"
    QUIZ = "quiz"
    TIP = "tip"
    VOCABULARY = "vocabulary"
    CHECK = "check"
    GRAMMAR = "grammar"
    SUPPORTIVE = "supportive"


@dataclass
class DialogueSession:
    """State for one learner's conversation with the tutor."""

    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    queued_question: Optional[PracticeQuestion] = None
    rotation_index: int = 0
    turn_count: int = 0

    @property
    def has_queued_question(self) -> bool:
        return self.queued_question is not None

    def advance_rotation(self) -> int:
        """Return the current rotation index and move to the next one."""
        index = self.rotation_index
        self.rotation_index += 1
        return index

    def record_turn(self) -> None:
        """Count one answered line of input."""
        self.turn_count += 1


@dataclass(frozen=True)
class Turn:
    """One line of learner input, trimmed and lowercased once."""

    text: str
    lower: str

    @classmethod
    def from_input(cls, user_input: str) -> "Turn":
        text = user_input.strip()
        return cls(text=text, lower=text.lower())

    def contains_any(self, keywords: Tuple[str, ...]) -> bool:
        return any(keyword in self.lower for keyword in keywords)


Predicate = Callable[[Turn, DialogueSession], bool]
Handler = Callable[[Turn, DialogueSession], str]


@dataclass(frozen=True)
class DispatchRule:
    """A route with the predicate that selects it and the handler that answers."""

    route: Route
    predicate: Predicate
    handler: Handler


def definition_candidates(lower: str) -> List[str]:
    """
    Extract the terms a learner may be asking to define.

    Filler phrases ("meaning of", "define", "what does", "?") and a trailing
    "mean"/"means" are removed. The final remaining token is the primary
    candidate; the whole remaining phrase follows so multi-word synonyms
    like "to the point" can match too.

    Args:
        lower: Lowercased, trimmed learner input

    Returns:
        Candidate terms in lookup order (empty if nothing is left)
    """
    cleaned = lower
    for filler in DEFINITION_FILLERS:
        cleaned = cleaned.replace(filler, "")

    tokens = cleaned.split()
    if tokens and tokens[-1] in TRAILING_DEFINITION_FILLERS:
        tokens = tokens[:-1]
    if not tokens:
        return []

    candidates = [tokens[-1]]
    phrase = " ".join(tokens)
    if phrase != tokens[-1]:
        candidates.append(phrase)
    return candidates


def _normalize_answer(text: str) -> str:
    return text.strip().replace("’", "'").lower()


class TutorDialogueEngine:
    """
    Rule-based tutor that answers one line of input at a time.

    The engine itself only holds read-only content. Everything that changes
    between turns is kept in the DialogueSession passed to reply(), so one
    engine can serve any number of independent sessions.
    """

    def __init__(
        self,
        catalog: Optional[LessonCatalog] = None,
        analysis_service: Optional[AnalysisService] = None,
    ):
        """Initialize the engine with lesson content and a sentence checker."""
        self.catalog = catalog or get_default_catalog()
        self.analysis_service = analysis_service or get_analysis_service()
        self._rules: Tuple[DispatchRule, ...] = (
            DispatchRule(Route.EMPTY, lambda turn, _: not turn.text, self._empty_prompt),
            DispatchRule(Route.HELP, lambda turn, _: turn.lower == "help", self._help),
            DispatchRule(Route.EXIT, lambda turn, _: turn.lower == "exit", self._farewell),
            DispatchRule(
                Route.ANSWER,
                lambda _, session: session.has_queued_question,
                self._evaluate_answer,
            ),
            DispatchRule(
                Route.QUIZ,
                lambda turn, _: turn.contains_any(QUIZ_KEYWORDS),
                self._next_practice_prompt,
            ),
            DispatchRule(
                Route.TIP,
                lambda turn, _: turn.contains_any(TIP_KEYWORDS),
                self._tip,
            ),
            DispatchRule(
                Route.VOCABULARY,
                lambda turn, _: self._lookup_vocabulary(turn) is not None,
                self._define,
            ),
            DispatchRule(
                Route.CHECK,
                lambda turn, _: turn.contains_any(CHECK_KEYWORDS),
                self._check_sentence,
            ),
            DispatchRule(
                Route.GRAMMAR,
                lambda turn, _: self.catalog.find_grammar_lesson(turn.lower) is not None,
                self._grammar,
            ),
            DispatchRule(Route.SUPPORTIVE, lambda turn, _: True, self._supportive_response),
        )

    def greeting(self) -> str:
        """Opening line for a new conversation."""
        return GREETING

    def new_session(self) -> DialogueSession:
        """Create a fresh session with no queued question."""
        session = DialogueSession()
        logger.info(f"Started dialogue session {session.session_id}")
        return session

    def route(self, user_input: str, session: DialogueSession) -> Route:
        """Return the route reply() would take for this input, without side effects."""
        turn = Turn.from_input(user_input)
        return self._select_rule(turn, session).route

    def reply(self, user_input: str, session: DialogueSession) -> str:
        """
        Produce the tutor's reply to one line of input.

        Args:
            user_input: Raw learner input (may be empty or whitespace)
            session: The conversation state to read and update

        Returns:
            The reply text; never empty
        """
        turn = Turn.from_input(user_input)
        rule = self._select_rule(turn, session)
        logger.debug(
            f"Session {session.session_id}: routing {turn.text!r} to {rule.route.value}"
        )

        response = rule.handler(turn, session)
        session.record_turn()
        return response

    def assess_sentence_quality(self, sentence: str) -> str:
        """Check a sentence and return the feedback text."""
        return self.analysis_service.assess_sentence_quality(sentence)

    # ===========================================
    # Dispatch
    # ===========================================
    def _select_rule(self, turn: Turn, session: DialogueSession) -> DispatchRule:
        for rule in self._rules:
            if rule.predicate(turn, session):
                return rule
        # The supportive rule always matches
        return self._rules[-1]

    # ===========================================
    # Handlers
    # ===========================================
    def _empty_prompt(self, turn: Turn, session: DialogueSession) -> str:
        return EMPTY_INPUT_PROMPT

    def _help(self, turn: Turn, session: DialogueSession) -> str:
        return HELP_MESSAGE

    def _farewell(self, turn: Turn, session: DialogueSession) -> str:
        return FAREWELL

    def _next_practice_prompt(self, turn: Turn, session: DialogueSession) -> str:
        questions = self.catalog.practice_questions
        question = questions[session.advance_rotation() % len(questions)]
        session.queued_question = question
        logger.debug(f"Session {session.session_id}: queued question {question.prompt!r}")
        return format_practice_prompt(question)

    def _evaluate_answer(self, turn: Turn, session: DialogueSession) -> str:
        """Answer evaluation while a practice question is queued."""
        question = session.queued_question
        answer = _normalize_answer(turn.text)

        if answer == "hint":
            return format_hint(question)

        if answer == "skip":
            session.queued_question = None
            logger.debug(f"Session {session.session_id}: question skipped")
            return format_model_answer(question)

        expected = _normalize_answer(question.expected_answer)
        if answer == expected or expected in answer:
            session.queued_question = None
            logger.debug(f"Session {session.session_id}: question answered")
            return PRACTICE_SUCCESS

        return PRACTICE_RETRY

    def _tip(self, turn: Turn, session: DialogueSession) -> str:
        tips = self.catalog.tips
        return format_tip(tips[session.rotation_index % len(tips)])

    def _lookup_vocabulary(self, turn: Turn) -> Optional[VocabularyEntry]:
        for candidate in definition_candidates(turn.lower):
            entry = self.catalog.find_vocabulary(candidate)
            if entry is not None:
                return entry
        return None

    def _define(self, turn: Turn, session: DialogueSession) -> str:
        return format_vocabulary_entry(self._lookup_vocabulary(turn))

    def _check_sentence(self, turn: Turn, session: DialogueSession) -> str:
        return self.analysis_service.assess_sentence_quality(turn.text)

    def _grammar(self, turn: Turn, session: DialogueSession) -> str:
        topic, explanation = self.catalog.find_grammar_lesson(turn.lower)
        return format_grammar_lesson(topic, explanation)

    def _supportive_response(self, turn: Turn, session: DialogueSession) -> str:
        openers = self.catalog.openers
        opener = openers[session.advance_rotation() % len(openers)]
        improved = self.analysis_service.rewrite_sentence(turn.text)
        return f"{opener} {improved}"


# Global engine instance (singleton pattern)
_dialogue_engine: Optional[TutorDialogueEngine] = None


def get_dialogue_engine() -> TutorDialogueEngine:
    """Get or create the global dialogue engine instance."""
    global _dialogue_engine
    if _dialogue_engine is None:
        _dialogue_engine = TutorDialogueEngine()
    return _dialogue_engine
