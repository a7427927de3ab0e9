import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from study_buddy.services.dialogue_service import DialogueSession, TutorDialogueEngine  # noqa: E402


@pytest.fixture
def engine() -> TutorDialogueEngine:
    return TutorDialogueEngine()


@pytest.fixture
def session() -> DialogueSession:
    return DialogueSession()
