import sys
from typing import Any

import pytest
from loguru import logger

import study_buddy.main as main
from study_buddy.config import Settings
from study_buddy.content.lessons import FAREWELL, GOODBYE, GREETING, PRACTICE_QUESTIONS
from study_buddy.services.dialogue_service import TutorDialogueEngine


def _scripted_input(lines: list[str], prompts: list[str]):
    remaining = list(lines)

    def _input(prompt: str) -> str:
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input


def _run(lines: list[str], config: Settings | None = None) -> tuple[int, list[str], list[str]]:
    output: list[str] = []
    prompts: list[str] = []
    code = main.run_console(
        engine=TutorDialogueEngine(),
        input_fn=_scripted_input(lines, prompts),
        print_fn=output.append,
        config=config or Settings(),
    )
    return code, output, prompts


def test_console_greets_and_stops_on_exit() -> None:
    code, output, prompts = _run(["help", "  EXIT  ", "never read"])
    assert code == 0
    assert output[0] == GREETING
    assert output[-1] == f"Tutor: {FAREWELL}"
    assert len(output) == 3
    assert len(prompts) == 2


def test_console_end_of_input_says_goodbye() -> None:
    code, output, _ = _run(["quiz"])
    assert code == 0
    assert output[1] == f"Tutor: Practice: {PRACTICE_QUESTIONS[0].prompt} (Type your answer, or 'hint'/'skip')"
    assert output[-1] == GOODBYE


def test_console_keyboard_interrupt_is_normal_termination() -> None:
    output: list[str] = []

    def _interrupt(prompt: str) -> str:
        raise KeyboardInterrupt

    code = main.run_console(
        engine=TutorDialogueEngine(), input_fn=_interrupt, print_fn=output.append, config=Settings()
    )
    assert code == 0
    assert output == [GREETING, GOODBYE]


def test_console_uses_configured_prompt_and_label() -> None:
    config = Settings(user_prompt="> ", tutor_label="Buddy")
    _, output, prompts = _run(["tip"], config=config)
    assert prompts[0] == "\n> "
    assert output[1].startswith("Buddy: Tip — ")


def test_console_practice_session_end_to_end() -> None:
    _, output, _ = _run(["quiz", "hint", "I went to the gym yesterday.", "exit"])
    assert output[2].startswith("Tutor: Hint: ")
    assert "Great job" in output[3]
    assert output[4] == f"Tutor: {FAREWELL}"


def test_console_reraises_unexpected_errors() -> None:
    class BrokenEngine(TutorDialogueEngine):
        def reply(self, user_input, session):
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        main.run_console(
            engine=BrokenEngine(),
            input_fn=lambda prompt: "hello",
            print_fn=lambda line: None,
            config=Settings(),
        )


def test_main_parses_log_level_and_runs_console(monkeypatch) -> None:
    calls: dict[str, Any] = {}
    monkeypatch.setattr(main, "configure_logging", lambda level=None: calls.__setitem__("level", level))
    monkeypatch.setattr(main, "run_console", lambda: 0)
    assert main.main(["--log-level", "DEBUG"]) == 0
    assert calls["level"] == "DEBUG"


def test_configure_logging_writes_log_file(tmp_path) -> None:
    log_file = tmp_path / "tutor.log"
    try:
        main.configure_logging(Settings(log_file=str(log_file)), level="ERROR")
        logger.info("session summary line")
    finally:
        logger.remove()
        logger.add(sys.stderr)
    assert "session summary line" in log_file.read_text(encoding="utf-8")
