from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from textual.app import App, ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Input, RichLog, Static

from sleuth import config
from sleuth.cases.catalog import list_cases
from sleuth.deduction.accusation import Remediation
from sleuth.engine import CaseEngine
from sleuth.investigation.results import ActionResult
from sleuth.investigation.tools import TOOLS
from sleuth.ui.text import (
    MENU_TEXT,
    answer_from_input,
    detail_lines,
    header_lines,
    minigame_prompt_lines,
    parse_choice,
)
from sleuth.util.rng import Rng


@dataclass
class PromptState:
    step: str
    data: dict[str, Any] = field(default_factory=dict)
    options: list[Any] = field(default_factory=list)


class SleuthApp(App):
    TITLE = ""
    SUB_TITLE = ""
    BINDINGS = [
        ("f6", "focus_log", "Focus log"),
        ("f7", "focus_detail", "Focus detail"),
        ("f8", "focus_input", "Focus input"),
    ]
    CSS = """
    Screen {
        layout: vertical;
    }
    #header {
        height: auto;
        padding: 1 1;
    }
    #log {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #detail {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #detail_view {
        width: 100%;
    }
    #menu {
        height: auto;
        padding: 1 1;
    }
    #command {
        height: 3;
        padding: 0 1;
    }
    """

    def __init__(self, case_id: int | None = None, seed: int | None = None) -> None:
        super().__init__()
        self.seed = seed if seed is not None else config.SEED
        self.engine = CaseEngine.start(
            case_id if case_id is not None else config.DEFAULT_CASE_ID, rng=Rng(self.seed)
        )
        self.prompt_state: PromptState | None = None

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("", id="header")
            yield RichLog(id="log", wrap=True)
            yield VerticalScroll(Static("", id="detail_view", expand=True), id="detail")
            yield Static(MENU_TEXT, id="menu")
            yield Input(placeholder="Enter command (1-7 or q)...", id="command")

    def on_mount(self) -> None:
        self._refresh()
        self._write(f"Case {self.engine.case.id} started.")
        self._write("Type a number to choose an action. Type 'q' to quit.")
        self._write("Focus: F6 log, F7 detail, F8 input (Tab cycles focus).")
        self.query_one("#command", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        event.input.value = ""
        if not value:
            return
        if self.prompt_state is not None:
            self._handle_prompt_input(value)
            return
        if value.lower() == "q":
            self.exit()
            return
        self._handle_command(value)

    def _write(self, message: str) -> None:
        self.query_one("#log", RichLog).write(message)

    def action_focus_log(self) -> None:
        self.query_one("#log", RichLog).focus()

    def action_focus_detail(self) -> None:
        self.query_one("#detail", VerticalScroll).focus()

    def action_focus_input(self) -> None:
        self.query_one("#command", Input).focus()

    def _refresh(self) -> None:
        snapshot = self.engine.snapshot()
        self.query_one("#header", Static).update("\n".join(header_lines(snapshot)))
        self.query_one("#detail_view", Static).update("\n".join(detail_lines(snapshot)))

    def _apply_action_result(self, result: ActionResult) -> None:
        if result.summary:
            self._write(f"[{result.action}] {result.summary}")
        for note in result.notes:
            self._write(f"- {note}")
        self._refresh()

    def _prompt(self, step: str, title: str, labels: list[str], options: list[Any]) -> None:
        self.prompt_state = PromptState(step=step, options=options)
        self._write(title)
        for idx, label in enumerate(labels, start=1):
            self._write(f"{idx}) {label}")

    def _handle_command(self, value: str) -> None:
        case = self.engine.case
        if value == "1":
            self._apply_action_result(self.engine.advance_phase())
            return
        if value == "2":
            self._prompt(
                "select_suspect",
                "Choose a suspect:",
                [s.name for s in case.suspects],
                list(case.suspects),
            )
            return
        if value == "3":
            tools = list(TOOLS.values())
            self._prompt(
                "arm_tool",
                "Choose a tool (again to disarm):",
                [f"{t.name} (-{t.cost}) {t.help}" for t in tools],
                tools,
            )
            return
        if value == "4":
            suspect = case.suspect(self.engine.state.current_suspect_id or "")
            if suspect is None:
                self._write("Select a suspect first.")
                return
            self.prompt_state = PromptState(
                step="tap_statement",
                data={"suspect_id": suspect.id},
                options=list(suspect.statements),
            )
            self._write(f"Statements from {suspect.name}:")
            for idx, statement in enumerate(suspect.statements, start=1):
                self._write(f"{idx}) “{statement.text}”")
            return
        if value == "5":
            if not case.minigames:
                self._write("No minigames available in this case.")
                return
            self._prompt(
                "minigame_pick",
                "Choose a minigame:",
                [g.title for g in case.minigames],
                list(case.minigames),
            )
            return
        if value == "6":
            self._prompt(
                "accuse_suspect",
                "Choose a suspect to accuse:",
                [s.name for s in case.suspects],
                list(case.suspects),
            )
            return
        if value == "7":
            cases = list_cases()
            self._prompt(
                "restart_case",
                "Choose a case:",
                [f"Case {c.id}: {c.title}" for c in cases],
                cases,
            )
            return
        self._write("Unknown command.")

    def _handle_prompt_input(self, value: str) -> None:
        if self.prompt_state is None:
            return
        if value.lower() == "q":
            self._write("Prompt cancelled.")
            self.prompt_state = None
            return
        step = self.prompt_state.step
        if step == "minigame_answer":
            prompt = self.prompt_state.data["prompt"]
            self.prompt_state = None
            answer = answer_from_input(prompt, value)
            self._apply_action_result(self.engine.submit_minigame(prompt.minigame_id, answer))
            return
        selection = parse_choice(value, len(self.prompt_state.options))
        if selection is None:
            self._write("Invalid choice.")
            return
        choice = self.prompt_state.options[selection]
        data = self.prompt_state.data
        self.prompt_state = None
        if step == "select_suspect":
            self._apply_action_result(self.engine.select_suspect(choice.id))
        elif step == "arm_tool":
            self._apply_action_result(self.engine.arm_tool(choice.tool_id))
        elif step == "tap_statement":
            self._apply_action_result(self.engine.tap_statement(data["suspect_id"], choice.id))
        elif step == "minigame_pick":
            prompt = self.engine.open_minigame(choice.id)
            self.prompt_state = PromptState(step="minigame_answer", data={"prompt": prompt})
            for line in minigame_prompt_lines(prompt):
                self._write(line)
        elif step == "accuse_suspect":
            self._prompt(
                "accuse_remedy",
                "If the accusation is wrong:",
                ["Retry", "Accept penalty"],
                [Remediation.RETRY, Remediation.ACCEPT_PENALTY],
            )
            self.prompt_state.data["suspect_id"] = choice.id
        elif step == "accuse_remedy":
            self._apply_action_result(self.engine.accuse(data["suspect_id"], choice))
        elif step == "restart_case":
            self._apply_action_result(self.engine.restart_case(choice.id))
            self._write(f"Case {self.engine.case.id} started.")
