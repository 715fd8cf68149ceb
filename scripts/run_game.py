from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from sleuth import config
from sleuth.cases.catalog import list_cases
from sleuth.deduction.accusation import Remediation
from sleuth.domain.enums import Phase, ToolId
from sleuth.engine import CaseEngine
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


def _choose(labels: list[str], title: str) -> int | None:
    print(title)
    for idx, label in enumerate(labels, start=1):
        print(f"{idx}) {label}")
    return parse_choice(input("> "), len(labels))


def _print_result(result) -> None:
    if result.summary:
        print(f"[{result.action}] {result.summary}")
    for note in result.notes:
        print(f"- {note}")


def _print_view(engine: CaseEngine) -> None:
    snapshot = engine.snapshot()
    print()
    for line in header_lines(snapshot):
        print(line)
    for line in detail_lines(snapshot):
        print(line)


def _play_minigame(engine: CaseEngine) -> None:
    games = list(engine.case.minigames)
    if not games:
        print("No minigames available in this case.")
        return
    index = _choose([g.title for g in games], "Choose a minigame:")
    if index is None:
        print("Invalid choice.")
        return
    prompt = engine.open_minigame(games[index].id)
    for line in minigame_prompt_lines(prompt):
        print(line)
    answer = answer_from_input(prompt, input("> "))
    _print_result(engine.submit_minigame(prompt.minigame_id, answer))


def _tap_statement(engine: CaseEngine) -> None:
    suspect = engine.case.suspect(engine.state.current_suspect_id or "")
    if suspect is None:
        print("Select a suspect first.")
        return
    index = _choose([f"“{s.text}”" for s in suspect.statements], f"Statements from {suspect.name}:")
    if index is None:
        print("Invalid choice.")
        return
    _print_result(engine.tap_statement(suspect.id, suspect.statements[index].id))


def _accuse(engine: CaseEngine) -> None:
    suspects = list(engine.case.suspects)
    index = _choose([s.name for s in suspects], "Choose a suspect to accuse:")
    if index is None:
        print("Invalid choice.")
        return
    remedy = _choose(["Retry", "Accept penalty"], "If the accusation is wrong:")
    remediation = Remediation.ACCEPT_PENALTY if remedy == 1 else Remediation.RETRY
    _print_result(engine.accuse(suspects[index].id, remediation))


def _run_smoke(engine: CaseEngine) -> None:
    """Walk the case start to finish with the culprit from the case data."""
    case = engine.case
    for game in case.minigames:
        prompt = engine.open_minigame(game.id)
        print(f"[smoke] Opened {prompt.title}")
    engine.advance_phase()
    engine.advance_phase()
    engine.arm_tool(ToolId.LIE_DETECTOR)
    for suspect in case.suspects:
        engine.select_suspect(suspect.id)
        for statement in suspect.statements:
            result = engine.tap_statement(suspect.id, statement.id)
            print(f"[smoke] {suspect.name} / {statement.id}: {result.summary}")
    engine.arm_tool(None)
    _print_result(engine.advance_phase())
    _print_result(engine.advance_phase())
    _print_result(engine.accuse(case.culprit_id))
    print(f"[smoke] Final phase: {engine.state.phase}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Console loop for a single case.")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--case-id", type=int, default=config.DEFAULT_CASE_ID)
    parser.add_argument(
        "--smoke",
        action="store_true",
        help="Run a short non-interactive walkthrough and exit.",
    )
    parser.add_argument("--log-level", type=str, default=None)
    args = parser.parse_args()
    config.configure_logging(args.log_level)

    engine = CaseEngine.start(args.case_id, rng=Rng(args.seed))
    if args.smoke:
        _run_smoke(engine)
        return

    while True:
        _print_view(engine)
        if engine.state.phase == Phase.CASE_SELECT:
            cases = list_cases()
            index = _choose([f"Case {c.id}: {c.title}" for c in cases], "Cases (q to quit):")
            if index is None:
                return
            _print_result(engine.restart_case(cases[index].id))
            continue
        print(MENU_TEXT)
        choice = input("> ").strip().lower()
        if choice == "q":
            return
        if choice == "1":
            _print_result(engine.advance_phase())
        elif choice == "2":
            suspects = list(engine.case.suspects)
            index = _choose([s.name for s in suspects], "Choose a suspect:")
            if index is not None:
                _print_result(engine.select_suspect(suspects[index].id))
        elif choice == "3":
            tools = list(TOOLS.values())
            index = _choose([f"{t.name} (-{t.cost})" for t in tools], "Choose a tool (again to disarm):")
            if index is not None:
                _print_result(engine.arm_tool(tools[index].tool_id))
        elif choice == "4":
            _tap_statement(engine)
        elif choice == "5":
            _play_minigame(engine)
        elif choice == "6":
            _accuse(engine)
        elif choice == "7":
            _print_result(engine.restart_case(engine.case.id))
        else:
            print("Unknown command.")


if __name__ == "__main__":
    main()
