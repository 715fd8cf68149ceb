"""Plain-text rendering and input parsing shared by the terminal views."""

from __future__ import annotations

from typing import Any

from sleuth.deduction.minigames import MinigamePrompt
from sleuth.domain.enums import MinigameKind, Phase
from sleuth.presentation.snapshot import SessionSnapshot

MENU_TEXT = (
    "Choose action:\n"
    "1) Next phase\n"
    "2) Select suspect\n"
    "3) Arm / disarm tool\n"
    "4) Tap statement\n"
    "5) Play minigame\n"
    "6) Accuse\n"
    "7) Restart case"
)


def parse_choice(value: str, count: int) -> int | None:
    value = value.strip()
    if not value.isdigit():
        return None
    index = int(value) - 1
    if index < 0 or index >= count:
        return None
    return index


def parse_multi_choice(value: str, count: int) -> list[int]:
    indices: list[int] = []
    for part in value.split(","):
        index = parse_choice(part, count)
        if index is not None:
            indices.append(index)
    return indices


def header_lines(snapshot: SessionSnapshot) -> list[str]:
    return [
        f"Case {snapshot.case_id}: {snapshot.title}  Phase: {snapshot.phase.value.upper()}",
        f"Investigation Points {snapshot.points_remaining} (earned: {snapshot.points_earned})",
    ]


def detail_lines(snapshot: SessionSnapshot) -> list[str]:
    lines = [snapshot.phase_title, snapshot.phase_hint, ""]
    if snapshot.phase == Phase.INTRO:
        lines.append(snapshot.crime_summary)
    elif snapshot.phase == Phase.INVESTIGATION:
        if not snapshot.minigames:
            lines.append("No minigames available in this case.")
        for idx, game in enumerate(snapshot.minigames, start=1):
            status = "Completed" if game.completed else "+1 Point"
            lines.append(f"{idx}) {game.title} [{status}] {game.description}")
    elif snapshot.phase == Phase.INTERVIEWS:
        active = next((s for s in snapshot.suspects if s.active), None)
        if active is not None:
            lines.append(f"{active.name} ({active.role}, {active.trait})")
            for idx, statement in enumerate(active.statements, start=1):
                lines.append(f"{idx}) “{statement.text}”")
        lines.append(snapshot.interview_progress)
    elif snapshot.phase == Phase.RESOLUTION and snapshot.resolution_text:
        lines.append(snapshot.resolution_text)
    lines.append("")
    lines.append("Suspects:")
    for suspect in snapshot.suspects:
        marker = "*" if suspect.active else " "
        status = "Interviewed" if suspect.interviewed else "Not interviewed"
        lines.append(f"{marker} [{suspect.portrait_label}] {suspect.name} - {status}")
    lines.append("")
    lines.append("Tools:")
    for tool in snapshot.tools:
        flags = []
        if tool.armed:
            flags.append("armed")
        if not tool.available:
            flags.append("unavailable")
        suffix = f" ({', '.join(flags)})" if flags else ""
        lines.append(f"- {tool.name} (-{tool.cost}){suffix}")
    lines.append("")
    lines.append("Clues:")
    if not snapshot.clues:
        lines.append("No clues logged yet.")
    for clue in snapshot.clues:
        lines.append(f"- {clue.text}")
    return lines


def minigame_prompt_lines(prompt: MinigamePrompt) -> list[str]:
    lines = [prompt.title, prompt.description]
    if prompt.kind == MinigameKind.ORDERING:
        lines.append("Enter the item numbers in order (comma-separated):")
        for idx, item in enumerate(prompt.items, start=1):
            lines.append(f"{idx}) {item.text}")
    elif prompt.kind == MinigameKind.MATCHING:
        lines.append("Options:")
        for idx, option in enumerate(prompt.right_options, start=1):
            lines.append(f"{idx}) {option}")
        lines.append("Enter one option number per note, in this order (comma-separated):")
        for left in prompt.lefts:
            lines.append(f"- {left}")
    else:
        lines.append(prompt.prompt)
        for idx, option in enumerate(prompt.options, start=1):
            lines.append(f"{idx}) {option}")
    return lines


def answer_from_input(prompt: MinigamePrompt, value: str) -> Any:
    """Translate typed numbers into the engine's answer payload for the prompt."""
    if prompt.kind == MinigameKind.ORDERING:
        indices = parse_multi_choice(value, len(prompt.items))
        return [prompt.items[idx].id for idx in indices]
    if prompt.kind == MinigameKind.MATCHING:
        indices = parse_multi_choice(value, len(prompt.right_options))
        return {
            left: prompt.right_options[idx] for left, idx in zip(prompt.lefts, indices)
        }
    return parse_choice(value, len(prompt.options))
