"""Interrogation tools, their costs and readout tables."""

from __future__ import annotations

from dataclasses import dataclass

from sleuth.domain.enums import Signal, ToolId


@dataclass(frozen=True)
class ToolSpec:
    tool_id: ToolId
    name: str
    cost: int
    help: str


TOOLS = {
    ToolId.LIE_DETECTOR: ToolSpec(
        tool_id=ToolId.LIE_DETECTOR,
        name="Lie Detector",
        cost=1,
        help="Indicates deceptive statements.",
    ),
    ToolId.STOPWATCH: ToolSpec(
        tool_id=ToolId.STOPWATCH,
        name="Stopwatch",
        cost=1,
        help="Reveals hesitation or delayed responses.",
    ),
    ToolId.WATCH: ToolSpec(
        tool_id=ToolId.WATCH,
        name="Watch",
        cost=1,
        help="Verifies time-based alibis.",
    ),
    ToolId.NOTEPAD: ToolSpec(
        tool_id=ToolId.NOTEPAD,
        name="Notepad",
        cost=1,
        help="Highlights contradictions between suspects.",
    ),
}

SIGNAL_LABELS = {
    ToolId.LIE_DETECTOR: {
        Signal.GREEN: "No deception indicated",
        Signal.YELLOW: "Unclear / possible deception",
        Signal.RED: "Deception indicated",
    },
    ToolId.STOPWATCH: {
        Signal.GREEN: "No hesitation",
        Signal.YELLOW: "Some hesitation",
        Signal.RED: "Notable hesitation",
    },
    ToolId.WATCH: {
        Signal.GREEN: "Time claim checks out",
        Signal.YELLOW: "Time claim unclear",
        Signal.RED: "Time claim conflicts",
    },
}

NO_READOUT = "No readout available."
NO_CONTRADICTIONS = "No new contradictions highlighted."


def tool_for(tool_id: str | None) -> ToolSpec | None:
    if tool_id is None:
        return None
    try:
        return TOOLS.get(ToolId(tool_id))
    except ValueError:
        return None


def decode_signal(tool_id: ToolId, signal: Signal | None) -> str | None:
    if signal is None or signal == Signal.UNKNOWN:
        return None
    return SIGNAL_LABELS.get(tool_id, {}).get(signal)


def notepad_readout(notes: list[str]) -> str:
    return " ".join(notes) if notes else NO_CONTRADICTIONS
