"""Shared enums for case data and session state."""

from __future__ import annotations

from enum import StrEnum


class Phase(StrEnum):
    INTRO = "intro"
    INVESTIGATION = "investigation"
    INTERVIEWS = "interviews"
    DEDUCTION = "deduction"
    ACCUSATION = "accusation"
    RESOLUTION = "resolution"
    CASE_SELECT = "case_select"


class TruthClass(StrEnum):
    TRUTH = "truth"
    PARTIAL = "partial"
    MISLEADING = "misleading"
    LIE = "lie"


class Signal(StrEnum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    UNKNOWN = "unknown"


class ToolId(StrEnum):
    LIE_DETECTOR = "lie_detector"
    STOPWATCH = "stopwatch"
    WATCH = "watch"
    NOTEPAD = "notepad"


class MinigameKind(StrEnum):
    ORDERING = "ordering"
    MATCHING = "matching"
    SINGLE_CHOICE = "single_choice"
