"""Session state and result structures for player intents."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum

from sleuth import config
from sleuth.domain.enums import Phase, ToolId


class ActionType(StrEnum):
    SELECT_SUSPECT = "select_suspect"
    ARM_TOOL = "arm_tool"
    TAP_STATEMENT = "tap_statement"
    USE_TOOL = "use_tool"
    SUBMIT_MINIGAME = "submit_minigame"
    ADVANCE_PHASE = "advance_phase"
    ACCUSE = "accuse"
    RESTART_CASE = "restart_case"


class ActionOutcome(StrEnum):
    SUCCESS = "success"
    FAILURE = "failure"
    NO_EFFECT = "no_effect"


@dataclass(frozen=True)
class ClueEntry:
    text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class ToolUse:
    tool_id: ToolId
    suspect_id: str
    statement_id: str
    output: str


def _clue_log() -> deque[ClueEntry]:
    return deque(maxlen=config.CLUE_LOG_LIMIT)


@dataclass
class SessionState:
    case_id: int
    phase: Phase = Phase.INTRO
    points_earned: int = 0
    points_spent: int = 0
    completed_minigame_ids: set[str] = field(default_factory=set)
    interviewed_suspect_ids: set[str] = field(default_factory=set)
    current_suspect_id: str | None = None
    active_tool_id: ToolId | None = None
    tool_use_log: list[ToolUse] = field(default_factory=list)
    # Newest first; the deque drops the oldest entry past the limit.
    clue_log: deque[ClueEntry] = field(default_factory=_clue_log)
    last_feedback: str | None = None

    def add_clue(self, text: str) -> ClueEntry:
        entry = ClueEntry(text=text)
        self.clue_log.appendleft(entry)
        return entry

    def record_tool_use(self, use: ToolUse) -> None:
        self.tool_use_log.insert(0, use)


@dataclass
class ActionResult:
    action: ActionType
    outcome: ActionOutcome
    summary: str | None
    notes: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome == ActionOutcome.SUCCESS
