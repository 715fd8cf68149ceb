"""Project session state into a read-only view model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from sleuth.domain.enums import MinigameKind, Phase, ToolId
from sleuth.domain.models import Case
from sleuth.investigation.economy import remaining_points
from sleuth.investigation.phases import PHASE_HINTS, PHASE_TITLES
from sleuth.investigation.results import SessionState
from sleuth.investigation.tools import TOOLS


class _View(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class StatementView(_View):
    id: str
    text: str


class SuspectView(_View):
    id: str
    name: str
    role: str
    trait: str
    portrait_label: str
    interviewed: bool
    active: bool
    statements: list[StatementView] = Field(default_factory=list)


class ToolView(_View):
    id: ToolId
    name: str
    cost: int
    help: str
    armed: bool
    available: bool


class MinigameView(_View):
    id: str
    kind: MinigameKind
    title: str
    description: str
    completed: bool


class ClueView(_View):
    text: str
    timestamp: datetime


class ToolUseView(_View):
    tool_id: ToolId
    suspect_id: str
    statement_id: str
    output: str


class SessionSnapshot(_View):
    case_id: int
    title: str
    crime_summary: str
    phase: Phase
    phase_title: str
    phase_hint: str
    points_remaining: int
    points_earned: int
    suspects: list[SuspectView]
    tools: list[ToolView]
    minigames: list[MinigameView]
    clues: list[ClueView]
    tool_uses: list[ToolUseView]
    can_accuse: bool
    interview_progress: str
    last_feedback: str | None = None
    resolution_text: str | None = None


def project_session(case: Case, state: SessionState) -> SessionSnapshot:
    remaining = remaining_points(state)
    interviewed = len(state.interviewed_suspect_ids)
    return SessionSnapshot(
        case_id=case.id,
        title=case.title,
        crime_summary=case.crime_summary,
        phase=state.phase,
        phase_title=PHASE_TITLES[state.phase],
        phase_hint=PHASE_HINTS[state.phase],
        points_remaining=remaining,
        points_earned=state.points_earned,
        suspects=[
            SuspectView(
                id=suspect.id,
                name=suspect.name,
                role=suspect.role,
                trait=suspect.trait,
                portrait_label=suspect.portrait_label,
                interviewed=suspect.id in state.interviewed_suspect_ids,
                active=suspect.id == state.current_suspect_id,
                statements=[StatementView(id=st.id, text=st.text) for st in suspect.statements],
            )
            for suspect in case.suspects
        ],
        tools=[
            ToolView(
                id=tool.tool_id,
                name=tool.name,
                cost=tool.cost,
                help=tool.help,
                armed=state.active_tool_id == tool.tool_id,
                available=remaining >= tool.cost and state.phase == Phase.INTERVIEWS,
            )
            for tool in TOOLS.values()
        ],
        minigames=[
            MinigameView(
                id=game.id,
                kind=MinigameKind(game.kind),
                title=game.title,
                description=game.description,
                completed=game.id in state.completed_minigame_ids,
            )
            for game in case.minigames
        ],
        clues=[ClueView(text=clue.text, timestamp=clue.timestamp) for clue in state.clue_log],
        tool_uses=[
            ToolUseView(
                tool_id=use.tool_id,
                suspect_id=use.suspect_id,
                statement_id=use.statement_id,
                output=use.output,
            )
            for use in state.tool_use_log
        ],
        can_accuse=interviewed == len(case.suspects),
        interview_progress=(
            f"Interview progress: {interviewed}/{len(case.suspects)} suspects interviewed."
        ),
        last_feedback=state.last_feedback,
        resolution_text=case.resolution_text if state.phase == Phase.RESOLUTION else None,
    )
