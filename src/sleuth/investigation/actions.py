"""Interview-phase actions: suspect selection, tools and statements."""

from __future__ import annotations

import logging

from sleuth.domain.enums import Phase, ToolId
from sleuth.domain.models import Case, Statement
from sleuth.investigation.economy import spend_point
from sleuth.investigation.results import (
    ActionOutcome,
    ActionResult,
    ActionType,
    SessionState,
    ToolUse,
)
from sleuth.investigation.tools import (
    NO_READOUT,
    decode_signal,
    notepad_readout,
    tool_for,
)

logger = logging.getLogger(__name__)

SELECT_OUTSIDE_INTERVIEWS = "Suspect selected. Advance to the Interviews phase to question them."
TOOLS_OUTSIDE_INTERVIEWS = "Tools can only be used during interviews."
TAP_OUTSIDE_INTERVIEWS = "Statements can only be tapped during interviews."
TOOL_DISARMED = "Tool unselected."
STATEMENT_NOTED = "Statement noted."


def _result(
    action: ActionType, outcome: ActionOutcome, state: SessionState, notes: list[str] | None = None
) -> ActionResult:
    return ActionResult(
        action=action,
        outcome=outcome,
        summary=state.last_feedback,
        notes=list(notes or []),
    )


def select_suspect(case: Case, state: SessionState, suspect_id: str) -> ActionResult:
    suspect = case.suspect(suspect_id)
    if suspect is None:
        logger.warning("Select requested for unknown suspect %r", suspect_id)
        return _result(ActionType.SELECT_SUSPECT, ActionOutcome.FAILURE, state)
    state.current_suspect_id = suspect.id
    if state.phase != Phase.INTERVIEWS:
        state.last_feedback = SELECT_OUTSIDE_INTERVIEWS
    else:
        state.last_feedback = None
    return _result(ActionType.SELECT_SUSPECT, ActionOutcome.SUCCESS, state)


def arm_tool(state: SessionState, tool_id: str | None) -> ActionResult:
    """Toggle the armed tool; passing None or the armed tool disarms."""
    if tool_id is None:
        state.active_tool_id = None
        state.last_feedback = TOOL_DISARMED
        return _result(ActionType.ARM_TOOL, ActionOutcome.SUCCESS, state)
    tool = tool_for(tool_id)
    if tool is None:
        logger.warning("Arm requested for unknown tool %r", tool_id)
        return _result(ActionType.ARM_TOOL, ActionOutcome.FAILURE, state)
    if state.phase != Phase.INTERVIEWS:
        state.last_feedback = TOOLS_OUTSIDE_INTERVIEWS
        return _result(ActionType.ARM_TOOL, ActionOutcome.FAILURE, state)
    if state.active_tool_id == tool.tool_id:
        state.active_tool_id = None
        state.last_feedback = TOOL_DISARMED
    else:
        state.active_tool_id = tool.tool_id
        state.last_feedback = f"{tool.name} armed. Tap a statement to use it."
    return _result(ActionType.ARM_TOOL, ActionOutcome.SUCCESS, state)


def use_tool_on_statement(
    case: Case,
    state: SessionState,
    tool_id: str,
    suspect_id: str,
    statement: Statement,
) -> ActionResult:
    suspect = case.suspect(suspect_id)
    if suspect is None:
        return _result(ActionType.USE_TOOL, ActionOutcome.NO_EFFECT, state)
    tool = tool_for(tool_id)
    if tool is None:
        logger.warning("Use requested for unknown tool %r", tool_id)
        return _result(ActionType.USE_TOOL, ActionOutcome.FAILURE, state)
    if not spend_point(state, tool.tool_id):
        state.last_feedback = f"Not enough Investigation Points to use {tool.name}."
        return _result(ActionType.USE_TOOL, ActionOutcome.FAILURE, state)

    if tool.tool_id == ToolId.NOTEPAD:
        output = notepad_readout(statement.notepad_notes)
    else:
        output = decode_signal(tool.tool_id, statement.signal_for(tool.tool_id)) or NO_READOUT

    state.record_tool_use(
        ToolUse(
            tool_id=tool.tool_id,
            suspect_id=suspect.id,
            statement_id=statement.id,
            output=output,
        )
    )
    state.add_clue(f"{tool.name}: {output}")
    state.last_feedback = f"{tool.name} used."
    logger.debug("%s on %s/%s -> %s", tool.tool_id, suspect.id, statement.id, output)
    return _result(ActionType.USE_TOOL, ActionOutcome.SUCCESS, state, notes=[output])


def tap_statement(
    case: Case, state: SessionState, suspect_id: str, statement_id: str
) -> ActionResult:
    if state.phase != Phase.INTERVIEWS:
        state.last_feedback = TAP_OUTSIDE_INTERVIEWS
        return _result(ActionType.TAP_STATEMENT, ActionOutcome.FAILURE, state)
    suspect = case.suspect(suspect_id)
    statement = suspect.statement(statement_id) if suspect else None
    if suspect is None or statement is None:
        logger.warning("Tap on unknown statement %r/%r", suspect_id, statement_id)
        return _result(ActionType.TAP_STATEMENT, ActionOutcome.NO_EFFECT, state)

    state.interviewed_suspect_ids.add(suspect.id)
    if state.active_tool_id is not None:
        return use_tool_on_statement(case, state, state.active_tool_id, suspect.id, statement)

    state.add_clue(f"{suspect.name}: “{statement.text}”")
    state.last_feedback = STATEMENT_NOTED
    return _result(ActionType.TAP_STATEMENT, ActionOutcome.SUCCESS, state)
