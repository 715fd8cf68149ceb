"""Case phase progression."""

from __future__ import annotations

import logging

from sleuth.domain.enums import Phase
from sleuth.domain.models import Case
from sleuth.investigation.results import ActionOutcome, ActionResult, ActionType, SessionState

logger = logging.getLogger(__name__)

PHASE_ORDER = [
    Phase.INTRO,
    Phase.INVESTIGATION,
    Phase.INTERVIEWS,
    Phase.DEDUCTION,
    Phase.ACCUSATION,
    Phase.RESOLUTION,
]

INTERVIEW_GUARD = "You must interview all suspects before proceeding."
ACCUSE_GUARD = "You must interview all suspects before accusing."
ACCUSE_PROMPT = "Choose a suspect to accuse."
CASE_SELECT_PROMPT = "Choose a case to play."

PHASE_TITLES = {
    Phase.INTRO: "Case Introduction",
    Phase.INVESTIGATION: "Investigation (Optional Minigames)",
    Phase.INTERVIEWS: "Interviews (Mandatory)",
    Phase.DEDUCTION: "Deduction",
    Phase.ACCUSATION: "Accusation",
    Phase.RESOLUTION: "Resolution",
    Phase.CASE_SELECT: "Cases",
}

PHASE_HINTS = {
    Phase.INTRO: (
        "Sequence: Introduction, Investigation (optional minigames), Interviews "
        "(mandatory), Deduction, Accusation, Resolution. Minigames are optional, "
        "but they award Investigation Points for tools."
    ),
    Phase.INVESTIGATION: (
        "Each completed minigame awards 1 Investigation Point. Points reset after this case."
    ),
    Phase.INTERVIEWS: (
        "Interview all suspects before you can accuse anyone. Select a suspect to switch."
    ),
    Phase.DEDUCTION: (
        "Review what each suspect said. Use tools (if you earned points) to reveal subtle "
        "deception and timeline inconsistencies. The case is solvable through logic; "
        "guessing is discouraged."
    ),
    Phase.ACCUSATION: (
        "Choose one suspect to accuse. If you are wrong, you can retry or accept a penalty."
    ),
    Phase.RESOLUTION: "Investigation Points reset between cases.",
    Phase.CASE_SELECT: "Case 1 is fully written; the remaining cases are placeholders.",
}


def all_interviewed(case: Case, state: SessionState) -> bool:
    return len(state.interviewed_suspect_ids) == len(case.suspects)


def set_phase(state: SessionState, phase: Phase) -> None:
    logger.debug("Phase %s -> %s", state.phase, phase)
    state.phase = phase
    state.last_feedback = None


def _result(state: SessionState, outcome: ActionOutcome) -> ActionResult:
    return ActionResult(
        action=ActionType.ADVANCE_PHASE,
        outcome=outcome,
        summary=state.last_feedback,
    )


def advance_phase(case: Case, state: SessionState) -> ActionResult:
    if state.phase == Phase.INTERVIEWS and not all_interviewed(case, state):
        state.last_feedback = INTERVIEW_GUARD
        return _result(state, ActionOutcome.FAILURE)

    if state.phase == Phase.ACCUSATION:
        state.last_feedback = ACCUSE_PROMPT if all_interviewed(case, state) else ACCUSE_GUARD
        return _result(state, ActionOutcome.NO_EFFECT)

    if state.phase == Phase.RESOLUTION:
        set_phase(state, Phase.CASE_SELECT)
        return _result(state, ActionOutcome.SUCCESS)

    if state.phase == Phase.CASE_SELECT:
        state.last_feedback = CASE_SELECT_PROMPT
        return _result(state, ActionOutcome.NO_EFFECT)

    index = PHASE_ORDER.index(state.phase)
    next_phase = PHASE_ORDER[index + 1]
    set_phase(state, next_phase)

    if next_phase == Phase.INTERVIEWS and state.current_suspect_id is None:
        state.current_suspect_id = case.suspects[0].id

    if next_phase == Phase.ACCUSATION and not all_interviewed(case, state):
        set_phase(state, Phase.DEDUCTION)
        state.last_feedback = ACCUSE_GUARD
        return _result(state, ActionOutcome.FAILURE)

    return _result(state, ActionOutcome.SUCCESS)
