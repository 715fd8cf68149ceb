"""Accusation checks and outcomes."""

from __future__ import annotations

from enum import StrEnum
import logging

from sleuth.domain.enums import Phase
from sleuth.domain.models import Case
from sleuth.investigation.phases import ACCUSE_GUARD, all_interviewed, set_phase
from sleuth.investigation.results import ActionOutcome, ActionResult, ActionType, SessionState

logger = logging.getLogger(__name__)

CORRECT = "Correct."
INCORRECT = "Incorrect accusation."
UNKNOWN_SUSPECT = "Unknown suspect."
NOT_ACCUSATION_PHASE = "Accusations are made in the Accusation phase."
PENALTY_CLUE = "Penalty accepted (no permanent loss)."


class Remediation(StrEnum):
    RETRY = "retry"
    ACCEPT_PENALTY = "accept_penalty"


def can_accuse(case: Case, state: SessionState) -> bool:
    return all_interviewed(case, state)


def _result(state: SessionState, outcome: ActionOutcome, notes: list[str] | None = None) -> ActionResult:
    return ActionResult(
        action=ActionType.ACCUSE,
        outcome=outcome,
        summary=state.last_feedback,
        notes=list(notes or []),
    )


def accuse(
    case: Case,
    state: SessionState,
    suspect_id: str,
    remediation: Remediation = Remediation.RETRY,
) -> ActionResult:
    """Resolve an accusation. A wrong guess always sends the player back to deduction."""
    if state.phase != Phase.ACCUSATION:
        state.last_feedback = NOT_ACCUSATION_PHASE
        return _result(state, ActionOutcome.FAILURE)
    if not can_accuse(case, state):
        state.last_feedback = ACCUSE_GUARD
        return _result(state, ActionOutcome.FAILURE)
    suspect = case.suspect(suspect_id)
    if suspect is None:
        logger.warning("Accusation against unknown suspect %r", suspect_id)
        state.last_feedback = UNKNOWN_SUSPECT
        return _result(state, ActionOutcome.FAILURE)

    if suspect.id == case.culprit_id:
        state.add_clue(f"Accusation: {suspect.name} (correct).")
        set_phase(state, Phase.RESOLUTION)
        state.last_feedback = CORRECT
        logger.info("Case %s solved: %s", case.id, suspect.id)
        return _result(state, ActionOutcome.SUCCESS)

    state.add_clue(f"Accusation: {suspect.name} (incorrect).")
    notes = [f"{suspect.name} does not fit all the logic."]
    if remediation == Remediation.ACCEPT_PENALTY:
        # The penalty is recorded only; points and logs stay as they are.
        state.add_clue(PENALTY_CLUE)
        notes.append(PENALTY_CLUE)
    set_phase(state, Phase.DEDUCTION)
    state.last_feedback = INCORRECT
    logger.info("Incorrect accusation in case %s: %s (%s)", case.id, suspect.id, remediation)
    return _result(state, ActionOutcome.FAILURE, notes)
