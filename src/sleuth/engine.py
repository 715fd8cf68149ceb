"""Case engine: owns the session and exposes player intents."""

from __future__ import annotations

import logging
from typing import Any

from sleuth import config
from sleuth.cases.catalog import get_case_by_id, require_case
from sleuth.deduction import accusation, minigames
from sleuth.deduction.accusation import Remediation
from sleuth.deduction.minigames import MinigamePrompt
from sleuth.domain.models import Case
from sleuth.investigation import actions, phases
from sleuth.investigation.economy import remaining_points
from sleuth.investigation.results import ActionOutcome, ActionResult, ActionType, SessionState
from sleuth.presentation.snapshot import SessionSnapshot, project_session
from sleuth.util.rng import Rng

logger = logging.getLogger(__name__)


class CaseEngine:
    """Single owner of a case playthrough.

    Views call the intent methods and re-render from ``snapshot()``; they never
    mutate ``state`` themselves. Intents report problems through
    ``state.last_feedback`` and the returned ``ActionResult`` instead of raising.
    """

    def __init__(self, case: Case, rng: Rng | None = None) -> None:
        self.case = case
        self.rng = rng or Rng(config.SEED)
        self.state = SessionState(case_id=case.id)
        logger.info("Case %s started: %s", case.id, case.title)

    @classmethod
    def start(cls, case_id: int = config.DEFAULT_CASE_ID, rng: Rng | None = None) -> "CaseEngine":
        """Start a case, raising CaseNotFoundError for unknown ids."""
        return cls(require_case(case_id), rng=rng)

    def snapshot(self) -> SessionSnapshot:
        return project_session(self.case, self.state)

    def remaining_points(self) -> int:
        return remaining_points(self.state)

    def can_accuse(self) -> bool:
        return accusation.can_accuse(self.case, self.state)

    def select_suspect(self, suspect_id: str) -> ActionResult:
        return actions.select_suspect(self.case, self.state, suspect_id)

    def arm_tool(self, tool_id: str | None) -> ActionResult:
        return actions.arm_tool(self.state, tool_id)

    def tap_statement(self, suspect_id: str, statement_id: str) -> ActionResult:
        return actions.tap_statement(self.case, self.state, suspect_id, statement_id)

    def open_minigame(self, minigame_id: str) -> MinigamePrompt | None:
        game = self.case.minigame(minigame_id)
        if game is None:
            return None
        return minigames.open_minigame(game, self.rng)

    def submit_minigame(self, minigame_id: str, answer: Any) -> ActionResult:
        return minigames.submit_minigame(self.case, self.state, minigame_id, answer)

    def advance_phase(self) -> ActionResult:
        return phases.advance_phase(self.case, self.state)

    def accuse(
        self, suspect_id: str, remediation: Remediation = Remediation.RETRY
    ) -> ActionResult:
        return accusation.accuse(self.case, self.state, suspect_id, remediation)

    def restart_case(self, case_id: int) -> ActionResult:
        case = get_case_by_id(case_id)
        if case is None:
            self.state.last_feedback = f"Case not found: {case_id}."
            return ActionResult(
                ActionType.RESTART_CASE, ActionOutcome.FAILURE, self.state.last_feedback
            )
        self.case = case
        self.state = SessionState(case_id=case.id)
        logger.info("Case %s restarted: %s", case.id, case.title)
        return ActionResult(ActionType.RESTART_CASE, ActionOutcome.SUCCESS, None)
