"""Investigation-points economy."""

from __future__ import annotations

import logging

from sleuth import config
from sleuth.investigation.results import SessionState
from sleuth.investigation.tools import tool_for

logger = logging.getLogger(__name__)

MINIGAME_CLUE = "Investigation complete: +1 Investigation Point."
MINIGAME_FEEDBACK = "Minigame completed (+1 Investigation Point)."


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def remaining_points(state: SessionState) -> int:
    return clamp(state.points_earned - state.points_spent, 0, config.POINTS_CAP)


def can_afford(state: SessionState, tool_id: str) -> bool:
    tool = tool_for(tool_id)
    return tool is not None and remaining_points(state) >= tool.cost


def spend_point(state: SessionState, tool_id: str) -> bool:
    """Debit the tool's cost, or decline without touching state."""
    tool = tool_for(tool_id)
    if tool is None:
        logger.warning("Spend requested for unknown tool %r", tool_id)
        return False
    if remaining_points(state) < tool.cost:
        logger.debug("Declined %s: %d remaining", tool.tool_id, remaining_points(state))
        return False
    state.points_spent += tool.cost
    return True


def complete_minigame(state: SessionState, minigame_id: str) -> bool:
    """Award the minigame point once; repeat completions change nothing."""
    if minigame_id in state.completed_minigame_ids:
        return False
    state.completed_minigame_ids.add(minigame_id)
    state.points_earned += config.MINIGAME_AWARD
    state.add_clue(MINIGAME_CLUE)
    state.last_feedback = MINIGAME_FEEDBACK
    logger.debug("Minigame %s completed, %d earned", minigame_id, state.points_earned)
    return True
