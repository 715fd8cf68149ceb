"""Minigame prompts and answer validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
from typing import Any

from sleuth.domain.enums import MinigameKind
from sleuth.domain.models import (
    Case,
    MatchingMinigame,
    Minigame,
    OrderingItem,
    OrderingMinigame,
    SingleChoiceMinigame,
)
from sleuth.investigation.economy import complete_minigame
from sleuth.investigation.results import ActionOutcome, ActionResult, ActionType, SessionState
from sleuth.util.rng import Rng

logger = logging.getLogger(__name__)

RETRY_MESSAGES = {
    MinigameKind.ORDERING: "Not quite. Try rearranging the order.",
    MinigameKind.MATCHING: "Some matches are off. Try again.",
    MinigameKind.SINGLE_CHOICE: "That’s not the strongest lead. Try again.",
}
ALREADY_COMPLETED = "Minigame already completed."
UNKNOWN_MINIGAME = "Unknown minigame."


@dataclass(frozen=True)
class MinigamePrompt:
    minigame_id: str
    kind: MinigameKind
    title: str
    description: str
    items: list[OrderingItem] = field(default_factory=list)
    lefts: list[str] = field(default_factory=list)
    right_options: list[str] = field(default_factory=list)
    prompt: str = ""
    options: list[str] = field(default_factory=list)


def check_ordering(game: OrderingMinigame, answer: Any) -> bool:
    if not isinstance(answer, (list, tuple)):
        return False
    return list(answer) == list(game.solution)


def check_matching(game: MatchingMinigame, answer: Any) -> bool:
    if not isinstance(answer, Mapping):
        return False
    return all(answer.get(pair.left) == pair.right for pair in game.pairs)


def check_single_choice(game: SingleChoiceMinigame, answer: Any) -> bool:
    if isinstance(answer, bool) or not isinstance(answer, int):
        return False
    return answer == game.answer_index


def check_answer(game: Minigame, answer: Any) -> bool:
    """Compare a submitted answer with the stored solution. No side effects."""
    if isinstance(game, OrderingMinigame):
        return check_ordering(game, answer)
    if isinstance(game, MatchingMinigame):
        return check_matching(game, answer)
    if isinstance(game, SingleChoiceMinigame):
        return check_single_choice(game, answer)
    raise TypeError(f"Unsupported minigame kind: {type(game).__name__}")


def open_minigame(game: Minigame, rng: Rng) -> MinigamePrompt:
    """Build a player-facing prompt with ordering items and match options shuffled."""
    kind = MinigameKind(game.kind)
    base = {
        "minigame_id": game.id,
        "kind": kind,
        "title": game.title,
        "description": game.description,
    }
    if isinstance(game, OrderingMinigame):
        return MinigamePrompt(**base, items=rng.shuffled(game.items))
    if isinstance(game, MatchingMinigame):
        return MinigamePrompt(
            **base,
            lefts=[pair.left for pair in game.pairs],
            right_options=rng.shuffled([pair.right for pair in game.pairs]),
        )
    if isinstance(game, SingleChoiceMinigame):
        return MinigamePrompt(**base, prompt=game.prompt, options=list(game.options))
    raise TypeError(f"Unsupported minigame kind: {type(game).__name__}")


def submit_minigame(
    case: Case, state: SessionState, minigame_id: str, answer: Any
) -> ActionResult:
    game = case.minigame(minigame_id)
    if game is None:
        logger.warning("Submission for unknown minigame %r", minigame_id)
        state.last_feedback = UNKNOWN_MINIGAME
        return ActionResult(ActionType.SUBMIT_MINIGAME, ActionOutcome.FAILURE, state.last_feedback)
    if game.id in state.completed_minigame_ids:
        state.last_feedback = ALREADY_COMPLETED
        return ActionResult(
            ActionType.SUBMIT_MINIGAME, ActionOutcome.NO_EFFECT, state.last_feedback
        )
    if not check_answer(game, answer):
        state.last_feedback = RETRY_MESSAGES[MinigameKind(game.kind)]
        return ActionResult(ActionType.SUBMIT_MINIGAME, ActionOutcome.FAILURE, state.last_feedback)
    complete_minigame(state, game.id)
    return ActionResult(ActionType.SUBMIT_MINIGAME, ActionOutcome.SUCCESS, state.last_feedback)
