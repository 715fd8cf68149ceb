"""Domain models for case definitions."""

from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sleuth.domain.enums import Signal, ToolId, TruthClass
from sleuth.domain.rules import (
    ensure_index,
    ensure_permutation,
    ensure_single_match,
    ensure_unique_ids,
)


class CaseEntity(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str


class Statement(CaseEntity):
    text: str
    # Flavor for content authors; tool readouts come from the signals and notes.
    truth_class: TruthClass = TruthClass.PARTIAL
    tool_signals: Dict[ToolId, Signal] = Field(default_factory=dict)
    notepad_notes: List[str] = Field(default_factory=list)

    def signal_for(self, tool_id: ToolId) -> Signal:
        return self.tool_signals.get(tool_id, Signal.UNKNOWN)


class Suspect(CaseEntity):
    name: str
    role: str
    trait: str
    portrait_label: str
    statements: List[Statement] = Field(min_length=1)

    def statement(self, statement_id: str) -> Statement | None:
        return next((s for s in self.statements if s.id == statement_id), None)


class OrderingItem(CaseEntity):
    text: str


class MatchPair(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    left: str
    right: str


class MinigameBase(CaseEntity):
    title: str
    description: str = ""


class OrderingMinigame(MinigameBase):
    kind: Literal["ordering"] = "ordering"
    items: List[OrderingItem] = Field(min_length=1)
    solution: List[str]

    @model_validator(mode="after")
    def _check_solution(self) -> "OrderingMinigame":
        item_ids = [item.id for item in self.items]
        ensure_unique_ids(item_ids, "ordering item")
        ensure_permutation(self.solution, item_ids, f"Solution for {self.id}")
        return self


class MatchingMinigame(MinigameBase):
    kind: Literal["matching"] = "matching"
    pairs: List[MatchPair] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_pairs(self) -> "MatchingMinigame":
        ensure_unique_ids((pair.left for pair in self.pairs), "matching left")
        return self


class SingleChoiceMinigame(MinigameBase):
    kind: Literal["single_choice"] = "single_choice"
    prompt: str
    options: List[str] = Field(min_length=1)
    answer_index: int

    @model_validator(mode="after")
    def _check_answer(self) -> "SingleChoiceMinigame":
        ensure_index(self.answer_index, len(self.options), f"Answer index for {self.id}")
        return self


Minigame = Annotated[
    Union[OrderingMinigame, MatchingMinigame, SingleChoiceMinigame],
    Field(discriminator="kind"),
]


class Case(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    title: str
    crime_summary: str
    suspects: List[Suspect] = Field(min_length=1)
    culprit_id: str
    resolution_text: str
    minigames: List[Minigame] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_invariants(self) -> "Case":
        suspect_ids = [suspect.id for suspect in self.suspects]
        ensure_unique_ids(suspect_ids, "suspect")
        ensure_unique_ids(
            (st.id for suspect in self.suspects for st in suspect.statements), "statement"
        )
        ensure_unique_ids((game.id for game in self.minigames), "minigame")
        ensure_single_match(self.culprit_id, suspect_ids, "Culprit")
        return self

    def suspect(self, suspect_id: str) -> Suspect | None:
        return next((s for s in self.suspects if s.id == suspect_id), None)

    def minigame(self, minigame_id: str) -> Minigame | None:
        return next((m for m in self.minigames if m.id == minigame_id), None)
