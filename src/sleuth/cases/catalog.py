"""Load case definitions from YAML and fill the catalog with placeholders."""

from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path
from typing import Any

import yaml

from sleuth import config
from sleuth.domain.models import Case

logger = logging.getLogger(__name__)


class CaseNotFoundError(KeyError):
    def __init__(self, case_id: int):
        super().__init__(case_id)
        self.case_id = case_id

    def __str__(self) -> str:
        return f"Case not found: {self.case_id}"


def _data_dir() -> Path:
    return Path(__file__).resolve().parent / "data"


def load_case_file(path: Path) -> Case:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return Case.model_validate(data)


def _placeholder_suspect(case_id: int, index: int, letter: str) -> dict[str, Any]:
    suspect_id = f"c{case_id}-s{index}"
    return {
        "id": suspect_id,
        "name": f"Suspect {letter}",
        "role": "Placeholder Role",
        "trait": "Placeholder Trait",
        "portrait_label": letter,
        "statements": [
            {"id": f"{suspect_id}-1", "text": "Placeholder statement.", "truth_class": "partial"}
        ],
    }


def placeholder_case(case_id: int) -> Case:
    """Structure-only case for slots that have no authored content yet."""
    minigames: list[dict[str, Any]] = []
    if case_id < 10:
        minigames.append(
            {
                "id": f"c{case_id}-m1",
                "kind": "single_choice",
                "title": "Placeholder Minigame",
                "description": "Optional minigame placeholder.",
                "prompt": "Placeholder?",
                "options": ["A", "B", "C"],
                "answer_index": 0,
            }
        )
    return Case.model_validate(
        {
            "id": case_id,
            "title": f"Case {case_id} (Placeholder)",
            "crime_summary": "Placeholder crime description. Add content later.",
            "suspects": [
                _placeholder_suspect(case_id, index, letter)
                for index, letter in enumerate("ABC", start=1)
            ],
            "culprit_id": f"c{case_id}-s1",
            "resolution_text": "Placeholder resolution. Add content later.",
            "minigames": minigames,
        }
    )


@lru_cache(maxsize=1)
def load_catalog(data_dir: Path | None = None) -> dict[int, Case]:
    """Load authored cases once and pad the catalog up to CASE_COUNT."""
    cases: dict[int, Case] = {}
    for path in sorted((data_dir or _data_dir()).glob("case_*.yml")):
        case = load_case_file(path)
        if case.id in cases:
            raise ValueError(f"Duplicate case id {case.id} in {path.name}")
        cases[case.id] = case
        logger.debug("Loaded case %s from %s", case.id, path.name)
    for case_id in range(1, config.CASE_COUNT + 1):
        if case_id not in cases:
            cases[case_id] = placeholder_case(case_id)
    return dict(sorted(cases.items()))


def list_cases() -> list[Case]:
    return list(load_catalog().values())


def get_case_by_id(case_id: int) -> Case | None:
    case = load_catalog().get(case_id)
    if case is None:
        logger.warning("Unknown case id requested: %s", case_id)
    return case


def require_case(case_id: int) -> Case:
    case = get_case_by_id(case_id)
    if case is None:
        raise CaseNotFoundError(case_id)
    return case
