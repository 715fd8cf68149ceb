import pytest
from pydantic import ValidationError

from sleuth import config
from sleuth.cases.catalog import (
    CaseNotFoundError,
    get_case_by_id,
    list_cases,
    load_case_file,
    placeholder_case,
    require_case,
)
from sleuth.domain.enums import MinigameKind, Signal, ToolId, TruthClass
from sleuth.domain.models import Case, MatchingMinigame, OrderingMinigame, SingleChoiceMinigame


def _case_data(**overrides):
    data = {
        "id": 99,
        "title": "Test Case",
        "crime_summary": "Something went missing.",
        "culprit_id": "a",
        "resolution_text": "It was A.",
        "suspects": [
            {
                "id": "a",
                "name": "Alice",
                "role": "Clerk",
                "trait": "Quiet",
                "portrait_label": "A",
                "statements": [{"id": "a-1", "text": "Hello."}],
            },
            {
                "id": "b",
                "name": "Bob",
                "role": "Guard",
                "trait": "Loud",
                "portrait_label": "B",
                "statements": [{"id": "b-1", "text": "Hi."}],
            },
        ],
    }
    data.update(overrides)
    return data


def test_case_one_loads_from_yaml(case):
    assert case.id == 1
    assert case.title == "The Missing Prototype"
    assert case.culprit_id == "jenna"
    assert [s.id for s in case.suspects] == ["lena", "mark", "jenna"]
    assert sum(len(s.statements) for s in case.suspects) == 9


def test_case_one_minigames_are_tagged(case):
    kinds = {game.id: game.kind for game in case.minigames}
    assert kinds == {
        "timeline": MinigameKind.ORDERING,
        "evidence": MinigameKind.MATCHING,
        "pattern": MinigameKind.SINGLE_CHOICE,
    }
    assert isinstance(case.minigame("timeline"), OrderingMinigame)
    assert isinstance(case.minigame("evidence"), MatchingMinigame)
    assert isinstance(case.minigame("pattern"), SingleChoiceMinigame)
    assert case.minigame("timeline").solution == ["e1", "e2", "e3", "e4"]
    assert case.minigame("pattern").answer_index == 2


def test_statement_signals_default_to_unknown(case):
    statement = case.suspect("jenna").statement("jenna-2")
    assert statement.truth_class == TruthClass.MISLEADING
    assert statement.signal_for(ToolId.LIE_DETECTOR) == Signal.RED
    assert statement.signal_for(ToolId.WATCH) == Signal.UNKNOWN
    assert statement.signal_for(ToolId.NOTEPAD) == Signal.UNKNOWN


def test_catalog_has_placeholders_up_to_case_count():
    cases = list_cases()
    assert [c.id for c in cases] == list(range(1, config.CASE_COUNT + 1))
    assert cases[1].title == "Case 2 (Placeholder)"


def test_placeholder_minigames_only_for_early_cases():
    assert len(placeholder_case(9).minigames) == 1
    assert placeholder_case(10).minigames == []
    assert placeholder_case(4).culprit_id == "c4-s1"


def test_unknown_case_lookup():
    assert get_case_by_id(404) is None
    with pytest.raises(CaseNotFoundError) as excinfo:
        require_case(404)
    assert str(excinfo.value) == "Case not found: 404"


def test_culprit_must_match_a_suspect():
    with pytest.raises(ValidationError):
        Case.model_validate(_case_data(culprit_id="zed"))


def test_suspect_ids_must_be_unique():
    data = _case_data()
    data["suspects"][1]["id"] = "a"
    with pytest.raises(ValidationError):
        Case.model_validate(data)


def test_suspect_needs_statements():
    data = _case_data()
    data["suspects"][0]["statements"] = []
    with pytest.raises(ValidationError):
        Case.model_validate(data)


def test_minigame_ids_must_be_unique():
    game = {
        "id": "m",
        "kind": "single_choice",
        "title": "Pick",
        "prompt": "Which?",
        "options": ["x", "y"],
        "answer_index": 1,
    }
    with pytest.raises(ValidationError):
        Case.model_validate(_case_data(minigames=[game, dict(game)]))


def test_ordering_solution_must_cover_items():
    game = {
        "id": "order",
        "kind": "ordering",
        "title": "Order",
        "items": [{"id": "x", "text": "X"}, {"id": "y", "text": "Y"}],
        "solution": ["x", "x"],
    }
    with pytest.raises(ValidationError):
        Case.model_validate(_case_data(minigames=[game]))


def test_single_choice_answer_must_be_in_range():
    game = {
        "id": "pick",
        "kind": "single_choice",
        "title": "Pick",
        "prompt": "Which?",
        "options": ["x", "y"],
        "answer_index": 2,
    }
    with pytest.raises(ValidationError):
        Case.model_validate(_case_data(minigames=[game]))


def test_unknown_minigame_kind_is_rejected():
    game = {"id": "odd", "kind": "crossword", "title": "Odd"}
    with pytest.raises(ValidationError):
        Case.model_validate(_case_data(minigames=[game]))


def test_load_case_file(tmp_path):
    path = tmp_path / "case_099.yml"
    path.write_text(
        "\n".join(
            [
                "id: 99",
                "title: Test Case",
                "crime_summary: Something went missing.",
                "culprit_id: a",
                "resolution_text: It was A.",
                "suspects:",
                "  - id: a",
                "    name: Alice",
                "    role: Clerk",
                "    trait: Quiet",
                "    portrait_label: A",
                "    statements:",
                "      - id: a-1",
                "        text: Hello.",
                "        tool_signals:",
                "          stopwatch: yellow",
            ]
        ),
        encoding="utf-8",
    )
    case = load_case_file(path)
    assert case.id == 99
    assert case.suspect("a").statement("a-1").signal_for(ToolId.STOPWATCH) == Signal.YELLOW
