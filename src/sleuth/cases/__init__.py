"""Case catalog lookups."""

from .catalog import (
    CaseNotFoundError,
    get_case_by_id,
    list_cases,
    load_case_file,
    load_catalog,
    placeholder_case,
    require_case,
)

__all__ = [
    "CaseNotFoundError",
    "get_case_by_id",
    "list_cases",
    "load_case_file",
    "load_catalog",
    "placeholder_case",
    "require_case",
]
