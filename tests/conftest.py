"""Shared fixtures: a small rustdoc JSON index modelled on datafusion_expr."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from rustdoc_comments.load_index import FORMAT_VERSION


def _fn(item_id: int, name: str, docs: str | None, vis: Any = "public") -> dict:
    return {
        "id": item_id,
        "crate_id": 0,
        "name": name,
        "span": {"filename": "src/expr_fn.rs", "begin": [1, 0], "end": [3, 1]},
        "visibility": vis,
        "docs": docs,
        "links": {},
        "attrs": [],
        "deprecation": None,
        "inner": {"function": {"sig": {"inputs": [], "output": None}}},
    }


def _use(item_id: int, name: str, target: int | None, *, glob: bool = False) -> dict:
    return {
        "id": item_id,
        "crate_id": 0,
        "name": None,
        "visibility": "public",
        "docs": None,
        "inner": {
            "use": {"source": name, "name": name, "id": target, "is_glob": glob}
        },
    }


def _module(
    item_id: int, name: str, items: list[int], docs: str | None = None
) -> dict:
    return {
        "id": item_id,
        "crate_id": 0,
        "name": name,
        "visibility": "public",
        "docs": docs,
        "inner": {"module": {"is_crate": item_id == 0, "items": items}},
    }


SAMPLE_INDEX: dict[str, Any] = {
    "root": 0,
    "crate_version": "43.0.0",
    "includes_private": False,
    "format_version": FORMAT_VERSION,
    "index": {
        "0": _module(0, "datafusion_expr", [1, 5, 6, 9, 12], docs="Crate docs."),
        "1": _module(1, "expr_fn", [2, 3, 4], docs="Expression helpers."),
        "2": _fn(2, "lit", "Creates a literal expression."),
        "3": _fn(3, "col", None),
        "4": _fn(4, "hidden", "Crate-internal helper.", vis="crate"),
        "5": _use(5, "lit", 2),
        "6": _use(6, "literal", 2),
        "9": {
            "id": 9,
            "crate_id": 0,
            "name": "Expr",
            "visibility": "public",
            "docs": "A logical expression.",
            "inner": {
                "struct": {
                    "kind": {"plain": {"fields": [], "has_stripped_fields": False}},
                    "generics": {"params": [], "where_predicates": []},
                    "impls": [10, 11],
                }
            },
        },
        "10": {
            "id": 10,
            "crate_id": 0,
            "name": None,
            "visibility": "default",
            "docs": None,
            "inner": {"impl": {"trait": None, "items": [13], "is_synthetic": False}},
        },
        "11": {
            "id": 11,
            "crate_id": 0,
            "name": None,
            "visibility": "default",
            "docs": None,
            "inner": {
                "impl": {
                    "trait": {"path": "Display", "id": 98, "args": None},
                    "items": [14],
                    "is_synthetic": False,
                }
            },
        },
        "12": _module(12, "prelude", [15, 16]),
        "13": _fn(13, "alias", "Returns a copy of the expression with an alias."),
        "14": _fn(14, "fmt", "Formats the expression.", vis="default"),
        "15": _use(15, "expr_fn", 1, glob=True),
        "16": _use(16, "Serialize", 99),
    },
    "paths": {},
    "external_crates": {},
}


@pytest.fixture
def sample_index() -> dict[str, Any]:
    """Return a fresh copy of the sample rustdoc JSON document."""
    return copy.deepcopy(SAMPLE_INDEX)


@pytest.fixture
def index_file(tmp_path: Path, sample_index: dict[str, Any]) -> Path:
    """Write the sample index to disk and return its path."""
    path = tmp_path / "datafusion_expr.json"
    path.write_text(json.dumps(sample_index), encoding="utf-8")
    return path
