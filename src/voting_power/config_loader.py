from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping

import yaml

from .errors import InvalidInputError
from .model.methods import IndexMethod


def load_config(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        msg = "Configuration file must contain a mapping at top level."
        raise ValueError(msg)
    return data


def selected_methods(cfg: Mapping[str, Any]) -> List[IndexMethod]:
    """Methods requested by ``method`` or ``methods``; both indices by default."""
    raw = cfg.get("methods", cfg.get("method"))
    if raw is None:
        return list(IndexMethod)
    if isinstance(raw, str):
        raw = [raw]
    methods: list[IndexMethod] = []
    for token in raw:
        method = IndexMethod.parse(token)
        if method not in methods:
            methods.append(method)
    if not methods:
        msg = "At least one index method must be selected."
        raise InvalidInputError(msg)
    return methods
