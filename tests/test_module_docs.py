from __future__ import annotations

import importlib
import pkgutil

import pytest

import stayhub


def _module_names() -> list[str]:
    return [m.name for m in pkgutil.walk_packages(stayhub.__path__, prefix="stayhub.")]


@pytest.mark.parametrize("name", _module_names())
def test_module_has_header_docstring(name: str) -> None:
    module = importlib.import_module(name)
    assert module.__doc__, f"{name} has no module docstring"
    assert module.__doc__.strip().splitlines()[0] == name
