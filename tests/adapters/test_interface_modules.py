"""Ensure interface adapter packages expose the expected metadata."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "package",
    ["src.adapters.interface", "src.adapters.interface.streamlit"],
)
def test_interface_packages_export_nothing(package) -> None:
    assert import_module(package).__all__ == []


def test_streamlit_app_exposes_entry_point() -> None:
    module = import_module("src.adapters.interface.streamlit.app")
    assert callable(module.main)
