r"""
Tests for ``assign2d.debug``.
"""

from __future__ import annotations

import pytest

from assign2d import assign2d, debug


@pytest.fixture()
def debug_enabled(monkeypatch):
    monkeypatch.setenv("ASSIGN2D_DEBUG", "1")
    debug.check_debug_enabled.cache_clear()
    yield
    debug.check_debug_enabled.cache_clear()


@pytest.mark.parametrize(
    ["value", "enabled"],
    [("1", True), ("0", False), (None, False)],
    ids=("env:on", "env:off", "env:unset"),
)
def test_check_debug_enabled(monkeypatch, value, enabled):
    if value is None:
        monkeypatch.delenv("ASSIGN2D_DEBUG", raising=False)
    else:
        monkeypatch.setenv("ASSIGN2D_DEBUG", value)
    debug.check_debug_enabled.cache_clear()
    try:
        assert debug.check_debug_enabled() is enabled
    finally:
        debug.check_debug_enabled.cache_clear()


def test_debug_output(debug_enabled, capsys):
    assign2d([[1.0, 4.0], [2.0, 1.0], [3.0, 2.0]])

    out = capsys.readouterr().out
    assert "row 2: unassigned" in out
    assert "2/2 columns assigned" in out
