import sys

import pytest

from sable.config import DEFAULT_MAX_DEPTH, depth_ceiling, get_max_depth


def test_default(monkeypatch):
    monkeypatch.delenv("SABLE_MAX_DEPTH", raising=False)
    assert get_max_depth() == DEFAULT_MAX_DEPTH


def test_from_environment(monkeypatch):
    monkeypatch.setenv("SABLE_MAX_DEPTH", " 64 ")
    assert get_max_depth() == 64


@pytest.mark.parametrize("raw", ["lots", "0", "-3", "1.5"])
def test_invalid_values_fall_back(monkeypatch, raw):
    monkeypatch.setenv("SABLE_MAX_DEPTH", raw)
    assert get_max_depth() == DEFAULT_MAX_DEPTH


def test_large_values_are_capped(monkeypatch):
    monkeypatch.setenv("SABLE_MAX_DEPTH", "5000")
    assert depth_ceiling() < 5000
    assert get_max_depth() == depth_ceiling()


def test_ceiling_follows_recursion_limit(monkeypatch):
    monkeypatch.setattr(sys, "getrecursionlimit", lambda: 500)
    assert depth_ceiling() == 100
