"""Tests for the primitive registry."""

from __future__ import annotations

import pytest

import termsketch.engine.primitives  # noqa: F401
from termsketch.engine.registry import PrimitiveRegistry, PrimitiveSpec, get_registry


def _noop(canvas) -> None:
    pass


def test_register_and_get():
    reg = PrimitiveRegistry()
    spec = PrimitiveSpec(name="dot", fn=_noop)
    reg.register(spec)
    assert reg.get("dot") is spec
    assert "dot" in reg
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = PrimitiveRegistry()
    reg.register(PrimitiveSpec(name="dot", fn=_noop))
    with pytest.raises(ValueError):
        reg.register(PrimitiveSpec(name="dot", fn=_noop))


def test_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        PrimitiveRegistry().get("missing")


def test_all_sorted_and_tag_filter():
    reg = PrimitiveRegistry()
    reg.register(PrimitiveSpec(name="b", fn=_noop, tags={"fill"}))
    reg.register(PrimitiveSpec(name="a", fn=_noop))
    assert [s.name for s in reg.all()] == ["a", "b"]
    assert [s.name for s in reg.with_tag("fill")] == ["b"]


def test_core_primitives_registered():
    names = {s.name for s in get_registry().all()}
    assert names == {
        "point",
        "line",
        "triangle",
        "rectangle",
        "circle",
        "equilateral_triangle",
        "text",
        "flood_fill",
        "guides",
        "caption",
    }


def test_fill_capable_primitives():
    names = [s.name for s in get_registry().with_tag("fill")]
    assert names == ["circle", "flood_fill", "rectangle"]
