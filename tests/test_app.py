"""Tests for wiring the configured trails together."""
from dataclasses import replace

import pytest

pytest.importorskip("mediapipe")

from fingertrail.app import build_orchestrator  # noqa: E402
from fingertrail.config import CFG  # noqa: E402


class TestBuildOrchestrator:
    """Tests for build_orchestrator."""

    def test_defaults(self):
        """Default config gives two 100-point trails with the standard thresholds."""
        orch = build_orchestrator(CFG)

        assert orch.left.max_length == 100
        assert orch.right.max_length == 100
        assert orch.left.debounce_ms == 100
        assert orch.left.idle_ms == 3000
        assert orch.left.color != orch.right.color
        assert orch.min_confidence == 0.1
        assert orch.easter_egg_threshold == 100
        assert orch.strict_handedness is False
        assert orch.overlay is None

    def test_overrides(self):
        """Config overrides flow into the trails."""
        cfg = replace(CFG, trail_max_length=7, stroke_width=2, strict_handedness=True)
        orch = build_orchestrator(cfg, overlay="egg")

        assert orch.left.max_length == 7
        assert orch.right.stroke_width == 2
        assert orch.strict_handedness is True
        assert orch.overlay == "egg"
