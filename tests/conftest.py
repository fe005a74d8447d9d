"""Pytest configuration and shared fixtures."""

import random

import pytest

from visually_script import IdGenerator, Presentation, Settings


@pytest.fixture
def id_generator() -> IdGenerator:
    """Deterministic generator: frozen clock, seeded random source."""
    return IdGenerator(clock=lambda: 1700000000.0, rng=random.Random(42))


@pytest.fixture
def diagnostic_events() -> list:
    return []


@pytest.fixture
def presentation(id_generator, diagnostic_events) -> Presentation:
    return Presentation(
        id_generator=id_generator,
        on_diagnostic=diagnostic_events.append,
        settings=Settings(),
    )
