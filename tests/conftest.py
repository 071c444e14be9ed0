"""Shared pytest fixtures and configuration."""

import os

import pytest
from hypothesis import settings, HealthCheck

from layeredknowledge import DomainKnowledge

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "dev",
    max_examples=50,
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def knowledge() -> DomainKnowledge:
    """Empty container."""
    return DomainKnowledge()


@pytest.fixture
def two_layers() -> DomainKnowledge:
    """Layer A = [a1], layer B = [b1, b2], no relations."""
    dk = DomainKnowledge()
    dk.add_layer("A", ["a1"])
    dk.add_layer("B", ["b1", "b2"])
    return dk


@pytest.fixture
def chain() -> DomainKnowledge:
    """A -> B -> C with every table filled."""
    dk = DomainKnowledge()
    dk.add_layer("A", ["a1", "a2"])
    dk.add_layer("B", ["b1"])
    dk.add_layer("C", ["c1", "c2", "c3"])
    dk.add_dependency("A", "B", [[0.9], [0.1]])
    dk.add_dependency("B", "C", [[0.2, 0.5, 0.7]])
    return dk
