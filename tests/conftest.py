# ==============================================================================
# Shared Test Fixtures
# ==============================================================================
"""
Pytest fixtures shared across all test modules.

Provides:
- A factory for journeys with N generated steps
- The checkout journey used throughout the examples
- A two-journey list (2 and 4 steps) and its built graph
"""

import pytest

from journey_graph.journeys import build_graph
from journey_graph.models import Journey, JourneyStep


def make_journey(journey_id, step_count, name=None, confidence=50):
    """A journey whose steps are named 'Step 0', 'Step 1', ..."""
    return Journey(
        id=journey_id,
        name=name or f"Journey {journey_id}",
        confidence=confidence,
        steps=[JourneyStep(description=f"Step {i}", order=i) for i in range(step_count)],
    )


@pytest.fixture()
def journey_factory():
    return make_journey


@pytest.fixture()
def checkout_journey():
    return Journey(
        id="j1",
        name="Checkout",
        confidence=92,
        steps=[
            JourneyStep(description="Add to cart", order=0),
            JourneyStep(description="Click checkout", order=1),
        ],
    )


@pytest.fixture()
def login_journey():
    return Journey(
        id="j2",
        name="Login",
        confidence=80.5,
        type="login",
        steps=[
            JourneyStep(description="Open login", order=0, type="navigate"),
            JourneyStep(description="Enter email", order=1, requires_data=True, data_type="email", type="fill"),
            JourneyStep(description="Enter password", order=2, requires_data=True, data_type="password", type="fill"),
            JourneyStep(description="Submit", order=3, type="click"),
        ],
    )


@pytest.fixture()
def two_journeys(checkout_journey, login_journey):
    return [checkout_journey, login_journey]


@pytest.fixture()
def checkout_graph(checkout_journey):
    return build_graph([checkout_journey], current_url="https://shop.example.com/cart")


@pytest.fixture()
def two_journey_graph(two_journeys):
    return build_graph(two_journeys, current_url="https://shop.example.com")


@pytest.fixture()
def empty_graph():
    return build_graph([])
