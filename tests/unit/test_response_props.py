"""Hypothesis property tests for courier responses.

Properties:

- **Failure**: ``failure(m)`` is not successful and carries ``m``.
- **Attach preserves outcome**: ``r.with_results(p)`` keeps ``r``'s success
  flag and message and carries ``p``, whatever the payload type.
- **Last write wins**: attaching twice equals attaching the last payload once.
- **Empty payload**: ``r.with_no_results(factory)`` carries ``factory()``.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from courier.response import Response, failure

pytestmark = [pytest.mark.property]

# ============================================================================
#                               Strategies
# ============================================================================

responses = st.builds(
    Response,
    success=st.booleans(),
    message=st.none() | st.text(max_size=40),
)

payloads = st.one_of(
    st.none(),
    st.integers(),
    st.text(max_size=20),
    st.lists(st.integers(), max_size=5),
    st.dictionaries(st.text(max_size=5), st.integers(), max_size=5),
)

empty_factories = st.sampled_from([list, dict, set, tuple, str, int, float, bytes])

# ============================================================================
#                               Properties
# ============================================================================


@given(message=st.text())
def test_failure_carries_message(message):
    """failure(m) is unsuccessful and keeps m verbatim."""
    response = failure(message)
    assert response.success is False
    assert response.message == message


@given(response=responses, payload=payloads)
def test_with_results_preserves_outcome(response, payload):
    """Attaching a payload keeps success and message."""
    attached = response.with_results(payload)
    assert attached.success == response.success
    assert attached.message == response.message
    assert attached.results == payload


@given(response=responses, first=payloads, second=payloads)
def test_with_results_last_write_wins(response, first, second):
    """Attaching twice is the same as attaching the last payload once."""
    assert response.with_results(first).with_results(
        second
    ) == response.with_results(second)


@given(response=responses, factory=empty_factories)
def test_with_no_results_is_empty_value(response, factory):
    """with_no_results carries the factory's empty value and keeps the outcome."""
    attached = response.with_no_results(factory)
    assert attached.results == factory()
    assert attached.success == response.success
    assert attached.message == response.message
