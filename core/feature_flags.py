"""
Feature Flags for input handling

Environment variable EMPTY_INPUT_POLICY controls what happens when a caller
passes an empty keyword or thumbnail prompt:
- "forward": Send it to the backend as-is (default, matches the hosted app)
- "reject": Fail fast locally and return fallback data without a network call

Usage:
    from core.feature_flags import should_reject_empty_input

    if should_reject_empty_input(keyword):
        # Skip the provider call
"""

import os
from enum import Enum
from typing import Optional


class InputPolicy(Enum):
    """How empty user input is treated before a provider call."""
    FORWARD = "forward"  # Pass through unchanged
    REJECT = "reject"    # Refuse locally, no provider call


def get_input_policy() -> InputPolicy:
    """Get the current empty-input policy from environment."""
    policy = os.getenv("EMPTY_INPUT_POLICY", "forward").lower()
    try:
        return InputPolicy(policy)
    except ValueError:
        # Unknown values keep the hosted app's behaviour
        return InputPolicy.FORWARD


def should_reject_empty_input(
    value: str,
    policy: Optional[InputPolicy] = None,
) -> bool:
    """
    Determine if a user-supplied string should be refused locally.

    Args:
        value: Keyword or prompt as received from the caller
        policy: Explicit policy override (defaults to the environment)

    Returns:
        True if the value is blank and the policy is REJECT
    """
    if value and value.strip():
        return False

    return (policy or get_input_policy()) == InputPolicy.REJECT


def get_policy_status() -> dict:
    """Get current input policy configuration status."""
    policy = get_input_policy()
    return {
        "policy": policy.value,
        "description": {
            "forward": "Empty keywords and prompts are sent to the backend",
            "reject": "Empty keywords and prompts return fallback data locally",
        }.get(policy.value, "Unknown"),
        "env_var": "EMPTY_INPUT_POLICY",
        "current_value": os.getenv("EMPTY_INPUT_POLICY", "not set"),
    }
