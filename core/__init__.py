"""
TrendPulse Core Components

Provides foundational infrastructure for the content planning services:
- Environment-driven configuration
- Feature flags for input handling
"""

from .config import Config, get_config, reload_config
from .feature_flags import InputPolicy, get_input_policy, should_reject_empty_input

__all__ = [
    "Config",
    "get_config",
    "reload_config",
    "InputPolicy",
    "get_input_policy",
    "should_reject_empty_input",
]
