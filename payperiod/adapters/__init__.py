"""
Adapters layer - File-based inputs for replaying selection sessions.
"""

from .scenario_loader import Scenario, ScenarioLoader

__all__ = ["Scenario", "ScenarioLoader"]
