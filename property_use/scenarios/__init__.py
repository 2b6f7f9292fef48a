"""Scenarios for simulated temporary-use workloads."""

from property_use.scenarios.community_use import CommunityUseScenario, ScenarioOutcome

__all__ = ["CommunityUseScenario", "ScenarioOutcome"]
