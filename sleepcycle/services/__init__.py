"""
Application services orchestrating domain logic for the CLI.
"""

from .sleep_planner import PlanDirection, SleepPlan, SleepPlanner

__all__ = ["PlanDirection", "SleepPlan", "SleepPlanner"]
