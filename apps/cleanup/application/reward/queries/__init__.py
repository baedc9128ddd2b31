"""Reward queries."""

from apps.cleanup.application.reward.queries.get_rewards import GetRewardsQuery

__all__ = ["GetRewardsQuery"]
