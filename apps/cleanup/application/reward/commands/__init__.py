"""Reward commands."""

from apps.cleanup.application.reward.commands.exchange_reward import ExchangeRewardCommand
from apps.cleanup.application.reward.commands.redeem_pin import RedeemPinCommand

__all__ = ["ExchangeRewardCommand", "RedeemPinCommand"]
