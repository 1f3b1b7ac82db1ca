"""
Repositories and factories - Factory Pattern implementation.
"""

from .strategy_factory import StrategyFactory

__all__ = ['StrategyFactory']
