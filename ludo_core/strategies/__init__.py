from .base import BaseStrategy
from .human import HumanStrategy
from .random_choice import RandomStrategy
from .registry import STRATEGY_REGISTRY, available, create
from .rusher import RusherStrategy

__all__ = [
    "BaseStrategy",
    "HumanStrategy",
    "RandomStrategy",
    "RusherStrategy",
    "STRATEGY_REGISTRY",
    "available",
    "create",
]
