from __future__ import annotations

from typing import Dict, Type

from .base import BaseStrategy
from .human import HumanStrategy
from .random_choice import RandomStrategy
from .rusher import RusherStrategy

STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {
    RandomStrategy.name: RandomStrategy,
    RusherStrategy.name: RusherStrategy,
    HumanStrategy.name: HumanStrategy,
}


def create(strategy_name: str, **kwargs) -> BaseStrategy:
    cls = STRATEGY_REGISTRY.get(strategy_name.lower())
    if cls is None:
        raise KeyError(f"Unknown strategy '{strategy_name}'.")
    return cls(**kwargs)


def available(ignore_human: bool = True) -> Dict[str, Type[BaseStrategy]]:
    if ignore_human:
        return {
            name: cls
            for name, cls in STRATEGY_REGISTRY.items()
            if name != HumanStrategy.name
        }
    return dict(STRATEGY_REGISTRY)
