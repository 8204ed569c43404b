"""
Factory for grouping strategies. Strategies register themselves by key and
callers request instances via `create`.
"""
from typing import Callable, Dict
from Showcase.Grouping.Interface.IGroupingStrategy import IGroupingStrategy


class GroupingFactory:
    _registry: Dict[str, Callable[..., IGroupingStrategy]] = {}

    @classmethod
    def register(cls, key: str, creator: Callable[..., IGroupingStrategy]):
        cls._registry[key] = creator

    @classmethod
    def create(cls, key: str, *args, **kwargs) -> IGroupingStrategy:
        creator = cls._registry.get(key)
        if not creator:
            raise KeyError(f"Grouping strategy not registered: {key}")
        return creator(*args, **kwargs)

    @classmethod
    def registered_keys(cls):
        return sorted(cls._registry)
