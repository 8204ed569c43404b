"""
Grouping strategy abstraction.
A strategy partitions enriched repositories into named sections, each sorted
for display. Implementations decide which section names exist.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from Showcase.Model.EnrichedRepository import EnrichedRepository


class IGroupingStrategy(ABC):
    """Abstract grouping strategy interface."""

    @abstractmethod
    def Group(self, repos: List[EnrichedRepository], sort_field: str = "title") -> Dict[str, List[EnrichedRepository]]:
        """Return an ordered mapping of section name to sorted repositories."""
        pass
