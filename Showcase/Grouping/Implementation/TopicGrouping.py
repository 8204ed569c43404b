from typing import Dict, List

from Showcase.Grouping.Interface.IGroupingStrategy import IGroupingStrategy
from Showcase.Model.EnrichedRepository import EnrichedRepository
from Showcase.Utility.sorting import locale_sort_key

OTHER_GROUP = "Other"

"""Free-form grouping: one section per topic string, `Other` for untagged repositories."""
class TopicGrouping(IGroupingStrategy):
    def Group(self, repos: List[EnrichedRepository], sort_field: str = "title") -> Dict[str, List[EnrichedRepository]]:
        groups: Dict[str, List[EnrichedRepository]] = {}
        for repo in repos:
            # dict.fromkeys drops duplicate topics while keeping their order
            for topic in dict.fromkeys(repo.topics or [OTHER_GROUP]):
                groups.setdefault(topic, []).append(repo)
        return {
            topic: sorted(groups[topic], key=lambda r: locale_sort_key(r.sort_text(sort_field)))
            for topic in sorted(groups)
        }
