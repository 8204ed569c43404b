from typing import Dict, List, Optional

from Showcase.Grouping.Interface.IGroupingStrategy import IGroupingStrategy
from Showcase.Model.EnrichedRepository import EnrichedRepository
from Showcase.Utility.SiteConfiguration import DEFAULT_TOPIC_LABELS
from Showcase.Utility.sorting import locale_sort_key

import logging
logger = logging.getLogger(__name__)

"""Fixed grouping: only topics listed in the label table produce sections.
    Sections follow the table order; repositories without a listed topic are left out.
"""
class LabelGrouping(IGroupingStrategy):
    def __init__(self, labels: Optional[Dict[str, str]] = None):
        self.labels = dict(labels if labels is not None else DEFAULT_TOPIC_LABELS)

    def Group(self, repos: List[EnrichedRepository], sort_field: str = "title") -> Dict[str, List[EnrichedRepository]]:
        groups: Dict[str, List[EnrichedRepository]] = {}
        for repo in repos:
            labels = [self.labels[t] for t in repo.topics if t in self.labels]
            if not labels:
                logger.debug("No labelled topic on %s, leaving it out", repo.name)
                continue
            for label in dict.fromkeys(labels):
                groups.setdefault(label, []).append(repo)
        ordered: Dict[str, List[EnrichedRepository]] = {}
        for label in dict.fromkeys(self.labels.values()):
            if label in groups:
                ordered[label] = sorted(groups[label], key=lambda r: locale_sort_key(r.sort_text(sort_field)))
        return ordered
