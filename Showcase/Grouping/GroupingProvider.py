"""Built-in grouping strategies and the policy-name lookup used by the site build."""

from __future__ import annotations
from typing import Dict, Optional
from Showcase.Grouping.GroupingFactory import GroupingFactory
from Showcase.Grouping.Implementation.LabelGrouping import LabelGrouping
from Showcase.Grouping.Implementation.TopicGrouping import TopicGrouping
from Showcase.Grouping.Interface.IGroupingStrategy import IGroupingStrategy

import logging
logger = logging.getLogger(__name__)

# Register built-in strategies
GroupingFactory.register("topics", lambda labels=None: TopicGrouping())
GroupingFactory.register("labels", lambda labels=None: LabelGrouping(labels))


class GroupingProvider:

    @staticmethod
    def InitializeStrategy(policy: str = "topics", labels: Optional[Dict[str, str]] = None) -> IGroupingStrategy:
        try:
            return GroupingFactory.create(policy, labels)
        except KeyError as e:
            logger.warning("%s, falling back to topics", e)
            return GroupingFactory.create("topics")
