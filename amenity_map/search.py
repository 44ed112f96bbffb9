# amenity_map/search.py
import logging
import re
from dataclasses import dataclass
from typing import List

from amenity_map.models.feature import Feature, PARK, HOSPITAL
from amenity_map.models.query_filter import QueryFilter

logger = logging.getLogger(__name__)

# 设施关键词：按顺序匹配，先命中者优先（park 在前）
AMENITY_PATTERNS = [
    (re.compile(r"\bparks?\b"), PARK),
    (re.compile(r"\b(?:hospitals?|clinics?)\b"), HOSPITAL),
]

# 地点关键词：介词 + 空白 + 地名
LOCATION_PATTERNS = [
    (re.compile(r"(?:near|at|in)\s+corniche"), "corniche"),
]


def interpret_query(text):
    """把自由文本解析为 QueryFilter；识别不到的词直接忽略，不会报错"""
    lowered = (text or "").lower()
    if not lowered.strip():
        return QueryFilter()

    amenity = None
    for pattern, amenity_type in AMENITY_PATTERNS:
        if pattern.search(lowered):
            amenity = amenity_type
            break

    location = None
    for pattern, place in LOCATION_PATTERNS:
        if pattern.search(lowered):
            location = place
            break

    return QueryFilter(amenity=amenity, location=location)


def filter_features(features, query_filter):
    """稳定过滤：保持原顺序，不修改输入"""
    return [feature for feature in features if query_filter.matches(feature)]


@dataclass
class SearchResult:
    query: str
    query_filter: QueryFilter
    features: List[Feature]

    @property
    def no_results(self):
        # 空查询永远不算"无结果"
        return not self.features and bool(self.query.strip())


def run_search(store, query):
    """解析 -> 过滤。数据未加载时由 store.features 抛出 StoreNotReadyError"""
    query = query or ""
    query_filter = interpret_query(query)
    matches = filter_features(store.features, query_filter)
    logger.info("Search %r -> %s, %d matches", query, query_filter.to_dict(), len(matches))
    return SearchResult(query=query, query_filter=query_filter, features=matches)
