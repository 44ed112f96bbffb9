# amenity_map/models/query_filter.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class QueryFilter:
    """一次查询解析出的过滤条件，两个字段都可为空"""
    amenity: Optional[str] = None   # 设施类型，如 "park"
    location: Optional[str] = None  # 小写子串，匹配 Feature.area

    @property
    def is_empty(self):
        return self.amenity is None and self.location is None

    def matches(self, feature):
        if self.amenity is not None and feature.amenity_type != self.amenity:
            return False
        if self.location is not None:
            # area 为空的点永远匹配不到地点条件
            if not feature.area or self.location not in feature.area.lower():
                return False
        return True

    def to_dict(self):
        return {"amenity": self.amenity, "location": self.location}
