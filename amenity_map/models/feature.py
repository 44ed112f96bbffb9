# amenity_map/models/feature.py
import math
from dataclasses import dataclass
from typing import Optional

# 已知设施类型（当前数据只有这两类）
PARK = "park"
HOSPITAL = "hospital"
AMENITY_TYPES = (PARK, HOSPITAL)


def _coordinate(value, limit, label):
    """转成有限浮点数并检查范围；不合法时抛出 ValueError"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{label} must be a number")
    try:
        value = float(value)
    except OverflowError as e:
        raise ValueError(f"{label} is out of range") from e
    if not math.isfinite(value) or not -limit <= value <= limit:
        raise ValueError(f"{label} is out of range")
    return value


@dataclass(frozen=True)
class Feature:
    """一个兴趣点（WGS84 经纬度 + 名称、设施类型、所在区域）"""
    lat: float
    lon: float
    name: str
    amenity_type: str
    area: Optional[str] = None

    @classmethod
    def from_geojson(cls, feature):
        """由 GeoJSON Point Feature 构造；结构不对时抛出 ValueError"""
        if not isinstance(feature, dict) or feature.get("type") != "Feature":
            raise ValueError("not a GeoJSON Feature")

        geometry = feature.get("geometry")
        if not isinstance(geometry, dict) or geometry.get("type") != "Point":
            raise ValueError("geometry must be a Point")
        coords = geometry.get("coordinates")
        if not isinstance(coords, (list, tuple)) or len(coords) < 2:
            raise ValueError("Point needs [lon, lat] coordinates")
        lon = _coordinate(coords[0], 180, "longitude")
        lat = _coordinate(coords[1], 90, "latitude")

        props = feature.get("properties")
        if not isinstance(props, dict):
            raise ValueError("properties must be an object")
        name = props.get("name")
        amenity_type = props.get("amenity_type")
        if not name or not amenity_type:
            raise ValueError("properties need name and amenity_type")
        area = props.get("area")

        return cls(
            lat=lat,
            lon=lon,
            name=str(name),
            amenity_type=str(amenity_type),
            area=str(area) if area is not None else None,
        )

    def to_geojson(self, **extra_properties):
        properties = {"name": self.name, "amenity_type": self.amenity_type, "area": self.area}
        properties.update(extra_properties)
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [self.lon, self.lat]},
            "properties": properties,
        }
