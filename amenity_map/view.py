# amenity_map/view.py
from markupsafe import escape

from amenity_map.models.feature import PARK

NO_RESULTS_NOTICE = "No results found for your query."
LOAD_FAILED_NOTICE = "Could not load amenity data."

# 圆点样式：公园绿色，其余红色
BASE_MARKER_STYLE = {
    "radius": 8,
    "color": "#000",
    "weight": 1,
    "opacity": 1,
    "fillOpacity": 0.8,
}
AMENITY_COLORS = {PARK: "green"}
DEFAULT_COLOR = "red"


def marker_style(amenity_type):
    style = dict(BASE_MARKER_STYLE)
    style["fillColor"] = AMENITY_COLORS.get(amenity_type, DEFAULT_COLOR)
    return style


def popup_html(feature):
    return f"<b>{escape(feature.name)}</b><br>{escape(feature.amenity_type)}"


def compute_bounds(features):
    """返回 [[south, west], [north, east]]；没有要素时返回 None"""
    if not features:
        return None
    lats = [f.lat for f in features]
    lons = [f.lon for f in features]
    return [[min(lats), min(lons)], [max(lats), max(lons)]]


def default_view(config):
    lat, lon = config["DEFAULT_CENTER"]
    return {"mode": "default", "center": [lat, lon], "zoom": config["DEFAULT_ZOOM"]}


def build_view(result, config):
    """
    把 SearchResult 转成前端绘制所需的数据：
    - 有结果：fitBounds 到所有点并留白
    - 无结果：回到默认中心/缩放；非空查询时附带提示
    """
    features = [
        f.to_geojson(style=marker_style(f.amenity_type), popup=popup_html(f))
        for f in result.features
    ]

    bounds = compute_bounds(result.features)
    if bounds is not None:
        padding = config["FIT_PADDING"]
        view = {"mode": "fit_bounds", "bounds": bounds, "padding": [padding, padding]}
    else:
        view = default_view(config)

    return {
        "query": result.query,
        "filter": result.query_filter.to_dict(),
        "type": "FeatureCollection",
        "features": features,
        "view": view,
        "notice": NO_RESULTS_NOTICE if result.no_results else None,
    }
