import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _env_float(name, default):
    value = os.environ.get(name)
    try:
        return float(value) if value else default
    except ValueError:
        return default


def _env_int(name, default):
    value = os.environ.get(name)
    try:
        return int(value) if value else default
    except ValueError:
        return default


class Config:
    # 数据源：本地 GeoJSON 路径或 http(s) URL
    FEATURE_SOURCE = os.environ.get("FEATURE_SOURCE", os.path.join(BASE_DIR, "data", "data.geojson"))
    FEATURE_SOURCE_TIMEOUT = _env_float("FEATURE_SOURCE_TIMEOUT", 10.0)  # seconds

    # 默认视图（阿布扎比）
    DEFAULT_CENTER = (
        _env_float("DEFAULT_CENTER_LAT", 24.47),
        _env_float("DEFAULT_CENTER_LON", 54.37),
    )
    DEFAULT_ZOOM = _env_int("DEFAULT_ZOOM", 12)
    FIT_PADDING = _env_int("FIT_PADDING", 50)  # px，fitBounds 上下左右留白

    # 底图
    TILE_URL = os.environ.get("TILE_URL", "https://tile.openstreetmap.org/{z}/{x}/{y}.png")
    TILE_MAX_ZOOM = _env_int("TILE_MAX_ZOOM", 19)
    TILE_ATTRIBUTION = os.environ.get("TILE_ATTRIBUTION", "© OpenStreetMap contributors")

    DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"
    TESTING = False


class TestConfig(Config):
    FEATURE_SOURCE = os.path.join(BASE_DIR, "tests", "fixtures", "amenities.geojson")
    TESTING = True
