# amenity_map/store.py
import json
import logging
import os

import requests

from amenity_map.models.feature import Feature

logger = logging.getLogger(__name__)

# 数据仓库状态
EMPTY = "empty"
READY = "ready"
FAILED = "failed"


class FeatureLoadError(Exception):
    """数据源不可用或内容无法解析"""
    pass


class StoreNotReadyError(Exception):
    """数据尚未成功加载时访问要素"""
    pass


class StoreAlreadyLoadedError(Exception):
    """已加载的数据仓库不允许再次加载"""
    pass


def read_source(source, timeout=10.0):
    """读取数据源原始文本：http(s) URL 走 requests，其余当作本地路径"""
    if source.startswith(("http://", "https://")):
        try:
            resp = requests.get(source, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FeatureLoadError(f"could not fetch {source}: {e}") from e
        return resp.text

    if not os.path.isfile(source):
        raise FeatureLoadError(f"data file not found: {source}")
    try:
        with open(source, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FeatureLoadError(f"could not read {source}: {e}") from e


def parse_feature_collection(text):
    """把 GeoJSON FeatureCollection 文本解析为 Feature 元组（保持原顺序）"""
    try:
        data = json.loads(text)
    except ValueError as e:
        raise FeatureLoadError(f"data is not valid JSON: {e}") from e

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise FeatureLoadError("data is not a GeoJSON FeatureCollection")
    raw_features = data.get("features")
    if not isinstance(raw_features, list):
        raise FeatureLoadError("FeatureCollection has no features list")

    features = []
    for i, raw in enumerate(raw_features):
        try:
            features.append(Feature.from_geojson(raw))
        except ValueError as e:
            raise FeatureLoadError(f"feature #{i} is malformed: {e}") from e
    return tuple(features)


class FeatureStore:
    """
    会话级数据仓库：
    1. 创建时为空（EMPTY）
    2. load() 成功后进入 READY，只加载一次
    3. 加载失败进入 FAILED，之后不能过滤
    """

    def __init__(self):
        self.state = EMPTY
        self.source = None
        self.error = None
        self._features = ()

    @property
    def ready(self):
        return self.state == READY

    @property
    def features(self):
        if not self.ready:
            raise StoreNotReadyError(f"feature store is {self.state}")
        return self._features

    def load(self, source, timeout=10.0):
        if self.ready:
            raise StoreAlreadyLoadedError(f"feature store already loaded from {self.source}")

        self.source = source
        try:
            features = parse_feature_collection(read_source(source, timeout=timeout))
        except FeatureLoadError as e:
            self.state = FAILED
            self.error = str(e)
            logger.error("Error loading amenity data from %s: %s", source, e)
            raise

        self._features = features
        self.state = READY
        self.error = None
        logger.info("Loaded %d amenities from %s", len(features), source)
        return features

    def status(self):
        return {
            "state": self.state,
            "source": self.source,
            "count": len(self._features),
            "error": self.error,
        }
