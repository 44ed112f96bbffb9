import logging

from flask import Flask

from amenity_map.config import Config, BASE_DIR
from amenity_map.store import FeatureStore, FeatureLoadError

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__, root_path=BASE_DIR)
    app.config.from_object(config_class)

    # 启动时加载一次数据；失败时应用照常启动，接口返回 503
    store = FeatureStore()
    try:
        store.load(app.config['FEATURE_SOURCE'], timeout=app.config['FEATURE_SOURCE_TIMEOUT'])
    except FeatureLoadError:
        logger.warning("Starting without amenity data; searches will be rejected")
    app.extensions['feature_store'] = store

    # 注册蓝图
    from amenity_map.routes.main import main as main_bp
    from amenity_map.routes.api import api as api_bp
    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp, url_prefix='/api')

    return app
