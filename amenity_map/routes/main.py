from flask import Blueprint, render_template, current_app

main = Blueprint('main', __name__)


# 首页路由
@main.route('/')
def index():
    cfg = current_app.config
    map_config = {
        "center": list(cfg['DEFAULT_CENTER']),
        "zoom": cfg['DEFAULT_ZOOM'],
        "tileUrl": cfg['TILE_URL'],
        "maxZoom": cfg['TILE_MAX_ZOOM'],
        "attribution": cfg['TILE_ATTRIBUTION'],
    }
    return render_template('index.html', map_config=map_config)
