from flask import Blueprint, request, jsonify, current_app

from amenity_map.search import interpret_query, run_search
from amenity_map.store import StoreNotReadyError
from amenity_map.view import build_view, LOAD_FAILED_NOTICE

api = Blueprint('api', __name__)


def get_store():
    return current_app.extensions['feature_store']


@api.errorhandler(StoreNotReadyError)
def store_not_ready(e):
    # 数据未加载成功：前端弹出提示，不做任何过滤
    return jsonify({"error": LOAD_FAILED_NOTICE, "detail": str(e)}), 503


# ========================== 设施查询 ==========================
@api.route('/search', methods=['GET'])
def search():
    """
    自由文本查询
    参数：
    - q: 查询文本，如 "Show parks"、"hospitals near Corniche"；为空时返回全部
    """
    query = request.args.get('q', '')
    result = run_search(get_store(), query)
    return jsonify(build_view(result, current_app.config))


@api.route('/interpret', methods=['GET'])
def interpret():
    """只返回解析出的过滤条件，不访问数据"""
    query = request.args.get('q', '')
    return jsonify({"query": query, "filter": interpret_query(query).to_dict()})


@api.route('/status', methods=['GET'])
def status():
    """数据仓库状态"""
    store = get_store()
    return jsonify(store.status()), (200 if store.ready else 503)
