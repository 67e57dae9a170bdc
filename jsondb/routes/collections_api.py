import re

from flask import Blueprint, current_app, jsonify, request

from ..extensions import store

bp = Blueprint("collections_api", __name__)

_NUMERIC_ID = re.compile(r"^-?\d+(\.\d+)?$")


def _coerce_id(raw: str):
    """Stored ids are numbers; URL segments are strings."""
    if _NUMERIC_ID.match(raw):
        return float(raw) if "." in raw else int(raw)
    return raw


@bp.get("/<collection>")
def list_items(collection):
    return jsonify(store.list_all(collection))


@bp.get("/<collection>/<item_id>")
def get_item(collection, item_id):
    item = store.get_one(collection, _coerce_id(item_id))
    if item is None:
        return jsonify({"error": "Not found"}), 404
    return jsonify(item)


@bp.post("/<collection>")
def create_item(collection):
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({"error": "No data provided"}), 400
    if not isinstance(data, dict):
        return jsonify({"error": "Body must be a JSON object"}), 400

    try:
        item = store.create(collection, data)
    except OSError as e:
        current_app.logger.exception("Create in %r failed", collection)
        return jsonify({"error": str(e)}), 500

    return jsonify({"message": "Created", "data": item}), 201


@bp.route("/<collection>/<item_id>", methods=["PATCH", "PUT"])
def update_item(collection, item_id):
    patch = request.get_json(silent=True)
    if patch is None:
        patch = {}
    if not isinstance(patch, dict):
        return jsonify({"error": "Body must be a JSON object"}), 400

    item = store.update_item(collection, _coerce_id(item_id), patch)
    if item is None:
        return jsonify({"error": "Not found"}), 404
    return jsonify(item)


@bp.delete("/<collection>/<item_id>")
def delete_item(collection, item_id):
    if not store.delete_item(collection, _coerce_id(item_id)):
        return jsonify({"error": "Not found"}), 404
    return jsonify({"message": "Deleted"})
