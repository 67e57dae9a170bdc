from pathlib import Path

from flask import Blueprint, current_app, jsonify, send_from_directory

bp = Blueprint("pages", __name__)


@bp.get("/", defaults={"path": ""})
@bp.get("/<path:path>")
def spa(path):
    """Serve the built front end; unknown paths get index.html."""
    prefix = current_app.config["API_PREFIX"].strip("/")
    if path == prefix or path.startswith(prefix + "/"):
        return jsonify({"error": "Not found"}), 404

    static_dir = Path(current_app.config["STATIC_DIR"])
    if path and (static_dir / path).is_file():
        return send_from_directory(static_dir, path)
    if (static_dir / "index.html").is_file():
        return send_from_directory(static_dir, "index.html")
    return jsonify({"error": "Front end not built"}), 404
