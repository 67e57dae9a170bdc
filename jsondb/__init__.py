from flask import Flask
from .config import Config
from .extensions import cors, store


def create_app(config_class: type[Config] = Config):
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)

    # Extensions
    cors.init_app(app)
    store.init_app(app)

    # Blueprints
    from .routes.collections_api import bp as collections_api
    from .routes.pages import bp as pages_bp

    app.register_blueprint(collections_api, url_prefix=app.config["API_PREFIX"])
    app.register_blueprint(pages_bp)

    return app
