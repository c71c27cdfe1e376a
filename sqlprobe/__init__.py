from typing import Any, Mapping, Optional

from flask import Flask
from .config import Config
from .routes.hello import bp as hello_bp
from .routes.probe import bp as probe_bp

def create_app(overrides: Optional[Mapping[str, Any]] = None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    # keep {"ok": ..., "message": ...} in declaration order
    app.json.sort_keys = False

    # routes
    app.register_blueprint(hello_bp)
    app.register_blueprint(probe_bp)

    return app
