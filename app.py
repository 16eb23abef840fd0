import sys, os
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from flask import Flask, request
from werkzeug.exceptions import HTTPException
from config import Config
from extensions import DatabaseGateway
from modules.reference.forms import InvalidField
from modules.reference.responses import fail
from register_blueprints import register_blueprints

def create_app(config_overrides=None, gateway=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    if not app.config.get("SECRET_KEY"):
        app.config["SECRET_KEY"] = "dev-change-me"

    # один шлюз (і набір пулів) на процес; тести підставляють свій
    if gateway is None:
        gateway = DatabaseGateway()
    gateway.init_app(app)

    register_blueprints(app)

    @app.get('/')
    def index():
        return {
            "success": True,
            "data": sorted(str(rule) for rule in app.url_map.iter_rules() if str(rule).startswith("/api/")),
        }

    # ── HTTP-помилки фреймворку під /api віддаємо тим самим JSON-конвертом
    def _http_error_handler(e):
        if not request.path.startswith("/api/"):
            return e
        app.logger.warning(f"{request.method} {request.path} -> {e.code} {e.name}")
        return fail(e.name, e.description, status=e.code)

    app.register_error_handler(HTTPException, _http_error_handler)

    # ── список/об'єкт замість скаляра у JSON: 400 "Invalid <field>"
    def _invalid_field_handler(e):
        app.logger.warning(f"{request.method} {request.path} -> invalid {e.field}: {e.description}")
        return fail(f"Invalid {e.field}", e.description, status=400)

    app.register_error_handler(InvalidField, _invalid_field_handler)

    return app

if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=5001, debug=True)
