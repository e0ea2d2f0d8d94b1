import os

from flask import Flask

from .config import DevelopmentConfig, ProductionConfig, TestingConfig, INSECURE_ADMIN_SECRET
from .extensions import ma, cors, store, notifier

CONFIGS = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def create_app(config_name=None, overrides=None):
    app = Flask(__name__, instance_relative_config=False)
    env = config_name or os.getenv("FLASK_ENV", "development")
    app.config.from_object(CONFIGS.get(env, DevelopmentConfig))
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # initialize extensions
    ma.init_app(app)
    origins = [o.strip() for o in app.config["CORS_ORIGINS"].split(",")]
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": origins}},
        allow_headers=["Content-Type", "x-admin-secret"],
        methods=["GET", "POST", "OPTIONS"],
    )
    store.init_app(app)
    notifier.init_app(app)

    if app.config["ADMIN_SECRET"] == INSECURE_ADMIN_SECRET:
        app.logger.warning("ADMIN_SECRET is not set, using the insecure default. Set it before deploying.")

    # register blueprints
    from screenpay.routes.reward_routes import bp as rewards_bp
    from screenpay.routes.admin_routes import bp as admin_bp

    app.register_blueprint(rewards_bp)
    app.register_blueprint(admin_bp)

    from screenpay.commands import register_commands
    register_commands(app)

    # error handlers
    from screenpay.utils.exceptions import ServiceError
    from screenpay.utils.response_formatter import error_response, service_error_response

    @app.errorhandler(ServiceError)
    def service_error(e):
        return service_error_response(e)

    @app.errorhandler(400)
    def bad_request(e):
        return error_response("BAD_REQUEST", str(e), status=400)

    @app.errorhandler(404)
    def not_found(e):
        return error_response("NOT_FOUND", "Resource not found", status=404)

    @app.errorhandler(413)
    def too_large(e):
        return error_response("FILE_TOO_LARGE", "Uploaded file is too large", status=413)

    @app.errorhandler(500)
    def server_error(e):
        return error_response("SERVER_ERROR", "server error", status=500)

    store.ensure_exists()

    if app.config["SWEEPER_ENABLED"]:
        from screenpay.services.sweeper_service import start_sweeper
        start_sweeper(app)

    return app


def run():
    app = create_app(os.getenv("FLASK_ENV", "production"))
    app.logger.info("Server listening on port %s", app.config["PORT"])
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"], use_reloader=False)


if __name__ == "__main__":
    run()
