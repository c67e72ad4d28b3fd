"""
WordPDF Application Factory
"""
from datetime import datetime, timezone
from flask import Flask, jsonify
from werkzeug.exceptions import RequestEntityTooLarge
from config import get_config


def create_app(config_name=None):
    settings = get_config(config_name)
    app = Flask(__name__)
    app.config.from_object(settings)

    # Service loggers (wordpdf.services.*) propagate to app.logger
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Register blueprints
    from wordpdf.api import api_bp

    app.register_blueprint(api_bp)  # Routes carry their own /api prefix

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(e):
        app.logger.warning('Upload rejected: body exceeds %s bytes', app.config.get("MAX_CONTENT_LENGTH"))
        return jsonify({"error": "File too large"}), 413

    # Health check endpoint
    @app.route('/healthz')
    def healthz():
        """Health check for load balancers and monitoring"""
        return jsonify({
            "status": "ok",
            "version": app.config["APP_VERSION"],
            "timestamp": datetime.now(timezone.utc).isoformat()
        })

    # Version endpoint
    @app.route('/version')
    def version():
        """Version and build info"""
        return jsonify({
            "version": app.config["APP_VERSION"],
            "build_time": app.config["BUILD_TIME"],
            "git_commit": app.config["GIT_COMMIT"],
            "features": {
                "docx_to_pdf": True,
                "json_response": True,
                "text_sanitizer": True,
            }
        })

    app.logger.info('WordPDF %s ready (%s)', app.config["APP_VERSION"], settings.__name__)
    return app
