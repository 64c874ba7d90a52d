import logging

from flask import Flask
from flask_cors import CORS

from config import Config


def create_app(config_class=Config):
    """Application factory for creating Flask app instances."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    # Configure CORS for the JSON API
    CORS(app, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', '*')}})

    # Import and register blueprints inside factory to avoid circular imports
    from web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix='/api')

    return app


# Create app instance for gunicorn and flask CLI
app = create_app()

if __name__ == '__main__':
    app.run(debug=True, port=5001)
