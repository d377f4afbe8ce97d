import logging
import os

from flask import Flask, jsonify

from config import get_config
from routes.assessment import assessment_bp

def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or get_config())

    # Debug only matters to the web server
    if app.config.get("DEBUG"):
        print("⚠️ WARNING: Debug mode is enabled. Disable in production!")

    logging.basicConfig(
        level=getattr(logging, app.config.get('LOG_LEVEL', 'INFO'), logging.INFO),
        format='%(levelname)s - %(name)s - %(message)s'
    )

    # Register blueprints
    app.register_blueprint(assessment_bp, url_prefix='/api/assessment')

    @app.route('/')
    def index():
        return jsonify({
            "name": "Career Path Decision System",
            "endpoints": {
                "start": "/api/assessment/start",
                "questions": "/api/assessment/questions",
                "submit_answer": "/api/assessment/submit-answer",
                "results": "/api/assessment/results",
                "report": "/api/assessment/report"
            }
        })

    @app.route('/healthz')
    def healthz():
        return ("", 200)

    return app

if __name__ == '__main__':
    app = create_app()
    port = int(os.environ.get('PORT', 5000))
    app.run(debug=app.config['DEBUG'], host='0.0.0.0', port=port)
