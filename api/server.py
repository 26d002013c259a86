import logging

from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv

from core import config
from routes.references_api import references_bp
from routes.study_api import study_bp
from routes.status_api import status_bp

load_dotenv()

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = Flask(__name__)

# Public read-only API: any origin, pre-flight answered by the extension
CORS(app)

# Register blueprints
app.register_blueprint(references_bp)
app.register_blueprint(study_bp)
app.register_blueprint(status_bp)

if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT)
