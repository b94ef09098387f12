import logging

from flask import Flask, jsonify, request

from quickpass.config import load_config
from quickpass.generator import CANONICAL_ORDER, generate_from
from quickpass.log import setup_logging
from quickpass.options import DEFAULT_CONFIG, ConfigError, parse_classes, validate

logger = logging.getLogger("quickpass.web")

app = Flask(__name__)


@app.errorhandler(ConfigError)
def handle_config_error(e):
    return jsonify({"error": str(e)}), 400


@app.route('/')
def home():
    return jsonify({
        "message": "QuickPass API is running"
    })


@app.route('/classes')
def classes_route():
    return jsonify([
        {"id": c.value, "label": c.label, "characters": c.chars}
        for c in CANONICAL_ORDER
    ])


@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ConfigError("request body must be a JSON object")
    cfg = DEFAULT_CONFIG
    if 'classes' in data:
        ids = data['classes']
        if isinstance(ids, str) or not isinstance(ids, list):
            raise ConfigError("classes must be a list of class ids")
        cfg = cfg.with_classes(parse_classes(ids))
    if 'length' in data:
        cfg = cfg.with_length(data['length'])
    cfg = validate(cfg)
    logger.debug("generate request: length=%d classes=%s", cfg.length, cfg.ids())
    password = generate_from(cfg)
    return jsonify({'password': password, 'length': cfg.length, 'classes': cfg.ids()})


if __name__ == "__main__":
    setup_logging(load_config().get("log_level", "WARNING"))
    app.run(debug=True)
