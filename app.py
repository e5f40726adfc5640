import logging
import os

from flask import Flask, request, jsonify
from flask_cors import CORS
from dotenv import load_dotenv
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

import config
from gemini_service import adapt_scene_preset, generate_from_request
from models import AdaptSceneRequest, GenerationRequest, RandomizeRequest
from randomizer import generate_local_randomization, generate_smart_randomization

load_dotenv()

logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s"
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)


def _api_key():
    return request.headers.get('X-Gemini-Api-Key')


def _error(message, status):
    return jsonify({"status": "error", "message": message}), status


@app.errorhandler(ValidationError)
def handle_invalid_body(e):
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'request'}: {err['msg']}" for err in e.errors()
    )
    logger.warning(f"[Handler] Rejected request: {message}")
    return _error(message, 400)


@app.errorhandler(ValueError)
def handle_bad_request(e):
    logger.warning(f"[Handler] Rejected request: {e}")
    return _error(str(e), 400)


@app.errorhandler(Exception)
def handle_failure(e):
    if isinstance(e, HTTPException):
        return e
    logger.error(f"[Error] {str(e)}")
    return _error(str(e), 500)


@app.route('/options', methods=['GET'])
def options():
    return jsonify({
        "status": "success",
        "data": {
            "genders": config.GENDER_OPTIONS,
            "expressions": config.EXPRESSION_OPTIONS,
            "body_shapes": config.BODY_SHAPE_OPTIONS,
            "lighting": config.LIGHTING_OPTIONS,
            "moods": config.MOOD_OPTIONS,
            "shot_types": config.SHOT_TYPE_OPTIONS,
            "countries": sorted(config.ETHNICITY_FEATURES_MAP),
            "scene_presets": config.SCENE_PRESETS,
            "aspect_ratios": list(config.ASPECT_RATIOS),
            "tiers": list(config.GENERATION_TIERS),
        }
    }), 200


@app.route('/generate', methods=['POST'])
def generate():
    gen_request = GenerationRequest.from_dict(request.get_json(silent=True), remote=True)
    logger.info(f"[Handler] Received request to generate {gen_request.number_of_images} image(s) ({gen_request.tier}).")

    images = generate_from_request(_api_key(), gen_request)

    logger.info(f"[Handler] Generation process complete. Total images: {len(images)}")
    return jsonify({
        "status": "success",
        "message": f"Generated {len(images)} images",
        "data": {"images": images}
    }), 200


@app.route('/adapt-scene', methods=['POST'])
def adapt_scene():
    body = AdaptSceneRequest.from_dict(request.get_json(silent=True))

    scene = adapt_scene_preset(_api_key(), body.scene, body.country)
    return jsonify({
        "status": "success",
        "message": f"Scene adapted to {body.country}",
        "data": {"scene": scene}
    }), 200


@app.route('/randomize', methods=['POST'])
def randomize():
    body = RandomizeRequest.from_dict(request.get_json(silent=True))

    if body.mode == 'local':
        fields = generate_local_randomization(body.unlocked, body.model, body.scene, body.style)
    else:
        fields = generate_smart_randomization(
            _api_key(), body.unlocked, body.model, body.scene, body.country, body.style,
            body.persona, body.scene_type
        )

    return jsonify({
        "status": "success",
        "message": f"Randomized {len(fields)} field(s)",
        "data": {"fields": fields}
    }), 200


if __name__ == '__main__':
    port = int(os.getenv('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=True)
