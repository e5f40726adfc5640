"""
Field randomization for the model and scene editors.

Two flavours:
  * local  - instant, offline picks from the option tables in config.py
  * smart  - one structured-JSON call to the Gemini text model
"""
import logging
import random

from config import (
    AGE_RANGE, BODY_SHAPE_OPTIONS, EXPRESSION_OPTIONS, GENDER_OPTIONS, LIGHTING_OPTIONS,
    MOOD_OPTIONS, NON_SENSUAL_POSES, RANDOM_COLORS, RANDOM_DESCRIPTIONS, RANDOM_DETAILS,
    RANDOM_LOCATIONS, RANDOM_TONES, SENSUAL_POSES
)
from exceptions import JSONExtractionError, RandomizationError
from gemini_service import call_gemini_json, resolve_api_key
from prompts import build_randomization_prompt, get_outfit_pool
from utils import extract_json

logger = logging.getLogger(__name__)

# Option pools per field: callables receive (model, style).
MODEL_OPTION_POOLS = {
    "description": lambda model, style: RANDOM_DESCRIPTIONS,
    "gender": lambda model, style: GENDER_OPTIONS,
    "expression": lambda model, style: EXPRESSION_OPTIONS,
    "body_shape": lambda model, style: BODY_SHAPE_OPTIONS,
    "outfit": lambda model, style: get_outfit_pool(model.is_sensual, style),
    "outfit_color": lambda model, style: RANDOM_COLORS,
    "tones": lambda model, style: RANDOM_TONES,
    "pose": lambda model, style: SENSUAL_POSES if model.is_sensual else NON_SENSUAL_POSES,
}

SCENE_OPTION_POOLS = {
    "location": RANDOM_LOCATIONS,
    "lighting": LIGHTING_OPTIONS,
    "mood": MOOD_OPTIONS,
    "details": RANDOM_DETAILS,
}

# Structured-output schema per randomizable field.
FIELD_SCHEMAS = {
    "description": {"type": "STRING"},
    "gender": {"type": "STRING", "enum": GENDER_OPTIONS},
    "age": {"type": "INTEGER"},
    "expression": {"type": "STRING", "enum": EXPRESSION_OPTIONS},
    "body_shape": {"type": "STRING", "enum": BODY_SHAPE_OPTIONS},
    "outfit": {"type": "STRING"},
    "outfit_color": {"type": "STRING"},
    "tones": {"type": "STRING"},
    "pose": {"type": "STRING"},
    "location": {"type": "STRING"},
    "lighting": {"type": "STRING", "enum": LIGHTING_OPTIONS},
    "mood": {"type": "STRING", "enum": MOOD_OPTIONS},
    "details": {"type": "STRING"},
}


def pick_random(options, current=None, rng=None):
    """Pick an option different from `current`; use the full list if nothing else is left"""
    rng = rng or random
    candidates = [o for o in options if o != current] or list(options)
    return rng.choice(candidates)


def generate_local_randomization(unlocked, current_model, current_scene, style, rng=None):
    """Randomize the unlocked fields from the fixed option tables. No network."""
    rng = rng or random.Random()
    result = {}

    for name in unlocked.model:
        if name == "age":
            result["age"] = rng.randint(*AGE_RANGE)
            continue
        options = MODEL_OPTION_POOLS[name](current_model, style)
        result[name] = pick_random(options, getattr(current_model, name), rng)

    for name in unlocked.scene:
        result[name] = pick_random(SCENE_OPTION_POOLS[name], getattr(current_scene, name), rng)

    return result


def build_randomization_schema(unlocked):
    requested = set(unlocked.model) | set(unlocked.scene)
    properties = {name: dict(schema) for name, schema in FIELD_SCHEMAS.items() if name in requested}
    return {"type": "OBJECT", "properties": properties}


def generate_smart_randomization(api_key, unlocked, current_model, current_scene, country,
                                 style, persona, scene_type="any"):
    """
    Ask the Gemini text model for fresh values for the unlocked fields.

    Returns an empty dict without calling the API when nothing is unlocked.
    Only keys for unlocked fields are returned.
    """
    if unlocked.is_empty:
        return {}

    logger.info(f"[generate_smart_randomization] Randomizing: {', '.join(unlocked.qualified_names())}")
    schema = build_randomization_schema(unlocked)
    prompt = build_randomization_prompt(
        unlocked, current_model, current_scene, country, style, persona, scene_type
    )

    try:
        text = call_gemini_json(resolve_api_key(api_key), prompt, schema)
    except Exception as e:
        logger.error(f"[generate_smart_randomization] Gemini call failed: {e}")
        raise RandomizationError(str(e)) from e

    try:
        parsed = extract_json(text)
    except JSONExtractionError as e:
        logger.error(f"[generate_smart_randomization] Unreadable response. Original text: {text}")
        raise RandomizationError(
            "Failed to process randomization. The AI returned a response that could not be read."
        ) from e

    if not isinstance(parsed, dict):
        logger.error(f"[generate_smart_randomization] Expected a JSON object, got: {text}")
        raise RandomizationError(
            "Failed to process randomization. The AI returned a response that could not be read."
        )

    return {k: v for k, v in parsed.items() if k in schema["properties"]}
