import json
import logging
import os
import tempfile

import ijson
import requests
from dotenv import load_dotenv

from exceptions import (
    AdaptationError, GeminiAPIError, GenerationBlockedError, GenerationError,
    JSONExtractionError, NoImageGeneratedError
)
from models import SceneData
from prompts import build_adaptation_prompt, build_direct_prompt, build_full_prompt
from utils import extract_json, load_reference_image

load_dotenv()

logger = logging.getLogger(__name__)

GEMINI_API_KEY = os.getenv('GEMINI_API_KEY')
GEMINI_API_BASE = os.getenv('GEMINI_API_BASE', "https://generativelanguage.googleapis.com/v1beta/models")
GEMINI_IMAGE_MODEL = os.getenv('GEMINI_IMAGE_MODEL', 'gemini-2.5-flash-image')
IMAGEN_MODEL = os.getenv('IMAGEN_MODEL', 'imagen-4.0-generate-001')
GEMINI_TEXT_MODEL = os.getenv('GEMINI_TEXT_MODEL', 'gemini-2.5-flash')
GEMINI_TIMEOUT = float(os.getenv('GEMINI_TIMEOUT', '300'))

ADAPTATION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "location": {"type": "STRING", "description": "The rewritten, culturally-adapted location description."},
        "details": {"type": "STRING", "description": "The rewritten, culturally-adapted details with sensory information."}
    },
    "required": ["location", "details"]
}


def resolve_api_key(api_key=None):
    """Prefer explicit credentials, fall back to GEMINI_API_KEY from the environment"""
    key = api_key or GEMINI_API_KEY
    if not key:
        raise GeminiAPIError("No Gemini API key provided. Pass credentials or set GEMINI_API_KEY.")
    return key


def model_url(model, method):
    return f"{GEMINI_API_BASE}/{model}:{method}"


def _headers(api_key):
    return {
        "Content-Type": "application/json",
        "x-goog-api-key": api_key
    }


def build_image_payload(prompt, aspect_ratio=None, reference=None):
    """Build the generateContent JSON payload into a temporary file and return its path"""
    logger.debug(f"[build_image_payload] Building disk-buffered payload (reference: {reference is not None})")

    tmp = tempfile.NamedTemporaryFile(mode='w+', delete=False, suffix='.json', encoding='utf-8')
    try:
        tmp.write('{"contents": [{"role": "user", "parts": [')

        # Reference image goes ahead of the instruction text
        if reference is not None:
            base64_data, mime_type = load_reference_image(reference)
            tmp.write(json.dumps({
                "inlineData": {
                    "mimeType": mime_type,
                    "data": base64_data
                }
            }))
            tmp.write(",")
            del base64_data

        tmp.write(json.dumps({"text": prompt}))

        tmp.write(']}], "generationConfig": {')
        tmp.write('"responseModalities": ["IMAGE"]')
        if aspect_ratio:
            tmp.write(f', "imageConfig": {{"aspectRatio": {json.dumps(aspect_ratio)}}}')
        tmp.write('}}')

        tmp.flush()
        tmp_name = tmp.name
        tmp.close()
        return tmp_name
    except Exception:
        tmp.close()
        if os.path.exists(tmp.name):
            os.remove(tmp.name)
        raise


def parse_image_response(stream):
    """
    Walk a generateContent response incrementally and collect the first inline
    image plus the signals needed to explain a missing one.
    """
    result = {
        "image": None,
        "mime_type": "image/png",
        "finish_reason": None,
        "block_reason": None,
        "has_parts": False,
    }

    for prefix, event, value in ijson.parse(stream):
        if prefix in ('candidates.item.content.parts.item.inlineData.data',
                      'candidates.item.content.parts.item.inline_data.data'):
            if result["image"] is None:
                result["image"] = value
        elif prefix in ('candidates.item.content.parts.item.inlineData.mimeType',
                        'candidates.item.content.parts.item.inline_data.mime_type'):
            result["mime_type"] = value
        elif prefix == 'candidates.item.content.parts.item' and event == 'start_map':
            result["has_parts"] = True
        elif prefix == 'candidates.item.finishReason' and result["finish_reason"] is None:
            result["finish_reason"] = value
        elif prefix == 'promptFeedback.blockReason':
            result["block_reason"] = value

    return result


def send_image_payload(api_key, payload_path, model=None):
    """POST a disk-buffered payload to an image-capable Gemini model and parse the streamed reply"""
    model = model or GEMINI_IMAGE_MODEL
    logger.info(f"[send_image_payload] Sending streaming request to {model}...")

    try:
        with open(payload_path, 'rb') as payload_file:
            response = requests.post(
                model_url(model, "generateContent"),
                headers=_headers(api_key),
                data=payload_file,
                stream=True,
                timeout=GEMINI_TIMEOUT
            )
    finally:
        if os.path.exists(payload_path):
            os.remove(payload_path)

    if response.status_code != 200:
        error_text = response.text
        logger.error(f"[send_image_payload] Gemini API error: {error_text}")
        raise GeminiAPIError(f"Gemini API error: {error_text}", response.status_code)

    response.raw.decode_content = True
    result = parse_image_response(response.raw)
    if result["image"]:
        logger.info(f"[send_image_payload] Extracted image data (length: {len(result['image'])}). Format: {result['mime_type']}")
    else:
        logger.warning(f"[send_image_payload] No image in response (finishReason={result['finish_reason']}, blockReason={result['block_reason']})")
    return result


def generate_imagen_images(api_key, prompt, number_of_images=1, aspect_ratio="1:1"):
    """Call the Imagen predict endpoint and return base64 images in response order"""
    logger.info(f"[generate_imagen_images] Requesting {number_of_images} image(s) at {aspect_ratio} from {IMAGEN_MODEL}...")

    payload = {
        "instances": [{"prompt": prompt}],
        "parameters": {
            "sampleCount": number_of_images,
            "aspectRatio": aspect_ratio,
            "outputOptions": {"mimeType": "image/png"}
        }
    }
    response = requests.post(
        model_url(IMAGEN_MODEL, "predict"),
        headers=_headers(api_key),
        json=payload,
        stream=True,
        timeout=GEMINI_TIMEOUT
    )

    if response.status_code != 200:
        error_text = response.text
        logger.error(f"[generate_imagen_images] Imagen API error: {error_text}")
        raise GeminiAPIError(f"Imagen API error: {error_text}", response.status_code)

    response.raw.decode_content = True
    # Filtered predictions carry no bytes and are skipped
    images = [
        value for prefix, event, value in ijson.parse(response.raw)
        if prefix == 'predictions.item.bytesBase64Encoded' and value
    ]
    logger.info(f"[generate_imagen_images] Received {len(images)} image(s)")
    return images


def call_gemini_json(api_key, prompt, response_schema, model=None):
    """Call a Gemini text model in JSON mode and return the raw response text"""
    model = model or GEMINI_TEXT_MODEL
    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": response_schema
        }
    }

    logger.debug(f"[call_gemini_json] Calling {model} with {len(response_schema.get('properties', {}))} schema field(s)")
    response = requests.post(
        model_url(model, "generateContent"),
        headers=_headers(api_key),
        json=payload,
        timeout=GEMINI_TIMEOUT
    )

    if response.status_code != 200:
        error_text = response.text
        logger.error(f"[call_gemini_json] Gemini API error: {error_text}")
        raise GeminiAPIError(f"Gemini API error: {error_text}", response.status_code)

    data = response.json()
    candidates = data.get("candidates") or [{}]
    parts = candidates[0].get("content", {}).get("parts", [])
    return "".join(part.get("text", "") for part in parts)


def _single_image(result, blocked_hint, empty_message):
    if result["image"]:
        return [result["image"]]

    reason = result["block_reason"] or result["finish_reason"]
    if reason and (result["block_reason"] or not result["has_parts"] or reason != "STOP"):
        raise GenerationBlockedError(f"Image generation failed. Reason: {reason}. {blocked_hint}", reason)
    raise NoImageGeneratedError(empty_message)


def generate_image(api_key, model, scene, reference, country, style, persona,
                   aspect_ratio="3:4", number_of_images=1, tier="premium"):
    """
    Generate photoshoot image(s) and return them as base64 strings.

    Paths:
      * reference photo in use -> Gemini image edit, full prompt, one image
      * standard tier          -> Gemini image model, direct prompt, one image
      * premium tier           -> Imagen, direct prompt, `number_of_images` images

    Exactly one remote call is made. Every failure is raised as GenerationError.
    """
    try:
        key = resolve_api_key(api_key)

        if reference.is_active:
            logger.info(f"[generate_image] Reference-guided edit for {country}")
            prompt = build_full_prompt(model, scene, country, reference, style, persona)
            payload_path = build_image_payload(prompt, reference=reference)
            result = send_image_payload(key, payload_path)
            return _single_image(
                result,
                "Please adjust your prompt.",
                "No image was generated by the AI. Please try adjusting your prompt or reference image."
            )

        prompt = build_direct_prompt(model, scene, country, style, persona)

        if tier == "standard":
            logger.info(f"[generate_image] Standard engine generation for {country}")
            payload_path = build_image_payload(prompt, aspect_ratio=aspect_ratio)
            result = send_image_payload(key, payload_path)
            return _single_image(
                result,
                "This may be due to safety policies.",
                "Image generation failed with Standard engine. No image data received."
            )

        logger.info(f"[generate_image] Premium engine generation for {country}")
        images = generate_imagen_images(key, prompt, number_of_images, aspect_ratio)
        if not images:
            raise NoImageGeneratedError(
                "Image generation failed. The model did not return any images. "
                "This may be due to safety policies. Please try adjusting your prompt to be less sensitive."
            )
        return images

    except GenerationError as e:
        logger.error(f"[generate_image] {e}")
        raise
    except Exception as e:
        logger.error(f"[generate_image] Error generating image: {e}")
        raise GenerationError(str(e) or "An unknown error occurred during image generation.") from e


def generate_from_request(api_key, request):
    return generate_image(
        api_key, request.model, request.scene, request.reference, request.country,
        request.style, request.persona, request.aspect_ratio, request.number_of_images,
        request.tier
    )


def adapt_scene_preset(api_key, preset, country):
    """Rewrite a scene preset's location and details for the given country"""
    if isinstance(preset, dict):
        preset = SceneData.from_dict(preset)

    logger.info(f"[adapt_scene_preset] Adapting '{preset.location}' to {country}")
    try:
        text = call_gemini_json(resolve_api_key(api_key), build_adaptation_prompt(preset, country), ADAPTATION_SCHEMA)
    except (GeminiAPIError, requests.RequestException) as e:
        logger.error(f"[adapt_scene_preset] Gemini call failed: {e}")
        raise AdaptationError(str(e)) from e

    unreadable = "Failed to adapt scene preset. The AI returned a response that could not be processed. Please try again."
    try:
        parsed = extract_json(text)
    except JSONExtractionError as e:
        logger.error(f"[adapt_scene_preset] Unreadable response. Original text: {text}")
        raise AdaptationError(unreadable) from e

    if not isinstance(parsed, dict):
        logger.error(f"[adapt_scene_preset] Expected a JSON object, got: {text}")
        raise AdaptationError(unreadable)

    return {k: parsed[k] for k in ("location", "details") if k in parsed}
