import base64
import json
import logging
import mimetypes
import re

import requests

from exceptions import MalformedJSONError, NoJSONObjectError

logger = logging.getLogger(__name__)

FENCED_JSON_RE = re.compile(r"```json\s*([\s\S]*?)\s*```")


def fetch_image_as_base64(image_url):
    """Fetch image from URL and return (base64 data, mime type)"""
    logger.info(f"[fetch_image_as_base64] Fetching image from URL: {image_url[:100]}...")
    response = requests.get(image_url, timeout=60)
    if response.status_code != 200:
        logger.error(f"[fetch_image_as_base64] Failed to fetch image: {response.status_code}")
        raise Exception(f"Failed to fetch image: {response.status_code}")

    mime_type = response.headers.get("Content-Type", "image/jpeg").split(";")[0].strip()
    return base64.b64encode(response.content).decode("utf-8"), mime_type


def file_to_base64(path):
    """Read a local image in one pass and return (base64 data, mime type)"""
    mime_type = mimetypes.guess_type(str(path))[0] or "image/jpeg"
    with open(path, "rb") as f:
        data = f.read()
    return base64.b64encode(data).decode("utf-8"), mime_type


def load_reference_image(reference):
    """
    Resolve a ReferenceData to (base64 data, mime type). Inline data wins,
    then an http(s) URL, then a local file path.
    """
    if reference.photo_data:
        return reference.photo_data, reference.mime_type or "image/jpeg"
    if reference.photo.startswith(("http://", "https://")):
        return fetch_image_as_base64(reference.photo)
    return file_to_base64(reference.photo)


def _from_fenced_block(text):
    match = FENCED_JSON_RE.search(text)
    if not match:
        raise NoJSONObjectError("No fenced JSON block in response.")
    try:
        return json.loads(match.group(1))
    except json.JSONDecodeError as e:
        logger.warning(f"[extract_json] Failed to parse JSON from markdown block, falling back: {e}")
        raise MalformedJSONError("AI returned malformed JSON.", match.group(1))


def _from_brace_span(text):
    first = text.find("{")
    last = text.rfind("}")
    if first == -1 or last == -1 or last < first:
        raise NoJSONObjectError("AI response did not contain a valid JSON object.")

    fragment = text[first:last + 1]
    try:
        return json.loads(fragment)
    except json.JSONDecodeError:
        logger.error(f"[extract_json] Failed to parse extracted JSON string: {fragment}")
        raise MalformedJSONError("AI returned malformed JSON.", fragment)


# Tried in order; the first strategy that parses wins.
EXTRACTION_STRATEGIES = [_from_fenced_block, _from_brace_span]


def extract_json(text):
    """
    Recover a JSON value from a model response that may wrap it in prose or
    markdown fences. Raises the last strategy's error if none succeed.
    """
    last_error = NoJSONObjectError("AI response did not contain a valid JSON object.")
    for strategy in EXTRACTION_STRATEGIES:
        try:
            return strategy(text or "")
        except (NoJSONObjectError, MalformedJSONError) as e:
            last_error = e
    raise last_error
