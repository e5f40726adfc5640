"""
Prompt builders for the image and text models.

Every image prompt embeds a request nonce (nanosecond clock) so that repeated
requests with identical settings do not read as duplicates to the model. The
nonce is advisory text only.
"""
import json
import re
from time import time_ns

from config import (
    AUTHENTIC_OUTFITS, DEFAULT_ETHNIC_FEATURES, ETHNICITY_FEATURES_MAP, MODERN_OUTFITS,
    SENSUAL_OUTFITS, SHOT_TYPE_DESCRIPTIONS
)


def _nonce(nonce=None):
    return time_ns() if nonce is None else nonce


def get_ethnic_features(country):
    return ETHNICITY_FEATURES_MAP.get(country) or DEFAULT_ETHNIC_FEATURES


def get_shot_type_description(shot_type):
    """Resolve a shot type to its framing phrase, falling back to the raw value"""
    return SHOT_TYPE_DESCRIPTIONS.get(shot_type) or shot_type


def has_outfit_color(outfit_color):
    return bool(outfit_color) and outfit_color.strip().lower() != "any"


def get_outfit_pool(is_sensual, style):
    if is_sensual:
        return SENSUAL_OUTFITS
    return MODERN_OUTFITS if style == "modern" else AUTHENTIC_OUTFITS


def build_direct_prompt(model, scene, country, style, persona, nonce=None):
    """
    Build the compact prompt used for text-only generation (Imagen and the
    standard Gemini image engine). Output is collapsed onto a single line.
    """
    subject = "professional model" if persona == "professional" else "natural person"
    sensual_tone = (
        "tasteful, sensual portrait photograph where lighting and pose accentuate the "
        "subject's body shape, rendered as a "
        if model.is_sensual else ""
    )
    color_directive = (
        f"The primary color of the outfit MUST be {model.outfit_color}."
        if has_outfit_color(model.outfit_color) else ""
    )

    prompt = f"""
    **Novelty Mandate:** Request ID {_nonce(nonce)}. Every image must be a new concept.
    Do not repeat faces, compositions or styles from earlier requests.

    **Subject Mandate (NON-NEGOTIABLE):**
    1. The person photographed MUST be of **{country}** ethnicity.
    2. Ethnic Feature Guide (final authority on appearance): **"{get_ethnic_features(country)}"**.
    3. If the model description contradicts the guide, the guide wins.
    4. Avoid stereotypes; create a distinct individual every time.

    **Framing (NON-NEGOTIABLE):** The photograph MUST be a **{get_shot_type_description(scene.shot_type)}**.

    **Photo Details:**
    - Type: A {sensual_tone}hyper-realistic cinematic photograph.
    - Subject: A {model.age}-year-old {model.gender} {subject}.
    - Body Shape (NON-NEGOTIABLE): {model.body_shape}.
    - Pose: {model.pose}.
    - Description (guideline, overruled by the guide): {model.description}.
    - Tones (guideline, overruled by the guide): {model.tones}.
    - Outfit: {model.outfit}. {color_directive}
    - Expression: A {model.expression} expression.
    - Scene: In {scene.location}. Lighting is {scene.lighting}. Mood is {scene.mood}. Details: {scene.details}.
    - Style: {style}, culturally authentic to {country}.
    - Camera: Fujifilm X-T4, Fujinon 35mm f/1.4 lens, Classic Chrome film simulation.
    - Goal: Indistinguishable from a real photograph. Lived-in and authentic. NO CGI, 3D or artificial look.
    """
    return re.sub(r"\s+", " ", prompt).strip()


def _reference_instructions(reference):
    if not reference.is_active:
        return "No reference photo provided."

    style = (
        "Strongly match the artistic style, color grading and aesthetic of the reference."
        if reference.use_style else "Ignore the style of the reference."
    )
    composition = (
        "Replicate the composition and camera angle of the reference."
        if reference.use_composition else "Ignore the composition of the reference."
    )
    overlays = (
        "Preserve any text or icons from the reference."
        if reference.keep_overlays else "Do not include overlays from the reference."
    )
    return (
        "The attached image is a reference. Follow these rules:\n"
        f"    - Style: {style}\n"
        f"    - Composition: {composition}\n"
        f"    - Overlays: {overlays}"
    )


def build_full_prompt(model, scene, country, reference, style, persona, nonce=None):
    """Build the long-form prompt used when editing from a reference photo"""
    sensual_directive = ""
    if model.is_sensual:
        sensual_directive = f"""
  **Sensual Mode Directive:** The tone is intimate, tasteful and sensual. Lighting, pose and
  composition must artistically accentuate the subject's **{model.body_shape}** body shape.
  Nothing explicit or vulgar.
"""

    if persona == "professional":
        persona_directive = """
  **Subject Persona (CRITICAL):** The subject is a **Professional Model**. Pose, expression and
  gaze are confident, deliberate and aware of the camera.
"""
    else:
        persona_directive = """
  **Subject Persona (CRITICAL):** The subject is a **Normal Person**, not a model. Capture a
  genuine candid moment: natural, unposed and relaxed, as if a friend took the picture.
"""

    color_directive = (
        f"CRITICAL: The dominant color of the outfit MUST be **{model.outfit_color}**."
        if has_outfit_color(model.outfit_color) else ""
    )
    features = get_ethnic_features(country)

    return f"""
  **Primary Directive:** Create a single hyper-realistic photograph, indistinguishable from a photo
  taken by a world-class photographer on a real location. Authentic, candid and cinematic.

  **Novelty Mandate (HIGHEST PRIORITY):**
  - Unique seed for this generation: **{_nonce(nonce)}**. Use it to break out of creative patterns.
  - Treat this as a new project. Do not repeat lighting, palettes, poses or compositions.
{sensual_directive}{persona_directive}
  **Overall Style Mandate (CRITICAL):** The photograph follows a '{style}' aesthetic, from architecture
  and furniture to fashion and mood.

  **Cultural Context Adaptation (HIGHEST PRIORITY):**
  - Country: {country}
  - Adapt ALL other instructions to be authentic and culturally appropriate for {country}.
    - Subject (NON-NEGOTIABLE): ethnicity and physical features MUST be representative of a person from **{country}**.
      - Ethnic Feature Guide (ABSOLUTE RULE): **"{features}"**.
      - Diversity: avoid stereotypes and create a unique individual every time.
      - Conflict Resolution: if the Subject Details below conflict with the guide, IGNORE them and follow the guide.
    - Location: if a style named in the Environmental Context conflicts with {country}, merge the two.
      The location stays culturally {country}, with the named style as an influence only
      (a 'Scandinavian kitchen' in Japan is a Japanese home with Scandinavian design touches).

  **Framing (NON-NEGOTIABLE):** The photograph MUST be a **{get_shot_type_description(scene.shot_type)}**.

  **Prohibitions:**
  - NO artificial framing: no borders, black frames or added vignettes. Content runs to the edge.
  - NO CGI/3D look: no rendering, video game or plastic surfaces.
  - NO stock photo vibe: no sterile, perfectly staged or overly clean environments.

  **Subject Details (guideline, overruled by the guide):**
  - Individual: A {model.age}-year-old {model.gender} model.
  - Pose (NON-NEGOTIABLE): **{model.pose}**.
  - Physicality: {model.description}. The subject has a **{model.body_shape}** body shape.
  - Color Tones (hair, eyes, skin): {model.tones}.
  - Expression: A natural {model.expression}.
  - Outfit: {model.outfit}. Clothing shows realistic weight, creases and texture. {color_directive}

  **Environmental Context:**
  - Location: {scene.location}.
  - Atmosphere: A palpable {scene.mood} mood.
  - Scene Details: {scene.details}.

  **Photographic Engine:**
  - Camera: Fujifilm X-T4 with a Fujinon 35mm f/1.4 lens.
  - Film: Fujifilm Classic Chrome simulation, muted tones, organic grain (not digital noise).
  - Lighting: {scene.lighting}. Physically accurate, with soft penumbras, bounce fill and mixed color temperatures.
  - Lived-in reality: consistent shadows, accurate reflections, subtle signs of life and high-fidelity textures.

  **Reference Photo Instructions:**
    {_reference_instructions(reference)}
"""


def build_adaptation_prompt(preset, country):
    """Prompt asking the text model to rewrite a scene preset for a country."""
    return f"""You are a reality simulation engine. Adapt a preset scene concept into a realistic
profile of an average, everyday location in {country}.

**Absolute Realism, NOT Aesthetics:** Avoid glossy, idealized or "influencer" looks.
- AVOID: designer furniture, perfect cleanliness, trendy decor.
- INCLUDE: normal wear and tear, generic items, unplanned clutter, culturally specific commonplace objects.

**Adaptation Task:**
- Original Scene Concept: {preset.location}
- Original Scene Details: {preset.details}
- Target Country: {country}

Keep the essence of the preset. "Grandma's Kitchen" becomes the real, slightly messy kitchen of a
typical non-wealthy grandmother in {country}, never a stylized farmhouse-chic kitchen.

Return a JSON object with two keys:
- "location": the rewritten, culturally adapted location.
- "details": the rewritten details with sensory information grounded in unpolished reality."""


def build_randomization_prompt(unlocked, model, scene, country, style, persona, scene_type):
    """Prompt for the smart randomizer; asks for values for the unlocked fields only."""
    outfit_style = "tasteful and sensual" if model.is_sensual else style
    outfit_examples = get_outfit_pool(model.is_sensual, style)
    scene_instruction = (
        "The scene MUST be an indoor location."
        if scene_type == "indoor" else "The scene can be either indoor or outdoor."
    )

    return f"""
  You are a radical creative director for a high-volume photorealistic image tool. Generate creative,
  non-obvious and contextually fitting values for the unlocked fields below. Avoiding repetition is the
  highest priority.

  **Current Photoshoot Context:**
  - Country for Ethnicity & Location: {country}
  - Overall Style: {style}
  - Model Persona: {persona}
  - Sensual Mode: {model.is_sensual}
  - Current Model Details (avoid these): {json.dumps(model.model_dump())}
  - Current Scene Details (avoid these): {json.dumps(scene.model_dump())}

  **Task:** Generate new values for these fields ONLY: **{', '.join(unlocked.qualified_names())}**.
  Respond with a JSON object whose keys are the bare field names, and nothing else.

  **Rules:**
  1. RADICAL DIVERGENCE: new values must be a large creative leap from the current ones.
  2. AVOID CLICHES: reject the most stereotypical ideas for {country} and {style}.
  3. CULTURAL AWARENESS: every value must be authentic for {country}, {style} and {persona}.
  4. ETHNIC FEATURES (description or tones): follow this guide: **"{get_ethnic_features(country)}"**.
     Describe a specific individual, do not repeat the guide.
  5. BODY SHAPE: realistic and consistent with the description.
  6. OUTFIT: strictly '{outfit_style}' and appropriate for {country}. Invent a new outfit inspired by,
     but not copied from: {json.dumps(outfit_examples)}.
  7. OUTFIT COLOR: a suitable color, simple ('red') or descriptive ('sky blue').
  8. POSE: matches the persona ({persona}) and sensual mode ({model.is_sensual}).
  9. SCENE: a real, mundane, culturally authentic place in {country}. {scene_instruction}

  Generate the JSON response now.
"""
