from __future__ import annotations

import pytest

import prompts
from config import DEFAULT_ETHNIC_FEATURES, ETHNICITY_FEATURES_MAP, SHOT_TYPE_DESCRIPTIONS
from models import ReferenceData


def _direct(model, scene, nonce=None, country="Japan"):
    return prompts.build_direct_prompt(model, scene, country, "modern", "professional", nonce=nonce)


def _full(model, scene, reference=None, nonce=None, country="Japan", persona="professional"):
    return prompts.build_full_prompt(
        model, scene, country, reference or ReferenceData(), "authentic", persona, nonce=nonce
    )


def test_direct_prompt_contains_country_shot_phrase_and_color(model_data, scene_data) -> None:
    prompt = _direct(model_data, scene_data)
    assert "Japan" in prompt
    assert SHOT_TYPE_DESCRIPTIONS["Medium shot"] in prompt
    assert "Burgundy" in prompt
    assert ETHNICITY_FEATURES_MAP["Japan"] in prompt


def test_direct_prompt_is_whitespace_normalized(model_data, scene_data) -> None:
    prompt = _direct(model_data, scene_data)
    assert "\n" not in prompt
    assert "  " not in prompt
    assert prompt == prompt.strip()


def test_full_prompt_contains_country_shot_phrase_and_color(model_data, scene_data) -> None:
    prompt = _full(model_data, scene_data)
    assert "Japan" in prompt
    assert SHOT_TYPE_DESCRIPTIONS["Medium shot"] in prompt
    assert "**Burgundy**" in prompt


def test_unknown_shot_type_and_country_fall_back(model_data, scene_data) -> None:
    scene_data.shot_type = "Dutch angle from below"
    for prompt in (_direct(model_data, scene_data, country="Atlantis"),
                   _full(model_data, scene_data, country="Atlantis")):
        assert "Dutch angle from below" in prompt
        assert "Atlantis" in prompt
        assert DEFAULT_ETHNIC_FEATURES in prompt


@pytest.mark.parametrize("color", [None, "", "any", "ANY", "Any"])
def test_outfit_color_directive_omitted_for_any_or_missing(model_data, scene_data, color) -> None:
    model_data.outfit_color = color
    assert "color of the outfit MUST" not in _direct(model_data, scene_data)
    assert "color of the outfit MUST" not in _full(model_data, scene_data)


def test_builders_differ_only_in_nonce(model_data, scene_data) -> None:
    first = _direct(model_data, scene_data, nonce=111111)
    second = _direct(model_data, scene_data, nonce=222222)
    assert first != second
    assert first.replace("111111", "222222") == second

    first = _full(model_data, scene_data, nonce=111111)
    second = _full(model_data, scene_data, nonce=222222)
    assert first.replace("111111", "222222") == second


def test_default_nonce_comes_from_clock_and_changes(monkeypatch, model_data, scene_data) -> None:
    ticks = iter([1_000_000_001, 1_000_000_002])
    monkeypatch.setattr(prompts, "time_ns", lambda: next(ticks))

    first = _direct(model_data, scene_data)
    second = _direct(model_data, scene_data)
    assert "1000000001" in first
    assert "1000000002" in second
    assert first != second


def test_sensual_directive_only_in_sensual_mode(model_data, scene_data) -> None:
    assert "Sensual Mode Directive" not in _full(model_data, scene_data)
    model_data.is_sensual = True
    prompt = _full(model_data, scene_data)
    assert "Sensual Mode Directive" in prompt
    assert "**Athletic** body shape" in prompt


def test_persona_clauses_are_exclusive(model_data, scene_data) -> None:
    professional = _full(model_data, scene_data, persona="professional")
    natural = _full(model_data, scene_data, persona="natural")
    assert "**Professional Model**" in professional
    assert "**Normal Person**" not in professional
    assert "**Normal Person**" in natural
    assert "**Professional Model**" not in natural

    assert "professional model" in _direct(model_data, scene_data)


def test_full_prompt_has_cultural_and_prohibition_clauses(model_data, scene_data) -> None:
    prompt = _full(model_data, scene_data)
    assert "Cultural Context Adaptation" in prompt
    assert "merge the two" in prompt
    assert "NO artificial framing" in prompt
    assert "NO CGI/3D look" in prompt
    assert "NO stock photo vibe" in prompt


def test_reference_instructions_follow_toggles(model_data, scene_data, reference_file) -> None:
    assert "No reference photo provided." in _full(model_data, scene_data)

    reference = ReferenceData(photo=str(reference_file), use_photo=True, use_style=True,
                              use_composition=False, keep_overlays=True)
    prompt = _full(model_data, scene_data, reference=reference)
    assert "No reference photo provided." not in prompt
    assert "Strongly match the artistic style" in prompt
    assert "Ignore the composition of the reference." in prompt
    assert "Preserve any text or icons" in prompt

    # A photo that is not switched on is ignored
    unused = ReferenceData(photo=str(reference_file), use_photo=False, use_style=True)
    assert "No reference photo provided." in _full(model_data, scene_data, reference=unused)


def test_randomization_prompt_lists_only_unlocked_fields(model_data, scene_data) -> None:
    from models import UnlockedFields

    unlocked = UnlockedFields(model=["outfit", "pose"], scene=["location"])
    prompt = prompts.build_randomization_prompt(
        unlocked, model_data, scene_data, "Kenya", "authentic", "natural", "indoor"
    )
    assert "**model.outfit, model.pose, scene.location**" in prompt
    assert "The scene MUST be an indoor location." in prompt
    assert "'authentic'" in prompt
    assert "Kenya" in prompt


def test_adaptation_prompt_mentions_preset_and_country(scene_data) -> None:
    prompt = prompts.build_adaptation_prompt(scene_data, "Peru")
    assert "A cramped apartment kitchen" in prompt
    assert "Dishes stacked in the sink" in prompt
    assert "Target Country: Peru" in prompt
