"""Request models validated from the JSON the UI layer sends."""
import base64
import re
from typing import List, Literal, Optional, get_args

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from config import (
    SCENE_PRESETS, AspectRatio, GenerationTier, ImageCount, ModelType, OverallStyle, SceneType
)

ModelField = Literal[
    "description", "gender", "age", "expression", "body_shape",
    "outfit", "outfit_color", "tones", "pose"
]
SceneField = Literal["location", "lighting", "mood", "details"]

MODEL_FIELDS = get_args(ModelField)
SCENE_FIELDS = get_args(SceneField)

DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)

# Photo locations a remote (HTTP) caller may name; file paths are for in-process callers only.
REMOTE_PHOTO_PREFIXES = ("http://", "https://", "data:")


class _RequestModel(BaseModel):
    @classmethod
    def from_dict(cls, data):
        return cls.model_validate(data or {})


class ModelData(_RequestModel):
    age: Optional[int] = None
    gender: Optional[str] = None
    expression: Optional[str] = None
    body_shape: Optional[str] = None
    outfit: Optional[str] = None
    outfit_color: Optional[str] = None
    description: Optional[str] = None
    tones: Optional[str] = None
    pose: Optional[str] = None
    is_sensual: bool = False


class SceneData(_RequestModel):
    location: Optional[str] = None
    lighting: Optional[str] = None
    mood: Optional[str] = None
    details: Optional[str] = None
    shot_type: Optional[str] = None


class ReferenceData(_RequestModel):
    """
    Optional reference photo and how to use it.

    `photo_data` carries the image itself (base64, or a `data:` URL). `photo`
    names where to load it from: an http(s) URL, or a local file path when the
    request is built in-process. Requests validated with the `remote` context
    flag may not name local files.
    """
    photo: Optional[str] = Field(None, description="http(s) URL, data URL, or local path (in-process only)")
    photo_data: Optional[str] = Field(None, description="Base64 image bytes or a data URL")
    mime_type: Optional[str] = None
    use_photo: bool = False
    use_style: bool = False
    use_composition: bool = False
    keep_overlays: bool = False

    @field_validator("photo")
    @classmethod
    def _remote_photo_is_not_a_path(cls, value, info: ValidationInfo):
        remote = bool(info.context and info.context.get("remote"))
        if remote and value and not value.startswith(REMOTE_PHOTO_PREFIXES):
            raise ValueError("photo must be an http(s) URL; send image bytes as photo_data")
        return value

    @model_validator(mode="after")
    def _unpack_data_url(self):
        if self.photo and self.photo.startswith("data:") and not self.photo_data:
            self.photo_data, self.photo = self.photo, None

        if self.photo_data:
            match = DATA_URL_RE.match(self.photo_data)
            if match:
                self.mime_type = self.mime_type or match.group("mime")
                self.photo_data = match.group("data")
            elif self.photo_data.startswith("data:"):
                raise ValueError("photo_data data URL must be base64 encoded")
            base64.b64decode(self.photo_data, validate=True)
        return self

    @property
    def is_active(self):
        return bool(self.use_photo and (self.photo or self.photo_data))


class UnlockedFields(_RequestModel):
    """Model and scene field names the randomizer may overwrite."""
    model: List[ModelField] = Field(default_factory=list)
    scene: List[SceneField] = Field(default_factory=list)

    @property
    def is_empty(self):
        return not self.model and not self.scene

    def qualified_names(self):
        return [f"model.{f}" for f in self.model] + [f"scene.{f}" for f in self.scene]


class GenerationRequest(_RequestModel):
    model: ModelData = Field(default_factory=ModelData)
    scene: SceneData = Field(default_factory=SceneData)
    reference: ReferenceData = Field(default_factory=ReferenceData)
    country: str = Field(..., min_length=1, description="Country driving ethnicity and location")
    style: OverallStyle = "modern"
    persona: ModelType = "professional"
    aspect_ratio: AspectRatio = "3:4"
    number_of_images: ImageCount = 1
    tier: GenerationTier = "premium"

    @classmethod
    def from_dict(cls, data, remote=False):
        """Validate a request body. `remote` marks bodies that arrived over HTTP."""
        if not data:
            raise ValueError("No configuration provided")
        return cls.model_validate(data, context={"remote": remote})


class AdaptSceneRequest(_RequestModel):
    """Either an explicit `scene` or the name of a built-in `preset`."""
    country: str = Field(..., min_length=1)
    scene: Optional[SceneData] = None
    preset: Optional[str] = None

    @model_validator(mode="after")
    def _resolve_preset(self):
        if self.scene is None:
            if self.preset not in SCENE_PRESETS:
                raise ValueError(f"Unknown scene preset: {self.preset!r}")
            self.scene = SceneData.model_validate(SCENE_PRESETS[self.preset])
        return self


class RandomizeRequest(_RequestModel):
    mode: Literal["local", "smart"] = "local"
    unlocked: UnlockedFields = Field(default_factory=UnlockedFields)
    model: ModelData = Field(default_factory=ModelData)
    scene: SceneData = Field(default_factory=SceneData)
    country: Optional[str] = None
    style: OverallStyle = "modern"
    persona: ModelType = "professional"
    scene_type: SceneType = "any"

    @model_validator(mode="after")
    def _smart_needs_country(self):
        if self.mode == "smart" and not self.country:
            raise ValueError("country is required for smart randomization")
        return self
