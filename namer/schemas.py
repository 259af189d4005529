from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class Tone(str, Enum):
    MODERN = "modern"
    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    PLAYFUL = "playful"
    MINIMAL = "minimal"


class OutputLanguage(str, Enum):
    EN = "en"
    TR = "tr"


# Language names used inside model instructions.
LANGUAGE_NAMES = {
    OutputLanguage.EN: "English",
    OutputLanguage.TR: "Turkish",
}


class GeneratedName(BaseModel):
    """One candidate returned by the model. Values are kept verbatim."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    tagline: StrictStr
    description: StrictStr

    @field_validator("name", "tagline", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class GenerateNamesRequest(BaseModel):
    mode: Literal["text", "reference", "image"]
    content: Optional[str] = Field("", description="Project description or reference name.")
    image_base64: Optional[str] = Field(
        None,
        description="Base64 image bytes, optionally as a data:<mime>;base64, URL.",
    )
    mime_type: Optional[str] = Field(None, description="Image MIME type; defaults to image/png.")
    tone: Tone = Tone.MODERN
    language: OutputLanguage = OutputLanguage.EN
    request_id: Optional[str] = Field(None, description="Echoed back so callers can drop stale replies.")


class LikedName(BaseModel):
    name: str
    tagline: Optional[str] = ""
    description: Optional[str] = ""


class GenerateRelatedRequest(BaseModel):
    reference: LikedName
    context_description: Optional[str] = Field(
        "",
        description="Original project description; synthesized from the liked name when blank.",
    )
    tone: Tone = Tone.MODERN
    language: OutputLanguage = OutputLanguage.EN
    request_id: Optional[str] = None


class GenerateNamesResponse(BaseModel):
    names: List[GeneratedName]
    request_id: Optional[str] = None


class ToneOption(BaseModel):
    value: Tone
    label: str


class OptionsResponse(BaseModel):
    tones: List[ToneOption]
    languages: List[OutputLanguage]
    default_count: int
