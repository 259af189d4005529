from dataclasses import dataclass
from typing import Optional, Tuple, Union


# -------------------
# User input (one variant per input mode)
# -------------------

@dataclass(frozen=True)
class TextInput:
    content: str          # free-form project description


@dataclass(frozen=True)
class ReferenceInput:
    content: str          # a name the user likes


@dataclass(frozen=True)
class ImageInput:
    content: bytes                   # decoded image bytes
    mime_type: Optional[str] = None  # falls back to image/png


GenerationInput = Union[TextInput, ReferenceInput, ImageInput]


# -------------------
# Outgoing payload parts
# -------------------

@dataclass(frozen=True)
class InlineImagePart:
    data: bytes
    mime_type: str


@dataclass(frozen=True)
class TextPart:
    text: str


Payload = Union[str, Tuple[Union[InlineImagePart, TextPart], ...]]
