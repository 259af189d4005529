import copy
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..config import DEFAULT_IMAGE_MIME_TYPE, DEFAULT_NAME_COUNT, RELATED_TEMPERATURE, TEMPERATURE
from ..errors import InvalidInput
from ..inputs import GenerationInput, ImageInput, InlineImagePart, Payload, ReferenceInput, TextInput, TextPart
from ..schemas import LANGUAGE_NAMES, OutputLanguage, Tone

# Reply shape the model is constrained to: an array of name candidates.
NAME_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "The generated name for the program.",
            },
            "tagline": {
                "type": "string",
                "description": "A short, catchy slogan (max 5 words).",
            },
            "description": {
                "type": "string",
                "description": "A brief explanation of why this name fits the project.",
            },
        },
        "required": ["name", "tagline", "description"],
        "additionalProperties": False,
    },
}

TONE_GUIDANCE = {
    Tone.MODERN: "sleek and tech-forward, the kind of name a current developer tool would carry",
    Tone.PROFESSIONAL: "trustworthy and polished, suitable for business and enterprise software",
    Tone.CREATIVE: "imaginative and abstract, favouring unexpected metaphors and coinages",
    Tone.PLAYFUL: "fun and friendly, with a light, memorable rhythm",
    Tone.MINIMAL: "short and stripped back, ideally one or two syllables",
}


@dataclass(frozen=True)
class GenerationRequest:
    system_instruction: str
    payload: Payload
    response_schema: Dict[str, Any]
    temperature: float


def describe_liked_name(name: str, description: str = "") -> str:
    """Fallback project context built from a liked candidate."""
    name = name.strip()
    description = (description or "").strip()
    if description:
        return f"A program named {name}: {description}"
    return f"A program named {name}"


def _require_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise InvalidInput(f"{field} must not be empty")
    return value


def _require_count(count: int) -> None:
    if count < 1:
        raise InvalidInput("count must be at least 1")


def _style_block(tone: Tone, language: OutputLanguage) -> str:
    try:
        tone = Tone(tone)
        language_name = LANGUAGE_NAMES[OutputLanguage(language)]
    except ValueError as exc:
        raise InvalidInput(str(exc)) from exc
    return (
        f"Tone: {tone.value} ({TONE_GUIDANCE[tone]}).\n"
        f"Output Language: {language_name}. The 'tagline' and 'description' MUST be written in "
        f"{language_name}. The 'name' itself may be in any language, or an invented or abstract word, "
        "if that suits the project better."
    )


def _contract_block(count: int) -> str:
    return (
        f"Return exactly {count} items. Each item has:\n"
        "- name: the candidate name (never empty)\n"
        "- tagline: a catchy slogan of at most 5 words\n"
        "- description: a brief rationale tying the name back to the input"
    )


def _instruction(*blocks: str) -> str:
    return "\n\n".join(block.strip() for block in blocks)


def build_generation_request(
    generation_input: GenerationInput,
    tone: Tone,
    language: OutputLanguage,
    count: int = DEFAULT_NAME_COUNT,
) -> GenerationRequest:
    """Map one tagged user input to the instruction, payload and schema sent to the model."""
    _require_count(count)
    style = _style_block(tone, language)
    contract = _contract_block(count)

    if isinstance(generation_input, TextInput):
        description = _require_text(generation_input.content, "description")
        instruction = _instruction(
            "You are an expert naming consultant for software, startups, and tech projects.\n"
            f"Your goal is to generate {count} unique, catchy, and relevant names based on the "
            "user's project description.",
            style,
            "Ensure the names are diverse: some compound words, some abstract coinages, "
            "some descriptive phrases.",
            contract,
        )
        payload: Payload = f"Project Description: {description}"

    elif isinstance(generation_input, ReferenceInput):
        reference = _require_text(generation_input.content, "reference name").strip()
        instruction = _instruction(
            "You are an expert naming consultant.\n"
            f'The user likes the name "{reference}".',
            f"Your goal is to generate {count} NEW names that are similar in style, phonetics, "
            f'theme, or complexity to "{reference}".\n'
            "If the name belongs to a widely-known brand (e.g. Spotify, Slack), infer its brand "
            "qualities and produce names that evoke a comparable feel for a hypothetical product. "
            "Do not copy or lightly alter the brand. Otherwise, match its phonetic and structural style.",
            style,
            contract,
        )
        payload = f'Generate {count} names similar in vibe to "{reference}".'

    elif isinstance(generation_input, ImageInput):
        if not generation_input.content:
            raise InvalidInput("image content must not be empty")
        mime_type = (generation_input.mime_type or "").strip() or DEFAULT_IMAGE_MIME_TYPE
        instruction = _instruction(
            "You are an expert naming consultant for brands and software.\n"
            "Analyze the provided image (a logo or visual identity). Identify the core shapes, "
            "colors, mood, and abstract concepts represented in the visual.",
            f"Based on this visual analysis, generate {count} creative names that fit the visual identity.",
            style,
            contract,
        )
        payload = (
            InlineImagePart(data=bytes(generation_input.content), mime_type=mime_type),
            TextPart(
                text=f"Generate {count} program names that match this logo/visual style. "
                f"Tone: {Tone(tone).value}."
            ),
        )

    else:
        raise InvalidInput(f"Unsupported input type: {type(generation_input).__name__}")

    return GenerationRequest(
        system_instruction=instruction,
        payload=payload,
        response_schema=copy.deepcopy(NAME_RESPONSE_SCHEMA),
        temperature=TEMPERATURE,
    )


def build_related_request(
    reference_name: str,
    context_description: Optional[str],
    tone: Tone,
    language: OutputLanguage,
    count: int = DEFAULT_NAME_COUNT,
) -> GenerationRequest:
    """Instruction for "more like this": new names close to one the user liked."""
    _require_count(count)
    reference = _require_text(reference_name, "reference name").strip()
    context = (context_description or "").strip() or describe_liked_name(reference)

    instruction = _instruction(
        "You are an expert naming consultant.\n"
        "The user has generated a list of names for a software project and specifically LIKED "
        f'the name "{reference}".',
        f"Your goal is to generate {count} NEW names that are similar in style, phonetics, theme, "
        f'or complexity to "{reference}". Do not repeat "{reference}" itself.',
        f"Project Context: {context}",
        _style_block(tone, language),
        _contract_block(count),
    )
    payload = f'Generate {count} names similar to "{reference}" for the project described as: {context}'

    return GenerationRequest(
        system_instruction=instruction,
        payload=payload,
        response_schema=copy.deepcopy(NAME_RESPONSE_SCHEMA),
        temperature=RELATED_TEMPERATURE,
    )
