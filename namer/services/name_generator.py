import base64
import json
from typing import Any, Dict, List, Optional

from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from ..config import DEFAULT_NAME_COUNT, MAX_RETRIES, MODEL
from ..errors import GenerationFailure
from ..inputs import GenerationInput, InlineImagePart, Payload, TextPart
from ..logging import get_logger
from ..schemas import GeneratedName, OutputLanguage, Tone
from .request_builder import GenerationRequest, build_generation_request, build_related_request

logger = get_logger(__name__)

# Structured outputs need an object at the root, so the name array travels in this key.
ENVELOPE_KEY = "names"


def build_response_format(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap the name array schema in the json_schema text format of the Responses API."""
    return {
        "format": {
            "type": "json_schema",
            "name": "generated_names",
            "strict": True,
            "schema": {
                "type": "object",
                "properties": {ENVELOPE_KEY: schema},
                "required": [ENVELOPE_KEY],
                "additionalProperties": False,
            },
        }
    }


def to_response_input(payload: Payload) -> Any:
    """Convert a built payload into Responses API input (plain text or one multimodal message)."""
    if isinstance(payload, str):
        return payload

    content = []
    for part in payload:
        if isinstance(part, InlineImagePart):
            b64 = base64.b64encode(part.data).decode("utf-8")
            content.append({"type": "input_image", "image_url": f"data:{part.mime_type};base64,{b64}"})
        elif isinstance(part, TextPart):
            content.append({"type": "input_text", "text": part.text})
        else:
            raise TypeError(f"Unsupported payload part: {type(part).__name__}")
    return [{"role": "user", "content": content}]


def parse_generated_names(raw_text: Optional[str]) -> List[GeneratedName]:
    """
    Strictly parse the model reply into candidates.

    Empty or missing text means the model produced nothing and yields an empty
    list. Anything else must be a JSON array of complete candidates (bare or in
    the {"names": [...]} envelope); otherwise GenerationFailure is raised and
    no partial list is returned.
    """
    if raw_text is None or not raw_text.strip():
        return []

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        logger.warning("name_reply_not_json", length=len(raw_text))
        raise GenerationFailure() from None

    if isinstance(data, dict) and set(data) == {ENVELOPE_KEY}:
        data = data[ENVELOPE_KEY]

    if not isinstance(data, list):
        logger.warning("name_reply_wrong_shape", received=type(data).__name__)
        raise GenerationFailure()

    try:
        return [GeneratedName.model_validate(item) for item in data]
    except ValidationError as exc:
        logger.warning("name_reply_invalid_item", errors=exc.error_count())
        raise GenerationFailure() from None


class NameGenerator:
    """Sends built naming requests to the model and validates the reply."""

    def __init__(
        self,
        client: OpenAI | None = None,
        model: str = MODEL,
        count: int = DEFAULT_NAME_COUNT,
    ):
        # Created on the first call, inside the transport error mapping.
        self._client = client
        self.model = model
        self.count = count

    def generate(
        self,
        generation_input: GenerationInput,
        tone: Tone,
        language: OutputLanguage,
    ) -> List[GeneratedName]:
        request = build_generation_request(generation_input, tone, language, count=self.count)
        logger.info(
            "generating_names",
            mode=type(generation_input).__name__,
            tone=str(Tone(tone).value),
            language=str(OutputLanguage(language).value),
        )
        return self._run(request)

    def generate_related(
        self,
        reference_name: str,
        context_description: Optional[str],
        tone: Tone,
        language: OutputLanguage,
    ) -> List[GeneratedName]:
        request = build_related_request(
            reference_name, context_description, tone, language, count=self.count
        )
        logger.info("generating_related_names", reference=reference_name.strip())
        return self._run(request)

    def _run(self, request: GenerationRequest) -> List[GeneratedName]:
        raw = self._call_model(request)
        names = parse_generated_names(raw)
        if not names:
            logger.info("no_names_returned", model=self.model)
        return names

    def _call_model(self, request: GenerationRequest) -> Optional[str]:
        try:
            if self._client is None:
                self._client = OpenAI(max_retries=MAX_RETRIES)
            response = self._client.responses.create(
                model=self.model,
                instructions=request.system_instruction,
                input=to_response_input(request.payload),
                temperature=request.temperature,
                text=build_response_format(request.response_schema),
            )
        except OpenAIError as exc:
            logger.error("name_generation_request_failed", model=self.model, error=repr(exc))
            raise GenerationFailure() from None
        return response.output_text
