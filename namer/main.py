import base64
import binascii
from functools import lru_cache
from typing import Optional, Tuple

from fastapi import Depends, FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, DEFAULT_NAME_COUNT
from .errors import GenerationFailure, InvalidInput
from .inputs import GenerationInput, ImageInput, ReferenceInput, TextInput
from .localization import error_message, invalid_input_message, tone_label
from .logging import get_logger
from .schemas import (
    GenerateNamesRequest,
    GenerateNamesResponse,
    GenerateRelatedRequest,
    OptionsResponse,
    OutputLanguage,
    Tone,
    ToneOption,
)
from .services.name_generator import NameGenerator
from .services.request_builder import describe_liked_name

logger = get_logger(__name__)

app = FastAPI(title="NamerAI API", version="1.0.0")

# Basic CORS to allow calls from a separate browser front end.
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache()
def get_name_generator() -> NameGenerator:
    """Shared generator, created on first use so the API key is only needed at request time."""
    return NameGenerator()


def decode_image(image_base64: Optional[str], mime_type: Optional[str]) -> Tuple[bytes, Optional[str]]:
    """Decode plain base64 or a data URL; a data URL's MIME type is used when none is given."""
    data = (image_base64 or "").strip()
    if data.startswith("data:"):
        header, _, data = data.partition(",")
        if not mime_type:
            mime_type = header[len("data:"):].split(";")[0] or None
    try:
        return base64.b64decode("".join(data.split()), validate=True), mime_type
    except (binascii.Error, ValueError) as exc:
        raise InvalidInput("image_base64 is not valid base64") from exc


def to_generation_input(payload: GenerateNamesRequest) -> GenerationInput:
    if payload.mode == "text":
        return TextInput(content=payload.content or "")
    if payload.mode == "reference":
        return ReferenceInput(content=payload.content or "")
    image_bytes, mime_type = decode_image(payload.image_base64, payload.mime_type)
    return ImageInput(content=image_bytes, mime_type=mime_type)


async def _run_generation(func, language: OutputLanguage, *args):
    try:
        return await run_in_threadpool(func, *args)
    except InvalidInput as exc:
        logger.info("invalid_generation_input", reason=str(exc))
        raise HTTPException(status_code=400, detail=invalid_input_message(language)) from exc
    except GenerationFailure as exc:
        raise HTTPException(status_code=502, detail=error_message(language)) from exc
    except Exception as exc:
        logger.exception("unexpected_generation_error")
        raise HTTPException(status_code=500, detail=error_message(language)) from exc


@app.post("/generate", response_model=GenerateNamesResponse)
async def generate_names(
    payload: GenerateNamesRequest,
    generator: NameGenerator = Depends(get_name_generator),
) -> GenerateNamesResponse:
    try:
        generation_input = to_generation_input(payload)
    except InvalidInput as exc:
        raise HTTPException(status_code=400, detail=invalid_input_message(payload.language)) from exc

    names = await _run_generation(
        generator.generate,
        payload.language,
        generation_input,
        payload.tone,
        payload.language,
    )
    return GenerateNamesResponse(names=names, request_id=payload.request_id)


@app.post("/generate/related", response_model=GenerateNamesResponse)
async def generate_related_names(
    payload: GenerateRelatedRequest,
    generator: NameGenerator = Depends(get_name_generator),
) -> GenerateNamesResponse:
    context = (payload.context_description or "").strip()
    if not context and payload.reference.name.strip():
        context = describe_liked_name(payload.reference.name, payload.reference.description or "")

    names = await _run_generation(
        generator.generate_related,
        payload.language,
        payload.reference.name,
        context,
        payload.tone,
        payload.language,
    )
    return GenerateNamesResponse(names=names, request_id=payload.request_id)


@app.get("/options", response_model=OptionsResponse)
async def options(language: OutputLanguage = OutputLanguage.EN) -> OptionsResponse:
    return OptionsResponse(
        tones=[ToneOption(value=tone, label=tone_label(tone, language)) for tone in Tone],
        languages=list(OutputLanguage),
        default_count=DEFAULT_NAME_COUNT,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("namer.main:app", host="0.0.0.0", port=8000, reload=True)
