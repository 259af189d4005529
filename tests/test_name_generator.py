import base64
import json

import pytest
from openai import OpenAIError

from namer.errors import GenerationFailure, InvalidInput
from namer.inputs import ImageInput, ReferenceInput, TextInput
from namer.schemas import GeneratedName, OutputLanguage, Tone
from namer.services.name_generator import NameGenerator, build_response_format, parse_generated_names

from .conftest import CODEX


def test_generate_returns_parsed_names(make_generator, codex_reply):
    generator, responses = make_generator(output_text=codex_reply)

    names = generator.generate(
        TextInput("A fast code editor for Python developers"), Tone.MODERN, OutputLanguage.EN
    )

    assert names == [GeneratedName(**CODEX)]
    call = responses.calls[0]
    assert call["model"] == "test-model"
    assert call["temperature"] == 0.8
    assert call["input"] == "Project Description: A fast code editor for Python developers"
    assert "modern" in call["instructions"]
    assert "English" in call["instructions"]
    assert call["text"]["format"]["type"] == "json_schema"


def test_one_request_per_call(make_generator, codex_reply):
    generator, responses = make_generator(output_text=codex_reply)

    generator.generate(ReferenceInput("Slack"), Tone.PLAYFUL, OutputLanguage.EN)

    assert len(responses.calls) == 1


def test_image_payload_becomes_multimodal_message(make_generator, codex_reply):
    generator, responses = make_generator(output_text=codex_reply)

    generator.generate(ImageInput(b"img-bytes"), Tone.MINIMAL, OutputLanguage.EN)

    message = responses.calls[0]["input"][0]
    assert message["role"] == "user"
    image_part, text_part = message["content"]
    expected = base64.b64encode(b"img-bytes").decode("utf-8")
    assert image_part == {"type": "input_image", "image_url": f"data:image/png;base64,{expected}"}
    assert text_part["type"] == "input_text"
    assert "Tone: minimal" in text_part["text"]


def test_related_uses_higher_temperature(make_generator, codex_reply):
    generator, responses = make_generator(output_text=codex_reply)

    names = generator.generate_related("Slack", "", Tone.PLAYFUL, OutputLanguage.EN)

    assert names == [GeneratedName(**CODEX)]
    call = responses.calls[0]
    assert call["temperature"] == 0.85
    assert "A program named Slack" in call["instructions"]


def test_configured_count_reaches_instruction(make_generator, codex_reply):
    generator, responses = make_generator(output_text=codex_reply, count=3)

    generator.generate(TextInput("An app"), Tone.MODERN, OutputLanguage.EN)

    assert "Return exactly 3 items" in responses.calls[0]["instructions"]


@pytest.mark.parametrize("output_text", [None, "", "   "])
def test_empty_reply_is_an_empty_result(make_generator, output_text):
    generator, _ = make_generator(output_text=output_text)

    assert generator.generate(TextInput("An app"), Tone.MODERN, OutputLanguage.EN) == []


def test_transport_error_becomes_generation_failure(make_generator):
    generator, _ = make_generator(error=OpenAIError("connection reset by peer at 10.0.0.1"))

    with pytest.raises(GenerationFailure) as exc_info:
        generator.generate(TextInput("An app"), Tone.MODERN, OutputLanguage.EN)

    assert "10.0.0.1" not in str(exc_info.value)
    assert exc_info.value.__cause__ is None


def test_invalid_input_never_reaches_the_model(make_generator, codex_reply):
    generator, responses = make_generator(output_text=codex_reply)

    with pytest.raises(InvalidInput):
        generator.generate(TextInput("  "), Tone.MODERN, OutputLanguage.EN)
    with pytest.raises(InvalidInput):
        generator.generate_related("", "context", Tone.MODERN, OutputLanguage.EN)

    assert responses.calls == []


def test_malformed_reply_raises(make_generator):
    generator, _ = make_generator(output_text='[{"name": "Codex"')

    with pytest.raises(GenerationFailure):
        generator.generate(TextInput("An app"), Tone.MODERN, OutputLanguage.EN)


def test_parse_preserves_order_and_values():
    items = [
        {"name": "Codex", "tagline": "Write faster.", "description": "Evokes speed and code."},
        {"name": " Lumen ", "tagline": "Light for code", "description": "Clarity."},
        {"name": "Kodla", "tagline": "Hızlı yaz", "description": "Türkçe bir isim."},
    ]

    names = parse_generated_names(json.dumps(items, ensure_ascii=False))

    assert [n.model_dump() for n in names] == items


def test_parse_accepts_structured_output_envelope():
    names = parse_generated_names(json.dumps({"names": [CODEX]}))

    assert names == [GeneratedName(**CODEX)]


def test_parse_empty_array():
    assert parse_generated_names("[]") == []


@pytest.mark.parametrize("raw", [
    "not json",
    json.dumps({"name": "Codex"}),
    json.dumps({"names": [CODEX], "extra": 1}),
    json.dumps("Codex"),
    json.dumps([CODEX, "Codex"]),
    json.dumps([CODEX, {"name": "Lumen", "tagline": "Light"}]),
    json.dumps([{"name": "  ", "tagline": "Light", "description": "Clarity."}]),
    json.dumps([{"name": 42, "tagline": "Light", "description": "Clarity."}]),
])
def test_parse_rejects_nonconforming_reply(raw):
    with pytest.raises(GenerationFailure):
        parse_generated_names(raw)


def test_response_format_wraps_array_schema():
    schema = {"type": "array", "items": {"type": "string"}}

    fmt = build_response_format(schema)["format"]

    assert fmt["strict"] is True
    assert fmt["schema"]["properties"]["names"] is schema
    assert fmt["schema"]["required"] == ["names"]


def test_missing_api_key_is_a_generation_failure(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    generator = NameGenerator(model="test-model")

    with pytest.raises(GenerationFailure):
        generator.generate(ReferenceInput("Spotify"), Tone.MODERN, OutputLanguage.EN)


def test_related_transport_error_becomes_generation_failure(make_generator):
    generator, responses = make_generator(error=OpenAIError("upstream timeout"))

    with pytest.raises(GenerationFailure):
        generator.generate_related("Slack", "A chat app", Tone.PLAYFUL, OutputLanguage.EN)

    assert len(responses.calls) == 1


def test_related_malformed_reply_raises(make_generator):
    generator, _ = make_generator(output_text=json.dumps([{"name": "Huddle", "tagline": "Talk"}]))

    with pytest.raises(GenerationFailure):
        generator.generate_related("Slack", "A chat app", Tone.PLAYFUL, OutputLanguage.EN)


def test_related_empty_reply_is_an_empty_result(make_generator):
    generator, _ = make_generator(output_text="")

    assert generator.generate_related("Slack", "", Tone.PLAYFUL, OutputLanguage.EN) == []
