#!/usr/bin/env python3
"""
Generate program name ideas from the command line.

Usage:
  python generate_names.py --description "A fast code editor for Python developers"
  python generate_names.py --description-file README.md --tone professional --language tr
  python generate_names.py --reference Spotify --tone playful
  python generate_names.py --image logo.png
  python generate_names.py --more-like Codex --context "A fast code editor"

Requires .env with:
  OPENAI_API_KEY=...
"""

import argparse
import json
import mimetypes
import sys
from typing import List, Optional

from namer.config import DEFAULT_NAME_COUNT, DEFAULT_TONE
from namer.errors import NamerError
from namer.inputs import GenerationInput, ImageInput, ReferenceInput, TextInput
from namer.schemas import GeneratedName, OutputLanguage, Tone
from namer.services.name_generator import NameGenerator


def _read_description(path: Optional[str]) -> str:
    if path and path != "-":
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    return sys.stdin.read().strip()


def _read_image(path: str) -> ImageInput:
    with open(path, "rb") as f:
        data = f.read()
    mime_type, _ = mimetypes.guess_type(path)
    return ImageInput(content=data, mime_type=mime_type)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate name ideas for a software project.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--description", type=str, help="Project description text")
    source.add_argument("--description-file", type=str, help="Read the description from a file ('-' for stdin)")
    source.add_argument("--reference", type=str, help="A name you like, used as a style anchor")
    source.add_argument("--image", type=str, help="Path to a logo or visual identity image")
    source.add_argument("--more-like", type=str, help="Generate names close to a liked name")
    parser.add_argument("--context", type=str, default="", help="Project context for --more-like")
    parser.add_argument("--tone", choices=[t.value for t in Tone], default=DEFAULT_TONE)
    parser.add_argument("--language", choices=[lang.value for lang in OutputLanguage], default=OutputLanguage.EN.value)
    parser.add_argument("--count", type=int, default=DEFAULT_NAME_COUNT, help="Number of names to request")
    return parser


def _input_from_args(args: argparse.Namespace) -> GenerationInput:
    if args.image:
        return _read_image(args.image)
    if args.reference is not None:
        return ReferenceInput(content=args.reference)
    if args.description_file:
        return TextInput(content=_read_description(args.description_file))
    return TextInput(content=args.description)


def run(args: argparse.Namespace, generator: Optional[NameGenerator] = None) -> List[GeneratedName]:
    generator = generator or NameGenerator(count=args.count)
    tone = Tone(args.tone)
    language = OutputLanguage(args.language)
    if args.more_like is not None:
        return generator.generate_related(args.more_like, args.context, tone, language)
    return generator.generate(_input_from_args(args), tone, language)


def cli_main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        names = run(args)
    except NamerError as exc:
        raise SystemExit(f"Error: {exc}")

    out = {"names": [n.model_dump() for n in names]}
    print(json.dumps(out, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    cli_main()
