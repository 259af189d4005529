"""User-facing strings returned by the API, per output language."""

from .schemas import OutputLanguage, Tone

TONE_LABELS = {
    OutputLanguage.EN: {
        Tone.MODERN: "Modern & Techy",
        Tone.PROFESSIONAL: "Professional",
        Tone.CREATIVE: "Creative & Abstract",
        Tone.PLAYFUL: "Playful & Fun",
        Tone.MINIMAL: "Minimalist",
    },
    OutputLanguage.TR: {
        Tone.MODERN: "Modern & Teknolojik",
        Tone.PROFESSIONAL: "Profesyonel",
        Tone.CREATIVE: "Yaratıcı & Soyut",
        Tone.PLAYFUL: "Eğlenceli & Neşeli",
        Tone.MINIMAL: "Minimalist",
    },
}

ERROR_MESSAGES = {
    OutputLanguage.EN: "Something went wrong while communicating with the AI. Please try again.",
    OutputLanguage.TR: "Yapay zeka ile iletişim kurulurken bir hata oluştu. Lütfen tekrar deneyin.",
}

INVALID_INPUT_MESSAGES = {
    OutputLanguage.EN: "Enter a description, upload a logo, or provide a reference name to get started.",
    OutputLanguage.TR: "Başlamak için bir açıklama girin, logo yükleyin veya benzer bir isim yazın.",
}


def tone_label(tone: Tone, language: OutputLanguage) -> str:
    return TONE_LABELS[OutputLanguage(language)][Tone(tone)]


def error_message(language: OutputLanguage) -> str:
    return ERROR_MESSAGES[OutputLanguage(language)]


def invalid_input_message(language: OutputLanguage) -> str:
    return INVALID_INPUT_MESSAGES[OutputLanguage(language)]
