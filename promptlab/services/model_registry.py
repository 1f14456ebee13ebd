"""Static catalogue of the models the app can call."""

from enum import Enum

from promptlab.core.exceptions import InvalidModelError


class ProviderName(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"


# model id -> (provider, display name)
MODEL_REGISTRY = {
    # --- OPENAI ---
    "gpt-4o-mini-2024-07-18": (ProviderName.OPENAI, "GPT-4o mini"),
    "gpt-4.1-nano-2025-04-14": (ProviderName.OPENAI, "GPT-4.1 nano"),
    "gpt-4o-2024-08-06": (ProviderName.OPENAI, "GPT-4o"),
    "o4-mini-2025-04-16": (ProviderName.OPENAI, "o4-mini"),
    "gpt-4.1-2025-04-14": (ProviderName.OPENAI, "GPT-4.1"),
    "o3-2025-04-16": (ProviderName.OPENAI, "o3"),
    # --- ANTHROPIC ---
    "claude-3-7-sonnet-latest": (ProviderName.ANTHROPIC, "Claude 3.7 Sonnet"),
    "claude-3-5-sonnet-latest": (ProviderName.ANTHROPIC, "Claude 3.5 Sonnet"),
    "claude-3-5-haiku-latest": (ProviderName.ANTHROPIC, "Claude 3.5 Haiku"),
    "claude-3-opus-latest": (ProviderName.ANTHROPIC, "Claude 3 Opus"),
    # --- GOOGLE ---
    "gemini-1.5-pro-latest": (ProviderName.GOOGLE, "Gemini 1.5 Pro"),
    "gemini-1.5-flash-latest": (ProviderName.GOOGLE, "Gemini 1.5 Flash"),
    "gemini-2.0-flash-latest": (ProviderName.GOOGLE, "Gemini 2.0 Flash"),
    "gemini-2.0-flash-lite-latest": (ProviderName.GOOGLE, "Gemini 2.0 Flash-Lite"),
}


def resolve_provider(model_id: str) -> ProviderName:
    try:
        return MODEL_REGISTRY[model_id][0]
    except KeyError:
        raise InvalidModelError(model_id)


def display_name(model_id: str) -> str:
    """Human-readable name; unknown ids pass through unchanged."""
    entry = MODEL_REGISTRY.get(model_id)
    return entry[1] if entry else model_id


def list_models():
    return [
        {"id": model_id, "provider": provider.value, "display_name": name}
        for model_id, (provider, name) in MODEL_REGISTRY.items()
    ]
