"""Tests for the static model registry."""

import pytest

from promptlab.core.exceptions import InvalidModelError
from promptlab.services.model_registry import (
    MODEL_REGISTRY,
    ProviderName,
    display_name,
    list_models,
    resolve_provider,
)


class TestResolveProvider:
    @pytest.mark.parametrize("model_id", sorted(MODEL_REGISTRY))
    def test_every_registered_model_maps_to_a_known_provider(self, model_id):
        assert resolve_provider(model_id) in set(ProviderName)

    def test_examples_per_provider(self):
        assert resolve_provider("gpt-4o-mini-2024-07-18") is ProviderName.OPENAI
        assert resolve_provider("claude-3-5-haiku-latest") is ProviderName.ANTHROPIC
        assert resolve_provider("gemini-2.0-flash-latest") is ProviderName.GOOGLE

    def test_unknown_model_fails(self):
        with pytest.raises(InvalidModelError) as exc_info:
            resolve_provider("gpt-5-imaginary")

        assert exc_info.value.model == "gpt-5-imaginary"
        assert exc_info.value.status_code == 400

    def test_lookup_is_exact(self):
        # Substring routing ("anything with gpt is OpenAI") is not supported
        with pytest.raises(InvalidModelError):
            resolve_provider("GPT-4O-MINI-2024-07-18")


class TestDisplayName:
    def test_known_model(self):
        assert display_name("gpt-4o-2024-08-06") == "GPT-4o"
        assert display_name("claude-3-7-sonnet-latest") == "Claude 3.7 Sonnet"

    def test_unknown_model_passes_through(self):
        assert display_name("my-local-model") == "my-local-model"


def test_list_models_covers_registry():
    models = list_models()

    assert len(models) == len(MODEL_REGISTRY)
    assert {m["provider"] for m in models} == {"openai", "anthropic", "google"}
    assert {"id": "o3-2025-04-16", "provider": "openai", "display_name": "o3"} in models
