"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from reels_copy.exceptions import IncompleteInputsError
from reels_copy.mock import MockConfig
from reels_copy.models import (
    CopyInputs,
    GeneratedCopy,
    GenerationConfig,
    SamplingConfig,
)


# ==================== CopyInputs ====================


def test_copy_inputs_default_to_empty():
    inputs = CopyInputs()

    assert inputs.missing_fields() == ["subject", "attention_question", "keyword"]
    assert inputs.is_complete is False


def test_copy_inputs_complete(copy_inputs):
    assert copy_inputs.missing_fields() == []
    assert copy_inputs.is_complete is True
    copy_inputs.validate_complete()


def test_whitespace_only_counts_as_missing():
    inputs = CopyInputs(subject="vender mais", attention_question="  ", keyword="VENDAS")

    assert inputs.missing_fields() == ["attention_question"]


def test_validate_complete_raises_with_missing_fields():
    inputs = CopyInputs(subject="vender mais")

    with pytest.raises(IncompleteInputsError) as exc_info:
        inputs.validate_complete()

    assert exc_info.value.missing_fields == ["attention_question", "keyword"]
    assert "Pergunta de Atenção" in exc_info.value.message
    assert "Palavra-Chave (CTA)" in exc_info.value.message


def test_copy_inputs_are_frozen(copy_inputs):
    with pytest.raises(ValidationError):
        copy_inputs.subject = "outro"


def test_copy_inputs_keep_values_verbatim():
    inputs = CopyInputs(subject="  vender mais ", attention_question="?", keyword="VENDAS")

    assert inputs.subject == "  vender mais "


# ==================== GeneratedCopy ====================


def test_generated_copy_defaults_to_idle():
    result = GeneratedCopy()

    assert result.status == "idle"
    assert result.full_text == ""
    assert result.error_message is None


def test_error_state_requires_message():
    with pytest.raises(ValidationError):
        GeneratedCopy(status="error")


@pytest.mark.parametrize("status", ["idle", "loading", "success"])
def test_error_message_only_allowed_in_error_state(status):
    with pytest.raises(ValidationError):
        GeneratedCopy(status=status, error_message="Falhou")


def test_error_state_may_keep_previous_text():
    result = GeneratedCopy(full_text="Legenda", status="error", error_message="Falhou")

    assert result.full_text == "Legenda"


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError):
        GeneratedCopy(status="cancelled")


# ==================== Configuration ====================


def test_sampling_defaults():
    sampling = SamplingConfig()

    assert sampling.temperature == 0.7
    assert sampling.top_p == 0.95
    assert sampling.top_k == 40


def test_generation_config_defaults():
    config = GenerationConfig(api_key="test-key")

    assert config.provider == "google"
    assert config.model == "gemini-3-flash-preview"
    assert config.timeout == 30.0
    assert config.sampling == SamplingConfig()
    assert config.mock is None


def test_generation_config_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        GenerationConfig(api_key="test-key", timeout=0)


def test_generation_config_accepts_mock():
    config = GenerationConfig(mock=MockConfig(enabled=True))

    assert config.mock.enabled is True
    assert len(config.mock.responses) == 1
