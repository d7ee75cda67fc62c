"""Unit tests for the caption prompt template."""

from reels_copy.models import CopyInputs
from reels_copy.prompts import CALL_TO_ACTION_HASHTAGS, build_caption_prompt


def test_prompt_interpolates_all_inputs(copy_inputs):
    prompt = build_caption_prompt(copy_inputs)

    assert 'sobre o assunto: "vender mais"' in prompt
    assert 'Use exatamente esta pergunta: "Você trava nas vendas?"' in prompt
    assert 'o assunto "vender mais" causa na audiência' in prompt
    assert "escreva [ VENDAS ] aqui embaixo" in prompt


def test_prompt_has_three_steps_in_order(copy_inputs):
    prompt = build_caption_prompt(copy_inputs)

    attention = prompt.index("[ PERGUNTA DE ATENÇÃO ]")
    interest = prompt.index("2. INTERESSE")
    call_to_action = prompt.index("3. CALL TO ACTION")

    assert attention < interest < call_to_action
    assert "Parágrafo 1" in prompt
    assert "Parágrafo 2" in prompt


def test_prompt_lists_every_hashtag(copy_inputs):
    prompt = build_caption_prompt(copy_inputs)

    for tag in CALL_TO_ACTION_HASHTAGS:
        assert tag in prompt


def test_prompt_includes_emoji_rule_and_tone(copy_inputs):
    prompt = build_caption_prompt(copy_inputs)

    assert "REGRA CRUCIAL" in prompt
    assert "profissional, motivador e focado em resultados" in prompt


def test_prompt_is_deterministic(copy_inputs):
    assert build_caption_prompt(copy_inputs) == build_caption_prompt(copy_inputs)


def test_braces_in_inputs_are_kept_literally():
    inputs = CopyInputs(subject="{keyword}", attention_question="{0}?", keyword="OK")

    prompt = build_caption_prompt(inputs)

    assert '"{keyword}"' in prompt
    assert '"{0}?"' in prompt
