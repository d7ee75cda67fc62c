"""Prompt template for Reels captions."""

from reels_copy.models import CopyInputs

FALLBACK_CAPTION = "Erro ao gerar conteúdo."

CALL_TO_ACTION_HASHTAGS = (
    "#danielmuller",
    "#danielmulleroficial",
    "#cadavezmelhor",
    "#resultados",
    "#vendas",
)

_HASHTAG_BLOCK = "\n".join(f"   {tag}" for tag in CALL_TO_ACTION_HASHTAGS)

CAPTION_PROMPT_TEMPLATE = (
    'Crie um texto objetivo para a legenda de um Reels no Instagram sobre o assunto: "{subject}".\n'
    "\n"
    "A estrutura DEVE seguir exatamente estes 3 passos:\n"
    "\n"
    '1. [ PERGUNTA DE ATENÇÃO ] - Use exatamente esta pergunta: "{attention_question}".\n'
    "   Certifique-se de começar a frase com um emoji relacionado.\n"
    "\n"
    "2. INTERESSE - Crie dois parágrafos persuasivos:\n"
    '   - Parágrafo 1: Descreva a dor ou o problema que o assunto "{subject}" causa na audiência. '
    "Desperte o interesse em assistir o conteúdo.\n"
    "   - Parágrafo 2: Descreva que existe uma solução e que o vídeo apresenta uma estratégia "
    "eficaz para vencer o problema.\n"
    "\n"
    "3. CALL TO ACTION - Use exatamente esta estrutura final:\n"
    "   👇 Se fez sentido para você, escreva [ {keyword} ] aqui embaixo.🔥\n"
    "   📲 Envie para alguém que precisa destravar resultados.🚀\n"
    "   👍 E fortaleça com seu LIKE ♥️\n"
    "\n"
    "{hashtags}\n"
    "\n"
    "REGRA CRUCIAL: Comece ABSOLUTAMENTE CADA ORAÇÃO/FRASE com um emoji relacionado ao que está sendo dito.\n"
    "O tom deve ser profissional, motivador e focado em resultados.\n"
)


def build_caption_prompt(inputs: CopyInputs) -> str:
    """Interpolate the three inputs into the fixed caption template.

    Pure string formatting: no validation of the inputs beyond what
    ``CopyInputs`` already holds.
    """
    return CAPTION_PROMPT_TEMPLATE.format(
        subject=inputs.subject,
        attention_question=inputs.attention_question,
        keyword=inputs.keyword,
        hashtags=_HASHTAG_BLOCK,
    )
