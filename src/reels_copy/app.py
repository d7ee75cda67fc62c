"""Streamlit page for Reels caption generation.

Run with: ``streamlit run streamlit_app.py``
"""

import asyncio
import json
import logging
import os

import streamlit as st
import streamlit.components.v1 as components

from reels_copy.config import load_generation_config
from reels_copy.controller import COPY_ACK_SECONDS, CaptionRequestController
from reels_copy.exceptions import ConfigurationError
from reels_copy.registry import get_generator

COPY_LABEL = "📋 Copiar Legenda"
COPIED_LABEL = "✅ Copiado!"
COPY_FAILED_LABEL = "⚠️ Não foi possível copiar"

# The clipboard write must run inside the click handler: browsers reject
# writeText outside a user gesture.
_COPY_BUTTON_TEMPLATE = """
<button id="copy-caption" style="width:100%;padding:0.5rem 1rem;border-radius:0.5rem;
  border:1px solid rgba(49,51,63,0.2);background:white;cursor:pointer;font-size:1rem;"></button>
<script>
  const button = document.getElementById("copy-caption");
  const caption = {text};
  const idleLabel = {idle_label};
  button.textContent = idleLabel;
  button.addEventListener("click", async () => {{
    try {{
      await navigator.clipboard.writeText(caption);
      button.textContent = {done_label};
    }} catch (e) {{
      button.textContent = {failed_label};
    }}
    setTimeout(() => (button.textContent = idleLabel), {ack_ms});
  }});
</script>
"""


def _js_string(value: str) -> str:
    # JSON is a valid JS literal; escaping "<" keeps "</script>" inert.
    return json.dumps(value).replace("<", "\\u003c")


def copy_button_html(text: str) -> str:
    """HTML for a button that copies ``text`` and acknowledges for 2 s."""
    return _COPY_BUTTON_TEMPLATE.format(
        text=_js_string(text),
        idle_label=_js_string(COPY_LABEL),
        done_label=_js_string(COPIED_LABEL),
        failed_label=_js_string(COPY_FAILED_LABEL),
        ack_ms=int(COPY_ACK_SECONDS * 1000),
    )


def get_controller() -> CaptionRequestController:
    """One controller per browser session."""
    if "controller" not in st.session_state:
        try:
            config = load_generation_config(os.environ)
            generator = get_generator(config)
        except ConfigurationError as ex:
            st.error(f"⚠️ {ex.message}")
            st.stop()
        st.session_state.controller = CaptionRequestController(generator)
    return st.session_state.controller


def get_event_loop() -> asyncio.AbstractEventLoop:
    """One event loop per session; the cached async client is bound to it."""
    if "event_loop" not in st.session_state:
        st.session_state.event_loop = asyncio.new_event_loop()
    return st.session_state.event_loop


def render_form(controller: CaptionRequestController) -> None:
    st.subheader("📸 Configuração do Reels")
    st.caption("Preencha os pilares da sua estratégia")

    controller.update_inputs(
        subject=st.text_input(
            "💬 Assunto do Reels",
            key="subject",
            placeholder="Ex: Como vender mais em 2024",
        ),
        attention_question=st.text_input(
            "❗ Pergunta de Atenção",
            key="attention_question",
            placeholder="Ex: Você sente que seus resultados estagnaram?",
        ),
        keyword=st.text_input(
            "#️⃣ Palavra-Chave (CTA)",
            key="keyword",
            placeholder="Ex: VENDAS",
        ),
    )

    if st.button(
        "✨ Gerar Legenda Persuasiva",
        type="primary",
        use_container_width=True,
        disabled=not controller.can_submit,
    ):
        inputs = controller.begin()
        if inputs is not None:
            with st.spinner("Consultando o mestre Daniel Muller..."):
                get_event_loop().run_until_complete(controller.complete(inputs))

    if controller.validation_message:
        st.warning(controller.validation_message)


def render_preview(controller: CaptionRequestController) -> None:
    st.subheader("Preview da Legenda")
    result = controller.result

    if result.status == "idle":
        st.info(
            "Pronto para brilhar? Preencha os campos ao lado e clique em gerar "
            "para ver a mágica acontecer."
        )
    elif result.status == "loading":
        st.info("Consultando o mestre Daniel Muller...")
    elif result.status == "error":
        st.error(f"**Ops! Algo deu errado**\n\n{result.error_message}")
    else:
        text = controller.copyable_text
        if text is not None:
            components.html(copy_button_html(text), height=48)
        st.markdown(result.full_text.replace("\n", "  \n"))

    st.caption(
        "💡 Dica do Pro: legendas que geram conversação (comentários com a "
        "palavra-chave) aumentam o alcance do seu Reels pelo algoritmo."
    )


def main() -> None:
    st.set_page_config(page_title="Reels Pro Copy", page_icon="✨", layout="wide")
    logging.basicConfig(level=os.getenv("REELS_COPY_LOG_LEVEL", "INFO").upper())

    st.title("✨ Reels Pro Copy")
    st.markdown(
        "Gere legendas magnéticas que convertem seguidores em clientes usando "
        "a metodologia do Daniel Muller."
    )

    controller = get_controller()
    left, right = st.columns([5, 7])
    with left:
        render_form(controller)
    with right:
        render_preview(controller)

    st.markdown("---")
    st.caption("© 2024 • Cada vez melhor • Daniel Muller · #resultados #vendas #mentoria")


if __name__ == "__main__":
    main()
