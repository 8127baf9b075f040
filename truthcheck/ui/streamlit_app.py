"""TruthCheck - Streamlit UI.

Run with ``streamlit run truthcheck/ui/streamlit_app.py``.
"""

import asyncio

import streamlit as st

from truthcheck.config import get_settings
from truthcheck.models.analysis import AnalysisResult, Bias, Sentiment
from truthcheck.services import AnalysisClient
from truthcheck.ui.state import ClaimSession, classification_label, confidence_color, share_text
from truthcheck.ui.translations import EXAMPLE_CLAIMS, LANGUAGE_NAMES, get_translations

st.set_page_config(
    page_title="TruthCheck AI",
    page_icon="🔎",
    layout="centered",
)

CLASSIFICATION_ICONS = {"REAL": "✅", "FAKE": "❌", "UNCERTAIN": "❓"}
SENTIMENT_ICONS = {Sentiment.POSITIVE: "🙂", Sentiment.NEGATIVE: "🙁", Sentiment.NEUTRAL: "😐"}


def get_session() -> ClaimSession:
    if "claim_session" not in st.session_state:
        st.session_state.claim_session = ClaimSession()
    return st.session_state.claim_session


def render_result(result: AnalysisResult, t) -> None:
    label = classification_label(result.classification, t)
    icon = CLASSIFICATION_ICONS[result.classification.value]
    st.markdown(f"## {icon} {label}")

    st.markdown(f"**{t['reasoning']}**")
    st.write(result.reasoning)

    if result.topic:
        st.markdown(f"**{t['topic']}:** {result.topic}")
    if result.keywords:
        st.markdown(f"**{t['keywords']}:** " + " ".join(f"`{k}`" for k in result.keywords))

    if result.confidence is not None or result.sentiment or result.bias:
        st.divider()
        st.subheader(t["analysisDetails"])
        if result.confidence is not None:
            color = confidence_color(result.confidence)
            st.markdown(f"**{t['confidence']}:** :{color}[{result.confidence}%]")
            st.progress(result.confidence / 100)
        col1, col2 = st.columns(2)
        if result.sentiment:
            sentiment_labels = {
                Sentiment.POSITIVE: t["sentimentPositive"],
                Sentiment.NEGATIVE: t["sentimentNegative"],
                Sentiment.NEUTRAL: t["sentimentNeutral"],
            }
            col1.metric(t["sentiment"], f"{SENTIMENT_ICONS[result.sentiment]} {sentiment_labels[result.sentiment]}")
        if result.bias:
            bias_labels = {
                Bias.LEFT: t["biasLeft"],
                Bias.RIGHT: t["biasRight"],
                Bias.CENTER: t["biasCenter"],
                Bias.NEUTRAL: t["biasNeutral"],
            }
            col2.metric(t["bias"], bias_labels[result.bias])

    st.divider()
    st.subheader(t["sources"])
    if not result.sources:
        st.info(t["noSources"])
    for source in result.sources:
        st.markdown(f"- [{source.title or source.uri}]({source.uri})")

    with st.expander(t["shareResult"]):
        st.code(share_text(result, t), language=None)


def main() -> None:
    session = get_session()

    with st.sidebar:
        session.language = st.selectbox(
            get_translations(session.language)["language"],
            options=list(LANGUAGE_NAMES),
            format_func=LANGUAGE_NAMES.get,
            index=list(LANGUAGE_NAMES).index(session.language),
        )
    t = get_translations(session.language)

    st.title(f"🔎 {t['title']}")
    st.caption(t["subtitle"])

    claim = st.text_area(
        "Claim input",
        value=session.claim,
        placeholder=t["textareaPlaceholder"],
        height=150,
        label_visibility="collapsed",
        disabled=session.loading,
    )
    if claim != session.claim:
        session.set_claim(claim)

    if session.url_alert:
        st.warning(f"**{t['urlAlertTitle']}**\n\n" + t["urlAlertBody"].format(url=session.url_alert))
        if st.button(t["urlAlertDismiss"]):
            session.dismiss_url_alert()
            st.rerun()

    if st.button(t["checkButton"], type="primary", disabled=not session.can_submit, use_container_width=True):
        client = AnalysisClient(get_settings())
        with st.spinner(t["loadingText"]):
            asyncio.run(session.submit(client))

    if session.view == "prompt":
        st.markdown(f"**{t['examplesTitle']}**")
        for example in EXAMPLE_CLAIMS:
            if st.button(example, key=f"example-{example}"):
                session.use_example(example)
                st.rerun()
    elif session.view == "error":
        st.error(f"**{t['errorTitle']}**\n\n{session.error}")
    elif session.view == "result":
        render_result(session.result, t)

    st.caption(t["footerText"])


main()
