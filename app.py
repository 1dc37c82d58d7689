"""Streamlit interface for KnowledgeQuest."""

import html
import logging
from datetime import datetime

import streamlit as st

# Set page config first (must be first Streamlit command)
st.set_page_config(
    page_title="KnowledgeQuest AI",
    page_icon="🔎",
    layout="wide",
    initial_sidebar_state="expanded",
)

from knowledgequest.adapters.common.exception_handler import report_error  # noqa: E402
from knowledgequest.config.logging import setup_logging  # noqa: E402
from knowledgequest.config.settings import settings  # noqa: E402
from knowledgequest.core.domain import (  # noqa: E402
    DEFAULT_CATEGORY,
    DOCUMENT_CATEGORIES,
    AppStatus,
)
from knowledgequest.core.domain.exceptions import KnowledgeQuestError  # noqa: E402
from knowledgequest.core.domain.utils import preview  # noqa: E402

logger = logging.getLogger("knowledgequest.app")

st.markdown("""
<style>
    .header-container {
        background: linear-gradient(90deg, #2563eb 0%, #4f46e5 100%);
        padding: 1.5rem;
        border-radius: 10px;
        margin-bottom: 1.5rem;
        color: white;
    }

    .source-chip {
        display: inline-block;
        background-color: #ffffff;
        border: 1px solid #e2e8f0;
        border-radius: 8px;
        padding: 0.25rem 0.75rem;
        margin: 0 0.5rem 0.5rem 0;
        font-size: 0.8rem;
        color: #475569;
    }

    .footer-status {
        font-size: 0.7rem;
        text-transform: uppercase;
        font-weight: bold;
        color: #94a3b8;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def get_service():
    """Get cached knowledge service instance."""
    setup_logging(settings.log_level, json_format=settings.log_json)

    from knowledgequest.composition.container import get_knowledge_service

    return get_knowledge_service()


def _init_session_state() -> None:
    if "status" not in st.session_state:
        st.session_state.status = AppStatus.IDLE
    if "result" not in st.session_state:
        st.session_state.result = None
    if "error" not in st.session_state:
        st.session_state.error = None
    if "pending_query" not in st.session_state:
        st.session_state.pending_query = None


def _start_search() -> None:
    """Submit callback: clear the previous outcome and mark the query in flight."""
    query = st.session_state.get("query_input", "")
    if not query.strip():
        return
    st.session_state.pending_query = query
    st.session_state.status = AppStatus.SEARCHING
    st.session_state.result = None
    st.session_state.error = None


def _render_sidebar(service) -> None:
    """Knowledge base management: add form and document list."""
    documents = service.list_documents()

    with st.sidebar:
        st.markdown(f"### 📚 Knowledge Base ({len(documents)})")

        with st.expander("Add Document", expanded=False):
            with st.form("add_document", clear_on_submit=True):
                title = st.text_input("Document Title")
                content = st.text_area("Paste content here...", height=120)
                category = st.selectbox(
                    "Category",
                    DOCUMENT_CATEGORIES,
                    index=DOCUMENT_CATEGORIES.index(DEFAULT_CATEGORY),
                )
                if st.form_submit_button("Save Snippet", use_container_width=True):
                    try:
                        service.add_document(title, content, category)
                    except KnowledgeQuestError as e:
                        st.error(report_error(e, log=logger, surface="streamlit", action="add"))
                    else:
                        st.rerun()

        st.markdown("---")

        if not documents:
            st.caption("No documents yet. Add one to get started.")

        for doc in documents:
            with st.container(border=True):
                col_text, col_delete = st.columns([5, 1])
                with col_text:
                    st.text(doc.title)
                    updated = datetime.fromtimestamp(doc.updated_at / 1000).strftime("%Y-%m-%d")
                    st.text(f"{doc.category} · {updated}")
                with col_delete:
                    delete_clicked = st.button(
                        "🗑", key=f"delete_{doc.id}", help="Delete document"
                    )
                if delete_clicked:
                    try:
                        service.delete_document(doc.id)
                    except KnowledgeQuestError as e:
                        st.error(report_error(e, log=logger, surface="streamlit", action="delete"))
                    else:
                        st.rerun()
                st.text(preview(doc.content))


        st.markdown("---")
        st.markdown("#### 💡 Pro Tip")
        st.caption(
            "Add meeting notes, research snippets, or policy documents. "
            "The AI will cross-reference them to give you accurate answers."
        )


def _run_pending_search(service) -> None:
    query = st.session_state.pending_query
    st.session_state.pending_query = None
    try:
        with st.spinner("Analyzing..."):
            st.session_state.result = service.ask(query)
        st.session_state.status = AppStatus.IDLE
    except KnowledgeQuestError as e:
        st.session_state.error = report_error(e, log=logger, surface="streamlit", action="ask")
        st.session_state.status = AppStatus.ERROR


def _render_result(result) -> None:
    with st.container(border=True):
        col_label, col_model = st.columns([1, 1])
        col_label.markdown("**:blue[AI SYNTHESIS]**")
        col_model.caption(f"Response generated by {settings.llm_model}")
        st.markdown(result.answer)

        st.markdown("---")
        st.markdown(f"**🔗 Sources referenced ({len(result.relevant_documents)})**")
        chips = "".join(
            f'<span class="source-chip">📄 {html.escape(doc.title)}</span>'
            for doc in result.relevant_documents
        )
        if chips:
            st.markdown(chips, unsafe_allow_html=True)


_init_session_state()

try:
    service = get_service()
except Exception as e:
    st.error(f"Failed to start knowledge service: {e}")
    st.stop()

_render_sidebar(service)

st.markdown("""
<div class="header-container">
    <h1 style="margin:0; font-size: 2rem;">Search Your Knowledge</h1>
    <p style="margin: 0.5rem 0 0 0; opacity: 0.9;">Ask questions across all your stored documents using AI reasoning.</p>
</div>
""", unsafe_allow_html=True)

searching = st.session_state.status == AppStatus.SEARCHING

with st.form("search"):
    st.text_input(
        "Question",
        key="query_input",
        placeholder="e.g., What are the office hours on Fridays?",
        label_visibility="collapsed",
    )
    st.form_submit_button(
        "Analyzing..." if searching else "Ask AI",
        disabled=searching,
        on_click=_start_search,
        type="primary",
    )

if st.session_state.pending_query:
    _run_pending_search(service)
    st.rerun()

if st.session_state.error:
    st.error(f"⚠️ {st.session_state.error}")

if st.session_state.result is None and st.session_state.status == AppStatus.IDLE:
    st.markdown(
        "<p style='text-align:center; opacity:0.5; padding:4rem 0;'><i>"
        "Type a query above to start exploring your knowledge base.</i></p>",
        unsafe_allow_html=True,
    )
elif st.session_state.result is not None:
    _render_result(st.session_state.result)

st.markdown("---")
st.markdown(
    f'<div class="footer-status">🟢 Knowledge Engine Online &nbsp;|&nbsp; '
    f"{len(service.list_documents())} Docs Indexed</div>",
    unsafe_allow_html=True,
)
