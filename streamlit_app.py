"""
Gemini Chat - Streamlit Frontend

A simple chat interface for the Gemini Chat Relay.
Connects to the FastAPI gateway for every message.

Run with: streamlit run streamlit_app.py
"""
import streamlit as st

from src.llm.catalog import AVAILABLE_MODELS, PREFERRED_MODEL
from src.ui.api_client import GatewayClient
from src.ui.renderer import render_markdown, format_error_message

# ============================================================
# Configuration
# ============================================================

client = GatewayClient()

st.set_page_config(
    page_title="Gemini Chat",
    page_icon="💬",
    layout="centered",
    initial_sidebar_state="expanded"
)

# ============================================================
# Custom CSS
# ============================================================

st.markdown("""
<style>
    html, body, [class*="css"], .stMarkdown, p {
        font-family: 'Inter', sans-serif;
        color: #334155;
    }

    .stApp {
        background-color: #fdfbf7;
    }

    .main .block-container {
        padding-top: 2rem;
        padding-bottom: 3rem;
        max-width: 800px;
    }

    /* Chat Messages */
    .stChatMessage {
        background-color: #ffffff;
        padding: 1.2rem;
        margin-bottom: 1rem;
        border-radius: 12px;
        border: 1px solid #f3f4f6;
    }

    /* Sidebar */
    [data-testid="stSidebar"] {
        background-color: #f9f8f4;
        border-right: 1px solid #e5e7eb;
    }
</style>
""", unsafe_allow_html=True)

# ============================================================
# Session State Initialization
# ============================================================

def init_session_state():
    """Initialize session state variables."""
    # Display-only transcript; never sent to the gateway
    if "messages" not in st.session_state:
        st.session_state.messages = []
    if "backend_connected" not in st.session_state:
        st.session_state.backend_connected = False
    if "model" not in st.session_state:
        st.session_state.model = PREFERRED_MODEL


def check_backend() -> bool:
    """Check if the gateway is available."""
    st.session_state.backend_connected = client.check_health()
    return st.session_state.backend_connected


# ============================================================
# UI Components
# ============================================================

def render_message(msg: dict):
    """Render one transcript entry."""
    if msg.get("is_html"):
        st.markdown(msg["content"], unsafe_allow_html=True)
    else:
        st.text(msg["content"])


def render_sidebar():
    """Render the sidebar with status and model selection."""
    with st.sidebar:
        st.title("💬 Gemini Chat")

        if st.session_state.backend_connected:
            st.success("🟢 Gateway Online")
        else:
            st.error("🔴 Gateway Offline")
            if st.button("🔄 Reconnect", use_container_width=True):
                if check_backend():
                    st.rerun()

        st.divider()

        models = sorted(AVAILABLE_MODELS)
        st.session_state.model = st.selectbox(
            "Model",
            models,
            index=models.index(st.session_state.model),
        )

        if st.button("🗑️ Clear", help="Clear messages in this chat", use_container_width=True):
            st.session_state.messages = []
            st.rerun()

        st.divider()
        st.caption(f"Gateway: {client.base_url}")


def render_chat():
    """Render the main chat interface."""
    for msg in st.session_state.messages:
        with st.chat_message(msg["role"]):
            render_message(msg)

    if prompt := st.chat_input("Type a message..."):
        prompt = prompt.strip()
        if not prompt:
            return

        st.session_state.messages.append({"role": "user", "content": prompt})
        with st.chat_message("user"):
            st.text(prompt)

        with st.chat_message("assistant"):
            with st.spinner("Gemini is thinking..."):
                response = client.send_message(prompt, model=st.session_state.model)

            if response.get("success"):
                entry = {
                    "role": "assistant",
                    "content": render_markdown(response.get("reply", "")),
                    "is_html": True,
                }
            else:
                entry = {
                    "role": "assistant",
                    "content": format_error_message(
                        response.get("errorCode"),
                        response.get("error", ""),
                        response.get("status"),
                    ),
                }

            render_message(entry)
            st.session_state.messages.append(entry)


# ============================================================
# Main App
# ============================================================

def main():
    """Main application entry point."""
    init_session_state()

    if not st.session_state.backend_connected:
        check_backend()

    render_sidebar()

    if not st.session_state.backend_connected:
        st.warning("⚠️ Cannot connect to the gateway. Please start the server:")
        st.code("uvicorn src.api.main:app --port 3000", language="bash")

    render_chat()


if __name__ == "__main__":
    main()
