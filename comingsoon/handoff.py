import json

import streamlit as st
from streamlit_javascript import st_javascript

PENDING_KEY = "pending_mail_target"
COUNTER_KEY = "mail_handoff_count"

# Components run in an iframe; clicking an anchor in the parent document lets
# the browser route the mailto: link to the registered mail handler.
_OPEN_MAIL_JS = """(() => {{
    const doc = window.parent.document;
    const link = doc.createElement('a');
    link.href = {target};
    link.style.display = 'none';
    doc.body.appendChild(link);
    link.click();
    doc.body.removeChild(link);
    return true;
}})()"""


def queue_mail_target(target):
    """Navigation hook for the controller. Browser code cannot run from a callback,
    so the target waits in session state until the page body renders."""
    st.session_state[PENDING_KEY] = target


def open_mail_client(target):
    count = st.session_state.get(COUNTER_KEY, 0) + 1
    st.session_state[COUNTER_KEY] = count
    st_javascript(_OPEN_MAIL_JS.format(target=json.dumps(target)), key=f"mailto-{count}")


def flush_pending_mail_target():
    target = st.session_state.pop(PENDING_KEY, None)
    if target:
        open_mail_client(target)
    return target
