import os

import streamlit as st

from comingsoon.contact import FIELDS, ContactForm, SubmitStatus
from comingsoon.handoff import flush_pending_mail_target, queue_mail_target
from comingsoon.settings import load_settings

FORM_KEY = "contact_form"
WIDGET_KEYS = {field: f"contact_{field}" for field in FIELDS}

# Label and placeholder per field
INPUTS = {
    "name": ("Name", "Your name"),
    "email": ("Email", "you@email.com"),
    "subject": ("Subject", "What is it about?"),
    "message": ("Message", "Your message here..."),
}

PAGE_CSS = """
<style>
.stApp { background: #1E1F2B; color: #FFFFFF; }
.hero { text-align: center; margin-bottom: 2rem; }
.hero h1 { font-size: 32px; font-weight: 400; }
.hero p { font-size: 18px; color: #AAAAAA; }
div.stButton > button { width: 100%; background: #3D5AFE; color: #FFFFFF; border: none; }
div.stButton > button:hover { background: #2C44CC; color: #FFFFFF; }
</style>
"""


def get_form():
    if FORM_KEY not in st.session_state:
        st.session_state[FORM_KEY] = ContactForm(navigate=queue_mail_target)
    return st.session_state[FORM_KEY]


def on_field_change(field):
    get_form().change(field, st.session_state[WIDGET_KEYS[field]])


def on_submit():
    form = get_form()
    # A value typed right before clicking may not have fired its own change event
    for field, key in WIDGET_KEYS.items():
        value = st.session_state.get(key, "")
        if value != getattr(form.data, field):
            form.change(field, value)
    if form.submit() is not None:
        for key in WIDGET_KEYS.values():
            st.session_state[key] = ""


def field_error(field):
    error = getattr(get_form().errors, field)
    if error:
        st.error(error, icon="⚠️")


settings = load_settings()
form = get_form()

st.markdown(PAGE_CSS, unsafe_allow_html=True)

# ---- Hero ----
if settings.logo_path and os.path.exists(settings.logo_path):
    st.image(settings.logo_path, width="stretch")
st.markdown(
    f"<div class='hero'><h1>{settings.headline}</h1><p>{settings.tagline}</p></div>",
    unsafe_allow_html=True,
)

# ---- Contact form ----
for field in ("name", "email", "subject"):
    label, placeholder = INPUTS[field]
    st.text_input(label, key=WIDGET_KEYS[field], placeholder=placeholder,
                  on_change=on_field_change, args=(field,))
    field_error(field)

label, placeholder = INPUTS["message"]
st.text_area(label, key=WIDGET_KEYS["message"], placeholder=placeholder, height=120,
             on_change=on_field_change, args=("message",))
field_error("message")

st.button("Send Message", key="contact_submit", icon=":material/send:", on_click=on_submit)

if form.status == SubmitStatus.SUCCESS:
    st.success("Your message has been sent!")
elif form.status == SubmitStatus.ERROR:
    st.error("Please correct the errors above.")

flush_pending_mail_target()
