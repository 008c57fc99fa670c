import streamlit as st

from comingsoon.logs import configure_logging
from comingsoon.settings import load_settings

settings = load_settings()
configure_logging(settings.log_level)

# ---- App Config ----
st.set_page_config(
    page_title=settings.page_title,
    page_icon=settings.page_icon,
    layout="centered"
)

# A single page, so Streamlit shows no navigation menu
landingPage = st.Page("pages/0_landingPage.py", title=settings.page_title, icon=":material/mail:", default=True)

pg = st.navigation([landingPage])
pg.run()
