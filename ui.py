import streamlit as st


def header(title: str, subtitle: str = ""):
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)


def helptext(text: str):
    st.caption(text)


def kpi_card(col, caption: str, value: str, note: str = ""):
    note_html = f"<div class='caption'>{note}</div>" if note else ""
    col.markdown(
        f"<div class='card'><div class='caption'>{caption}</div>"
        f"<div class='kpi'>{value}</div>{note_html}</div>",
        unsafe_allow_html=True,
    )


def info_card(col, title: str, body: str):
    with col:
        st.markdown(f"**{title}**")
        st.write(body)
