"""
MakeMeHired ATS CV Builder – Streamlit frontend.
No business logic in layout; edits go through DocumentStore, submission through SubmissionController.
"""

import asyncio
from typing import Any, Callable

import streamlit as st
import streamlit.components.v1 as components

from makemehired.config import BACKEND_URL
from makemehired.schemas.resume_document import ResumeDocument
from makemehired.schemas.sections import EntrySection, ListSection
from makemehired.schemas.submission_result import SubmissionFailure, SubmissionSuccess
from makemehired.services.artifact_handler import (
    DownloadResource,
    PreviewSurface,
    render_preview,
    trigger_download,
)
from makemehired.services.document_editor import (
    append_achievement,
    append_entry,
    missing_required_fields,
    set_achievement,
    set_entry_field,
    set_list_element,
    set_scalar,
)
from makemehired.services.document_store import DocumentStore
from makemehired.services.submission_controller import SubmissionController

# Labels for plain list sections: (section title, per-item placeholder, add button)
LIST_SECTION_LABELS = {
    ListSection.CERTIFICATIONS: ("Certifications", "Certification", "+ Add Certification"),
    ListSection.PROJECTS: ("Projects / Achievements", "Project or Achievement", "+ Add Project"),
    ListSection.LANGUAGES: ("Languages", "Language", "+ Add Language"),
    ListSection.INTERESTS: ("Interests", "Interest", "+ Add Interest"),
}

FIELD_LABELS = {
    "full_name": "Full Name",
    "job_title_target": "Job Title Target",
    "email": "Email",
    "phone": "Phone",
}


def _init_session() -> None:
    """Create the per-session store, controller and preview surface once."""
    if "store" not in st.session_state:
        st.session_state["store"] = DocumentStore()
    if "controller" not in st.session_state:
        st.session_state["controller"] = SubmissionController(base_url=BACKEND_URL)
    if "preview" not in st.session_state:
        st.session_state["preview"] = PreviewSurface()
    if "error" not in st.session_state:
        st.session_state["error"] = None


def _store() -> DocumentStore:
    return st.session_state["store"]


def _controller() -> SubmissionController:
    return st.session_state["controller"]


def _edit(edit: Callable[..., ResumeDocument], key: str, *args: Any) -> Callable[[], None]:
    """on_change callback: apply edit(doc, *args, <widget value>) to the store."""

    def callback() -> None:
        _store().apply(edit, *args, st.session_state[key])

    return callback


def _run_submit(doc: ResumeDocument) -> None:
    """Run one submission on a private event loop; Streamlit scripts are synchronous."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        loop.run_until_complete(_controller().submit(doc))
    finally:
        loop.close()


def _offer_download(resource: DownloadResource) -> None:
    st.download_button(
        "Download CV",
        data=resource.read(),
        file_name=resource.filename,
        mime=resource.mime_type,
        key="download_cv",
        type="primary",
    )


def _render_identity(doc: ResumeDocument) -> None:
    col1, col2 = st.columns(2)
    for i, field in enumerate(("full_name", "job_title_target", "email", "phone")):
        with (col1 if i % 2 == 0 else col2):
            st.text_input(
                FIELD_LABELS[field] + " *",
                value=getattr(doc, field),
                key=f"f_{field}",
                on_change=_edit(set_scalar, f"f_{field}", field),
            )
    st.text_input(
        "LinkedIn URL (optional)",
        value=doc.linkedin,
        key="f_linkedin",
        on_change=_edit(set_scalar, "f_linkedin", "linkedin"),
    )
    st.text_area(
        "Professional Summary (optional)",
        value=doc.summary,
        height=110,
        key="f_summary",
        on_change=_edit(set_scalar, "f_summary", "summary"),
    )
    st.text_input(
        "Core Skills (comma-separated)",
        value=doc.skills,
        key="f_skills",
        on_change=_edit(set_scalar, "f_skills", "skills"),
    )


def _render_experience(doc: ResumeDocument) -> None:
    st.markdown("**Experience**")
    for i, entry in enumerate(doc.experience):
        with st.container(border=True):
            cols = st.columns(3)
            for col, field in zip(cols, ("company", "role", "duration")):
                key = f"exp_{i}_{field}"
                with col:
                    st.text_input(
                        field.title(),
                        value=getattr(entry, field),
                        key=key,
                        on_change=_edit(set_entry_field, key, EntrySection.EXPERIENCE, i, field),
                    )
            st.caption("Achievements")
            for j, achievement in enumerate(entry.achievements):
                key = f"exp_{i}_ach_{j}"
                st.text_input(
                    f"Achievement {j + 1}",
                    value=achievement,
                    key=key,
                    label_visibility="collapsed",
                    placeholder=f"Achievement {j + 1}",
                    on_change=_edit(set_achievement, key, i, j),
                )
            st.button(
                "+ Add Achievement",
                key=f"exp_{i}_add_ach",
                on_click=_store().apply,
                args=(append_achievement, i),
            )
    st.button(
        "+ Add Experience",
        key="add_experience",
        on_click=_store().apply,
        args=(append_entry, EntrySection.EXPERIENCE),
    )


def _render_education(doc: ResumeDocument) -> None:
    st.markdown("**Education**")
    for i, entry in enumerate(doc.education):
        cols = st.columns(3)
        for col, field in zip(cols, ("degree", "institution", "year")):
            key = f"edu_{i}_{field}"
            with col:
                st.text_input(
                    field.title(),
                    value=getattr(entry, field),
                    key=key,
                    on_change=_edit(set_entry_field, key, EntrySection.EDUCATION, i, field),
                )
    st.button(
        "+ Add Education",
        key="add_education",
        on_click=_store().apply,
        args=(append_entry, EntrySection.EDUCATION),
    )


def _render_list_section(doc: ResumeDocument, section: ListSection) -> None:
    title, placeholder, add_label = LIST_SECTION_LABELS[section]
    st.markdown(f"**{title}**")
    for i, value in enumerate(getattr(doc, section.value)):
        key = f"{section.value}_{i}"
        st.text_input(
            f"{placeholder} {i + 1}",
            value=value,
            key=key,
            label_visibility="collapsed",
            placeholder=f"{placeholder} {i + 1}",
            on_change=_edit(set_list_element, key, section, i),
        )
    st.button(add_label, key=f"add_{section.value}", on_click=_store().apply, args=(append_entry, section))


def _render_result() -> None:
    """Preview pane: placeholder, error, HTML preview and PDF download."""
    st.subheader("Preview & Download")
    controller = _controller()
    result = controller.result

    if st.session_state.get("error"):
        st.error(st.session_state["error"])

    if isinstance(result, SubmissionFailure):
        st.error(result.message)
        return
    if not isinstance(result, SubmissionSuccess):
        st.info("Fill the form and click **Generate CV** to preview your ATS-ready CV here.")
        return

    if result.pdf_bytes is not None:
        trigger_download(result.pdf_bytes, result.filename, deliver=_offer_download)

    if result.html:
        surface = render_preview(st.session_state["preview"], result.html)
        components.html(surface.html, height=700, scrolling=True)


def render_layout() -> None:
    """Streamlit page layout; form on the left, preview on the right."""
    st.set_page_config(page_title="MakeMeHired.com – ATS CV Builder", layout="wide")
    _init_session()
    st.title("MakeMeHired.com")
    st.markdown("*AI-powered ATS CV Builder*")
    st.divider()

    doc = _store().document
    form_col, preview_col = st.columns(2)

    with form_col:
        st.subheader("Enter your details")
        _render_identity(doc)
        _render_experience(doc)
        _render_education(doc)
        lcol1, lcol2 = st.columns(2)
        with lcol1:
            _render_list_section(doc, ListSection.CERTIFICATIONS)
            _render_list_section(doc, ListSection.LANGUAGES)
        with lcol2:
            _render_list_section(doc, ListSection.PROJECTS)
            _render_list_section(doc, ListSection.INTERESTS)

        submit_clicked = st.button(
            "Generate CV",
            type="primary",
            key="submit_btn",
        )

    # ----- Run submission (only on button click) -----
    if submit_clicked:
        current = _store().document
        missing = missing_required_fields(current)
        if missing:
            st.session_state["error"] = "Please fill in: " + ", ".join(FIELD_LABELS[f] for f in missing)
        else:
            st.session_state["error"] = None
            with preview_col:
                with st.spinner("Generating your CV…"):
                    _run_submit(current)

    with preview_col:
        _render_result()

    st.caption("MakeMeHired.com – Build recruiter-approved, ATS-friendly CVs.")


if __name__ == "__main__":
    render_layout()
