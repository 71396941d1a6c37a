import time

import streamlit as st

from intake.core import service
from intake.core.config import IntakeConfig, configure_logging
from intake.core.constants import SYNOPSIS_MAX
from intake.core.questions import AVAILABILITY_OPTIONS

CONFIG = IntakeConfig.from_env()
configure_logging(CONFIG.log_level)


# MUST be first Streamlit call
st.set_page_config(
    page_title="Submit your project",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# ---------- CSS ----------
st.markdown(
    """
<style>
.stApp {
  background: linear-gradient(180deg, #8C00E5 0%, #45009D 28%, #FFFFFF 28.1%);
}
.block-container {
  padding-top: 1.5rem;
  max-width: 820px;
}
.intake-hero {
  text-align: center;
  color: #FFFFFF;
  padding: 40px 12px 56px 12px;
}
.intake-hero h1 {
  font-weight: 900;
  letter-spacing: -0.01em;
  margin-bottom: 8px;
}
.intake-hero p {
  color: rgba(255,255,255,0.82);
  font-size: 17px;
}
.intake-card {
  background: #FFFFFF;
  border: 1px solid #E5E7EB;
  border-radius: 16px;
  padding: 24px;
  box-shadow: 0 14px 40px rgba(11,0,25,0.10);
}
.intake-note {
  color: #4B5563;
  font-size: 14px;
}
button[kind="primary"] {
  background: #FFFF13 !important;
  color: #0B0019 !important;
  border: 1px solid #FFFF13 !important;
  border-radius: 999px !important;
  font-weight: 700 !important;
}
button[kind="secondary"] {
  border-radius: 999px !important;
  border: 2px solid #8C00E5 !important;
  color: #8C00E5 !important;
}
</style>
""",
    unsafe_allow_html=True,
)

FAQ = [
    (
        "What's the response timeline?",
        "Due to high volume, we aren't able to reply to every submission or provide individual feedback. "
        "If your project is a fit or we need more details, we'll reach out by email.",
    ),
    (
        "Can I check status or follow up?",
        "We don't provide individual status updates and can't respond to follow-up emails. "
        "Please do not resend your materials to any individual team member; if you do resend your "
        "materials your project will be removed from further consideration.",
    ),
    (
        "Can I submit multiple titles?",
        "Please submit one form per title. For a series, submit once for the series and include season "
        "details in the notes. Avoid duplicate submissions of the same title unless there's a material change.",
    ),
]


# ---------- Helpers ----------
def _init_session():
    st.session_state["intake"] = service.create_session(CONFIG)


def _clear_widgets(prefix: str):
    for k in [k for k in st.session_state.keys() if str(k).startswith(prefix)]:
        del st.session_state[k]


def _on_answer(value: str):
    service.select_answer(st.session_state["intake"], value)


def _on_sub_field(widget_key: str):
    service.set_sub_field(st.session_state["intake"], st.session_state[widget_key])


def _on_nav(key_name: str):
    session = st.session_state["intake"]
    q = session.wizard.current_question
    widget_key = f"sub_{q.sub_field.key}" if q.sub_field else None
    if widget_key and widget_key in st.session_state and session.wizard.sub_field_visible():
        service.set_sub_field(session, st.session_state[widget_key])
    service.key(session, key_name)


def _on_form_field(field_name: str):
    form = st.session_state["intake"].outcome.form
    form.update(field_name, st.session_state[f"rfd_{field_name}"])


def _on_availability(value: str):
    st.session_state["intake"].outcome.form.update("availability", value)


def _on_direct_field(field_name: str):
    st.session_state["intake"].chooser.form.update(field_name, st.session_state[f"direct_{field_name}"])


def _on_start_over():
    service.start_over(st.session_state["intake"])
    _clear_widgets("rfd_")
    _clear_widgets("sub_")


def _field_error(errors: dict, field_name: str):
    msg = errors.get(field_name)
    if msg:
        st.markdown(f"<span style='color:#DC2626;font-size:14px'>{msg}</span>", unsafe_allow_html=True)


# ---------- Session init ----------
if "intake" not in st.session_state:
    _init_session()

session = st.session_state["intake"]
payload = service.build_payload(session)

# ---------- HERO ----------
st.markdown(
    """
<div class="intake-hero">
  <h1>Bring your story to the screen</h1>
  <p>Answer two quick questions and we'll point you to the right submission path.</p>
</div>
""",
    unsafe_allow_html=True,
)

tab_triage, tab_paths = st.tabs(["Find your path", "Choose your path"])


# ---------- Triage wizard ----------
def _render_wizard(p: dict):
    c1, c2 = st.columns([3, 1])
    with c1:
        st.caption(p["step_label"])
    with c2:
        st.caption(f"{p['percent']}%")
    st.progress(p["percent"] / 100.0)

    q = p["question"]
    st.markdown(f"### {q['label']}")

    for opt in q["options"]:
        st.button(
            opt["label"],
            key=f"opt_{q['id']}_{opt['value']}",
            type="primary" if opt["selected"] else "secondary",
            use_container_width=True,
            on_click=_on_answer,
            args=(opt["value"],),
        )

    sub = q["sub_field"]
    if sub:
        widget_key = f"sub_{sub['key']}"
        if widget_key not in st.session_state:
            st.session_state[widget_key] = sub["value"]
        st.text_input(
            sub["label"],
            key=widget_key,
            placeholder=sub["placeholder"],
            on_change=_on_sub_field,
            args=(widget_key,),
        )

    b1, b2 = st.columns(2)
    with b1:
        st.button(
            "← Back",
            disabled=not p["can_retreat"],
            on_click=_on_nav,
            args=("ArrowLeft",),
        )
    with b2:
        st.button(
            "Finish" if p["is_last_step"] else "Next →",
            disabled=not p["can_advance"],
            on_click=_on_nav,
            args=("Enter",),
        )

    st.caption("Click an answer to continue • Back / Next to navigate")


def _render_outcome(p: dict):
    o = p["outcome"]
    st.markdown(f"### {o['headline']}")
    st.write(o["message"])

    if o["cta"]:
        st.link_button(o["cta"]["label"], o["cta"]["url"], type="primary")
        st.caption(o["cta"]["helper"])
        if o["rights_note"]:
            st.markdown(f"<p class='intake-note'>{o['rights_note']}</p>", unsafe_allow_html=True)

    form = o["form"]
    if form and not o["submitted"]:
        values, errors = form["values"], form["errors"]

        st.text_input("Full name *", key="rfd_name", value=values["name"],
                      placeholder="Enter your full name", on_change=_on_form_field, args=("name",))
        _field_error(errors, "name")

        st.text_input("Email *", key="rfd_email", value=values["email"],
                      placeholder="Enter your email address", on_change=_on_form_field, args=("email",))
        _field_error(errors, "email")

        st.text_area("Synopsis * (40-1000 characters)", key="rfd_synopsis", value=values["synopsis"],
                     placeholder="Provide a brief synopsis of your content...",
                     on_change=_on_form_field, args=("synopsis",))
        if errors.get("synopsis"):
            _field_error(errors, "synopsis")
        else:
            st.caption(f"{form['synopsis_count']}/{SYNOPSIS_MAX} characters")

        st.text_input("Screener link (URL) *", key="rfd_screener_url", value=values["screener_url"],
                      placeholder="https://example.com/screener-link",
                      on_change=_on_form_field, args=("screener_url",))
        _field_error(errors, "screener_url")

        st.markdown("**Where is it currently available?** *")
        for opt in AVAILABILITY_OPTIONS:
            st.button(
                opt.label,
                key=f"avail_{opt.value}",
                type="primary" if values["availability"] == opt.value else "secondary",
                use_container_width=True,
                on_click=_on_availability,
                args=(opt.value,),
            )
        _field_error(errors, "availability")

        if form["platform_notes_visible"]:
            st.text_input("Which platforms?", key="rfd_platform_notes", value=values["platform_notes"],
                          on_change=_on_form_field, args=("platform_notes",))

        st.text_input("Company (optional)", key="rfd_company", value=values["company"],
                      placeholder="Your company or organization", on_change=_on_form_field, args=("company",))

        st.button(
            "Submit RFD Application",
            type="primary",
            disabled=not form["can_submit"],
            use_container_width=True,
            on_click=service.submit_contact,
            args=(session,),
        )

    st.divider()
    st.button("← Start over with a new submission", on_click=_on_start_over)


def _render_thank_you(p: dict):
    o = p["outcome"]
    st.success("Thank you for your RFD submission!")
    st.write(
        "We've received your redistribution application and will review it carefully. "
        "Our team will be in touch within 2-3 business days."
    )
    st.markdown(
        "**What happens next:**\n"
        "- Our content team will review your submission\n"
        "- We'll evaluate the screener and synopsis\n"
        "- You'll hear back from us via email with next steps"
    )
    st.caption(f"Submission ID: {o['reference']}")
    st.divider()
    st.button("← Start over with a new submission", on_click=_on_start_over)


with tab_triage:
    view = payload["view"]
    if view == service.VIEW_WIZARD:
        _render_wizard(payload)
    elif view == service.VIEW_OUTCOME:
        _render_outcome(payload)
    else:
        _render_thank_you(payload)


# ---------- Chooser ----------
def _direct_back():
    session.chooser.back()
    _clear_widgets("direct_")


def _direct_submit():
    if session.chooser.submit():
        _clear_widgets("direct_")


with tab_paths:
    chooser = session.chooser
    st.markdown(f"## {chooser.header}")

    if chooser.view == "chooser":
        c1, c2 = st.columns(2)
        with c1:
            st.markdown("#### Originals Development")
            st.write("For pitches, treatments, or scripts you'd like us to consider developing into an Original.")
            st.link_button("Submit to Originals", chooser.originals_url, use_container_width=True)
        with c2:
            st.markdown("#### Distribution Request")
            st.write("For completed films or series you'd like to submit for distribution.")
            st.button("Request Distribution", on_click=chooser.open_form, use_container_width=True)

    elif chooser.submitted:
        st.success("Thank you!")
        st.write("Thank you so much for thinking of us. We've received your materials.")
        st.markdown(
            "**Please do not resend your materials to any individual team member.** "
            "If you do, your project will be removed from further consideration."
        )
        st.write("Due to the volume of requests, we're not able to respond to each submission individually.")
        st.button("Done", on_click=chooser.done)

    else:
        form = chooser.form
        st.text_input("Name", key="direct_name", on_change=_on_direct_field, args=("name",))
        st.text_input("Best email to contact", key="direct_email", on_change=_on_direct_field, args=("email",))
        if form.email_flagged:
            _field_error({"email": "Please enter a valid email address"}, "email")
        st.text_input("Logline", key="direct_logline", on_change=_on_direct_field, args=("logline",))
        st.text_input("Link to film/series", key="direct_link", placeholder="https://…",
                      on_change=_on_direct_field, args=("link",))
        if form.link_flagged:
            _field_error({"link": "Link must start with http:// or https://"}, "link")

        b1, b2 = st.columns(2)
        with b1:
            st.button("Back", on_click=_direct_back)
        with b2:
            st.button("Submit", type="primary", disabled=not form.ready, on_click=_direct_submit)


# ---------- FAQ ----------
st.divider()
st.subheader("FAQ")
for title, body in FAQ:
    with st.expander(title):
        st.write(body)

if CONFIG.show_debug:
    with st.expander("Session state (debug)"):
        st.json(payload)

# The run that follows an answer click draws the picked option first, then moves on
if payload["awaiting_settle"]:
    time.sleep(CONFIG.advance_delay_ms / 1000.0)
    service.settle(session)
    st.rerun()
