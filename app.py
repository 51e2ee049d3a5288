import base64

import streamlit as st

from src import config
from src.editing.draft import ProfileStore
from src.editing.paths import ProfileField
from src.models.profile import EXPERIENCE_FIELDS
from src.scoring.completeness import evaluate_completeness
from src.scoring.display import (
    badge_tally,
    boost_suggestions,
    job_types_display,
    placeholder_email,
    salary_display,
    skills_preview,
)
from src.scoring.strength import evaluate_strength
from src.storage.seed import load_seed_profile
from src.utils.logging import setup_logging

JOB_TYPE_OPTIONS = ["Full-time", "Part-time", "Contract"]
EDIT_WIDGET_PREFIXES = ("skill-input", "exp-", "jt-", "notify-")
# Streamlit markdown only knows a few colour names
TONE_COLORS = {"red": "red", "yellow": "orange", "blue": "blue", "teal": "violet", "green": "green"}
NOTIFICATION_FIELDS = {
    ProfileField.NOTIFY_JOBS: "New job matches",
    ProfileField.NOTIFY_STATUS: "Application status updates",
    ProfileField.NOTIFY_MESSAGES: "Messages from recruiters",
}

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="My Profile", layout="wide")
setup_logging(config.LOG_LEVEL)

# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
if "store" not in st.session_state:
    st.session_state.store = ProfileStore(load_seed_profile())
_DEFAULTS = {
    "draft": None,
    "derived_preferences": None,
}
for k, v in _DEFAULTS.items():
    if k not in st.session_state:
        st.session_state[k] = v

store: ProfileStore = st.session_state.store


def _clear_widgets(*prefixes: str) -> None:
    # Keyed widgets would otherwise replay stale values into the draft
    for key in [k for k in st.session_state if str(k).startswith(prefixes)]:
        del st.session_state[key]


def _to_data_url(upload) -> str:
    encoded = base64.b64encode(upload.getvalue()).decode("ascii")
    return f"data:{upload.type};base64,{encoded}"


# ---------------------------------------------------------------------------
# Sidebar: completeness + strength
# ---------------------------------------------------------------------------
profile = store.profile
completeness = evaluate_completeness(profile)
strength = evaluate_strength(profile)

with st.sidebar:
    st.subheader("Profile completeness")
    st.progress(completeness.percentage / 100, text=f"{completeness.percentage}%")
    for name in completeness.completed:
        st.markdown(f"- :green[{name}]")
    for name in completeness.pending:
        st.markdown(f"- :gray[{name}]")

    st.subheader("Profile strength")
    st.markdown(f"**{strength.percentage}% Complete** · :{TONE_COLORS[strength.tone]}[{strength.label}]")
    suggestions, remaining = boost_suggestions(strength)
    if suggestions:
        st.caption("Boost your profile by adding:")
        for category in suggestions:
            st.markdown(f"- {category.name}")
        if remaining:
            st.caption(f"+ {remaining} more items to complete")

    earned, total = badge_tally(profile.badges)
    st.subheader(f"Badges {earned}/{total}")

# ---------------------------------------------------------------------------
# View mode
# ---------------------------------------------------------------------------
draft = st.session_state.draft

if st.session_state.derived_preferences is not None:
    derived = st.session_state.derived_preferences
    st.success(
        f"Profile saved. Job search now targets {derived.role or 'any role'} "
        f"in {derived.location or 'any location'}."
    )

if draft is None:
    col_img, col_info = st.columns([1, 4])
    with col_img:
        if profile.profile_image:
            st.image(profile.profile_image)
    with col_info:
        st.header(profile.name or "Your Name")
        st.write(profile.position or "Your Position")
        st.caption(f"{profile.location or 'Location'} · {placeholder_email(profile.name)}")

    st.subheader("About")
    st.write(profile.about)

    shown, extra = skills_preview(profile.skills)
    st.subheader("Skills")
    st.write(", ".join(shown) + (f" +{extra} more" if extra else ""))

    st.subheader("Experience")
    for entry in profile.experience:
        st.markdown(f"**{entry.position}** · {entry.company} ({entry.period})")
        st.write(entry.description)

    st.subheader("Job preferences")
    st.write(f"Location: {profile.preferences.location or 'Not set'}")
    st.write(f"Job types: {job_types_display(profile.preferences)}")
    st.write(f"Salary range: {salary_display(profile.preferences)}")

    if st.button("Edit profile", key="edit-profile"):
        st.session_state.draft = store.begin_edit()
        st.session_state.derived_preferences = None
        st.rerun()
    st.stop()

# ---------------------------------------------------------------------------
# Edit mode
# ---------------------------------------------------------------------------
current = draft.profile

upload = st.file_uploader("Profile photo", type=["png", "jpg", "jpeg"])
if upload is not None:
    draft.set_field(ProfileField.PROFILE_IMAGE, _to_data_url(upload))

draft.set_field(ProfileField.NAME, st.text_input("Full name", current.name))
draft.set_field(ProfileField.POSITION, st.text_input("Position", current.position))
draft.set_field(ProfileField.LOCATION, st.text_input("Location", current.location))
draft.set_field(ProfileField.ABOUT, st.text_area("About", current.about))

st.subheader("Skills")
for skill in current.skills:
    if st.button(f"Remove {skill}", key=f"rm-skill-{skill}"):
        draft.remove_skill(skill)
        st.rerun()
new_skill = st.text_input("Add a skill", key="skill-input")
if st.button("Add skill", key="add-skill"):
    draft.add_skill(new_skill)
    _clear_widgets("skill-input")
    st.rerun()

st.subheader("Experience")
for index, entry in enumerate(current.experience):
    with st.container(border=True):
        for field in EXPERIENCE_FIELDS:
            value = st.text_input(field.title(), getattr(entry, field), key=f"exp-{index}-{field}")
            draft.update_experience_field(index, field, value)
        if st.button("Remove", key=f"rm-exp-{index}"):
            draft.remove_experience_entry(index)
            _clear_widgets("exp-")
            st.rerun()
if st.button("Add experience", key="add-exp"):
    draft.add_experience_entry()
    st.rerun()

st.subheader("Job preferences")
draft.set_field(
    ProfileField.PREFERRED_LOCATION,
    st.text_input("Preferred location", current.preferences.location),
)
for job_type in JOB_TYPE_OPTIONS:
    checked = st.checkbox(job_type, job_type in current.preferences.job_types, key=f"jt-{job_type}")
    draft.set_job_type(job_type, checked)
salary = current.preferences.salary_range
draft.set_field(ProfileField.SALARY_MIN, st.text_input("Salary from", salary.min))
draft.set_field(ProfileField.SALARY_MAX, st.text_input("Salary to", salary.max))
for path, label in NOTIFICATION_FIELDS.items():
    flag = current.preferences.notifications.get(path.segments[-1], False)
    draft.set_toggle(path, st.checkbox(label, flag, key=f"notify-{path.name}"))

col_save, col_cancel = st.columns(2)
if col_save.button("Save changes", type="primary", key="save-profile"):
    result = draft.commit()
    st.session_state.derived_preferences = result.derived
    _clear_widgets(*EDIT_WIDGET_PREFIXES)
    st.session_state.draft = None
    st.rerun()
if col_cancel.button("Cancel", key="cancel-edit"):
    draft.discard()
    _clear_widgets(*EDIT_WIDGET_PREFIXES)
    st.session_state.draft = None
    st.rerun()
