"""WordPass -- Streamlit web interface."""

import streamlit as st

from wordpass import RULE_NAMES, assemble_password, mask_password, score_password
from wordpass.entries import WordList

LABEL_COLORS = {
    "Weak": "#d32f2f",
    "Moderate": "#fbc02d",
    "Strong": "#1976d2",
    "Very Strong": "#388e3c",
}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="WordPass",
    page_icon="\U0001f510",
    layout="wide",
)

if "words" not in st.session_state:
    st.session_state.words = WordList()

words: WordList = st.session_state.words

st.title("\U0001f510 WordPass")
st.caption(
    "Build a strong password from words that mean something to you.  \n"
    "Nothing leaves your browser session and nothing is stored."
)

col_main, col_tips = st.columns([2, 1])

# ── Word rows ─────────────────────────────────────────────────────────────

with col_main:
    st.subheader("Your words")

    for index, entry in enumerate(list(words)):
        c_input, c_icon, c_remove = st.columns([8, 1, 1])
        with c_input:
            value = st.text_input(
                f"Word {index + 1}",
                value=entry.value,
                key=f"word-{entry.id}",
                placeholder=f"Word {index + 1}",
                label_visibility="collapsed",
            )
            if value != entry.value:
                words.update(entry.id, value)
            for err in entry.errors:
                st.markdown(
                    f"<span style='color:#d32f2f;font-size:0.85em'>⚠ {err}</span>",
                    unsafe_allow_html=True,
                )
        with c_icon:
            if entry.value:
                st.markdown("✅" if entry.is_valid else "❌")
        with c_remove:
            if st.button("➖", key=f"remove-{entry.id}", disabled=len(words) == 1):
                words.remove(entry.id)
                st.rerun()

    if st.button("➕ Add another word"):
        words.add()
        st.rerun()

    # Re-assemble on every run, after the rows above have been applied.
    password = assemble_password(words.values())
    report = score_password(password)

    st.divider()
    st.subheader("Your generated password")

    if password:
        show = st.toggle("Show password", value=False)
        if show:
            st.code(mask_password(password, show), language=None)
        else:
            st.markdown(f"`{mask_password(password)}`")
            st.caption("Turn on *Show password* to copy it.")
        color = LABEL_COLORS[report["label"]]
        st.markdown(
            f"**Strength:** <span style='color:{color}'>{report['label']}</span>"
            f" &nbsp;·&nbsp; {report['passed']}/{report['total']} rules",
            unsafe_allow_html=True,
        )
        st.progress(report["passed"] / report["total"])

        rule_cols = st.columns(2)
        for i, (key, passed) in enumerate(report["rules"].items()):
            icon = "✅" if passed else "❌"
            rule_cols[i % 2].markdown(f"{icon} {RULE_NAMES[key]}")
        if not words.all_valid:
            st.warning("Some words are weak. They are still used in the password.")
    else:
        st.info("Enter at least one word to generate a password.")

# ── Best practices ────────────────────────────────────────────────────────

with col_tips:
    st.subheader("Security rules")
    st.markdown(
        "**1. Minimum length**  \n"
        "At least 12 characters.\n\n"
        "**2. Mix character types**  \n"
        "- Uppercase letters (A-Z)\n"
        "- Lowercase letters (a-z)\n"
        "- Numbers (0-9)\n"
        "- Symbols (!, @, #, $, ...)\n\n"
        "**3. Avoid the obvious**  \n"
        "- No common words\n"
        "- No proper names\n"
        "- No important dates\n"
        "- No simple sequences\n\n"
        "**4. Passphrases**  \n"
        "Combine unique words that make sense to you."
    )
    st.subheader("Extra tips")
    st.markdown(
        "- **Change regularly:** update passwords every 3-6 months\n"
        "- **Don't reuse:** one unique password per account\n"
        "- **Use 2FA:** turn on two-factor authentication where possible\n"
        "- **Password manager:** consider a dedicated password manager"
    )
    st.success("Example of a strong password: `T!g3rL!ly#2024!RunS`")
