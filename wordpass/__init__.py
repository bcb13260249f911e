"""WordPass -- build memorable passwords from your own words.

Core functions for word validation, password assembly and strength scoring.
"""

import enum
import logging
import re
import secrets

logger = logging.getLogger(__name__)


# ── Rule tables ────────────────────────────────────────────────────────────

MIN_WORD_LENGTH = 3
MIN_PASSWORD_LENGTH = 12

COMMON_WORDS = frozenset({
    "password",
    "123456",
    "qwerty",
    "abc123",
    "password123",
    "admin",
    "letmein",
    "welcome",
    "monkey",
    "dragon",
    "master",
    "hello",
    "freedom",
    "whatever",
    "computer",
    "internet",
    "security",
    "system",
    "user",
    "guest",
})

# Years, days of the month and months, as standalone numbers.
PERSONAL_INFO_PATTERNS = (
    re.compile(r"\b(19|20)\d{2}\b", re.ASCII),
    re.compile(r"\b(0[1-9]|[12][0-9]|3[01])\b", re.ASCII),
    re.compile(r"\b(0[1-9]|1[0-2])\b", re.ASCII),
)

SYMBOLS = "!@#$%&*+=?"
DIGITS = "0123456789"

_SYMBOL_CLASS = re.compile(r"""[!@#$%^&*()_+\-=\[\]{};':"\\|,.<>/?]""")

# (minimum percentage of rules passed, label), checked top-down;
# anything below the last threshold is WEAK_LABEL
STRENGTH_LEVELS = (
    (85, "Very Strong"),
    (70, "Strong"),
    (50, "Moderate"),
)
WEAK_LABEL = "Weak"

RULE_NAMES = {
    "has_min_length": f"{MIN_PASSWORD_LENGTH}+ characters",
    "has_uppercase": "Uppercase",
    "has_lowercase": "Lowercase",
    "has_numbers": "Numbers",
    "has_symbols": "Symbols",
    "no_common_words": "No common words",
    "no_personal_info": "No personal information",
}

MASK_CHAR = "•"


def _has_personal_info(text: str) -> bool:
    return any(pattern.search(text) for pattern in PERSONAL_INFO_PATTERNS)


# ── Word validation ────────────────────────────────────────────────────────


class WordError(str, enum.Enum):
    """Reasons a word is rejected.  Each value is its human-readable message."""

    TOO_SHORT = f"Too short (minimum {MIN_WORD_LENGTH} characters)"
    TOO_COMMON = "Too common"
    CONTAINS_PERSONAL_INFO = "Contains personal information (dates)"
    DIGITS_ONLY = "Digits only is not secure"

    def __str__(self) -> str:
        return self.value


def validate_word(word: str) -> dict:
    """Check *word* against the word heuristics.

    Every rule is applied; violations are collected in a fixed order rather
    than stopping at the first one.

    Returns a dict with keys:
        is_valid -- bool, true iff there are no errors
        errors   -- list[WordError]
    """
    errors: list[WordError] = []

    if len(word) < MIN_WORD_LENGTH:
        errors.append(WordError.TOO_SHORT)
    if word.lower() in COMMON_WORDS:
        errors.append(WordError.TOO_COMMON)
    if _has_personal_info(word):
        errors.append(WordError.CONTAINS_PERSONAL_INFO)
    if re.fullmatch(r"[0-9]+", word):
        errors.append(WordError.DIGITS_ONLY)

    return {
        "is_valid": not errors,
        "errors": errors,
    }


# ── Password assembly ──────────────────────────────────────────────────────


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def assemble_password(words, rng=None) -> str:
    """Combine *words* into a single password.

    Each word is capitalized and joined to the next by a random symbol or
    digit (50/50).  Two random digits and a final symbol are appended.
    Blank words are skipped; invalid words are not, so callers decide
    whether to filter them.  Returns ``""`` when no usable word is left.

    *rng* is any :class:`random.Random`-compatible source.  Pass a seeded
    ``random.Random`` for reproducible output; by default a
    :class:`secrets.SystemRandom` is used.
    """
    usable = [w for w in words if w.strip()]
    if not usable:
        logger.debug("No usable words, returning empty password")
        return ""

    if rng is None:
        rng = secrets.SystemRandom()

    parts: list[str] = []
    for index, word in enumerate(usable):
        parts.append(_capitalize(word))
        if index < len(usable) - 1:
            pool = SYMBOLS if rng.random() < 0.5 else DIGITS
            parts.append(rng.choice(pool))

    parts.append(f"{rng.randrange(100):02d}")
    parts.append(rng.choice(SYMBOLS))

    logger.debug("Assembled password from %d word(s)", len(usable))
    return "".join(parts)


# ── Strength scoring ───────────────────────────────────────────────────────


def check_rules(password: str) -> dict:
    """Evaluate *password* against the seven strength rules.

    Returns a dict mapping each rule name to ``True`` when it is satisfied.
    """
    lower = password.lower()
    return {
        "has_min_length": len(password) >= MIN_PASSWORD_LENGTH,
        "has_uppercase": bool(re.search(r"[A-Z]", password)),
        "has_lowercase": bool(re.search(r"[a-z]", password)),
        "has_numbers": bool(re.search(r"[0-9]", password)),
        "has_symbols": bool(_SYMBOL_CLASS.search(password)),
        "no_common_words": not any(word in lower for word in COMMON_WORDS),
        "no_personal_info": not _has_personal_info(password),
    }


def strength_label(rules: dict) -> str:
    """Return the strength label for a rule dict from :func:`check_rules`."""
    percentage = sum(rules.values()) / len(rules) * 100 if rules else 0.0
    for threshold, label in STRENGTH_LEVELS:
        if percentage >= threshold:
            return label
    return WEAK_LABEL


def score_password(password: str) -> dict:
    """Score *password* and return a report.

    Returns a dict with keys:
        rules      -- dict[str, bool]  (see :func:`check_rules`)
        passed     -- int, number of satisfied rules
        total      -- int
        percentage -- float, 0-100
        label      -- str  (Weak, Moderate, Strong, Very Strong)
    """
    rules = check_rules(password)
    passed = sum(rules.values())
    total = len(rules)
    logger.debug("Password passed %d/%d rules", passed, total)

    return {
        "rules": rules,
        "passed": passed,
        "total": total,
        "percentage": round(passed / total * 100, 1),
        "label": strength_label(rules),
    }


def mask_password(password: str, show: bool = False) -> str:
    """Return *password* as displayed: as-is when *show*, else one
    :data:`MASK_CHAR` per character."""
    if show:
        return password
    return MASK_CHAR * len(password)
