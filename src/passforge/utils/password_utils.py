import math
from dataclasses import dataclass, field

from zxcvbn import zxcvbn

from passforge.config.config_passforge import GUESSES_PER_SECOND, ZXCVBN_MAX_LENGTH
from .charsets import CharClassFlags, classify

NO_PASSWORD = "No Password"
WEAK, FAIR, GOOD, STRONG = "Weak", "Fair", "Good", "Strong"
INSTANTLY = "Instantly"
MILLIONS_OF_YEARS = "Millions of years"

MINUTE = 60
HOUR = 3600
DAY = 86400
MONTH = 30 * DAY
YEAR = 365 * DAY

# (upper bound in seconds, unit size in seconds, unit name), checked in order
CRACK_TIME_BUCKETS = (
    (MINUTE, 1, "seconds"),
    (HOUR, MINUTE, "minutes"),
    (DAY, HOUR, "hours"),
    (MONTH, DAY, "days"),
    (YEAR, MONTH, "months"),
    (10 * YEAR, YEAR, "years"),
    (100 * YEAR, 10 * YEAR, "decades"),
    (1000 * YEAR, 100 * YEAR, "centuries"),
)


@dataclass(frozen=True)
class StrengthReport:
    """
    Strength analysis of one string.

    `score` is the 0-4 bar value, `raw_score` the 0-8 sum the label is
    derived from. Both scales are kept as they are observable.
    """
    score: int
    label: str
    entropy_bits: float
    crack_time: str
    flags: CharClassFlags = field(default_factory=CharClassFlags)
    length: int = 0
    unique_chars: int = 0
    raw_score: int = 0
    crack_time_seconds: float = 0.0


def raw_score(value: str, flags: CharClassFlags | None = None) -> int:
    """
    Sum of length, character class and variety points (0-8).

    +1 each for length >= 8, 12 and 16
    +1 per character class present
    +1 if at least 70% of characters are unique
    """
    if not value:
        return 0
    flags = flags or classify(value)
    length = len(value)

    score = 0
    if length >= 8:
        score += 1
    if length >= 12:
        score += 1
    if length >= 16:
        score += 1

    score += sum((flags.lower, flags.upper, flags.digit, flags.symbol))

    if len(set(value)) >= length * 0.7:
        score += 1

    return score


def strength_label(raw: int) -> str:
    """Map a raw 0-8 score to its label."""
    if raw <= 2:
        return WEAK
    if raw <= 4:
        return FAIR
    if raw <= 6:
        return GOOD
    return STRONG


def normalized_score(raw: int) -> int:
    """Map a raw 0-8 score to the 0-4 bar scale."""
    return min(math.ceil(raw / 2), 4)


def entropy_bits(length: int, charset_size: int) -> float:
    """length * log2(charset_size); zero when the charset is empty."""
    if charset_size <= 0 or length <= 0:
        return 0.0
    return length * math.log2(charset_size)


def crack_seconds(length: int, charset_size: int) -> float:
    """
    Seconds to exhaust charset_size ** length guesses at the fixed attacker rate.

    Returns math.inf when the result is too large for a float.
    """
    if charset_size <= 0:
        return 0.0
    try:
        return charset_size ** length / GUESSES_PER_SECOND
    except OverflowError:
        return math.inf


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def crack_time_bucket(seconds: float) -> int:
    """
    Rank of the display bucket for a duration.

    0 is "Instantly", len(CRACK_TIME_BUCKETS) + 1 is "Millions of years".
    """
    if seconds < 1:
        return 0
    for rank, (limit, _, _) in enumerate(CRACK_TIME_BUCKETS, start=1):
        if seconds < limit:
            return rank
    return len(CRACK_TIME_BUCKETS) + 1


def format_crack_time(seconds: float) -> str:
    """
    Render a duration as a human readable crack time.

    Examples:
        0.2        -> "Instantly"
        90         -> "2 minutes"
        40 years   -> "4 decades"
    """
    rank = crack_time_bucket(seconds)
    if rank == 0:
        return INSTANTLY
    if rank > len(CRACK_TIME_BUCKETS):
        return MILLIONS_OF_YEARS
    _, unit, name = CRACK_TIME_BUCKETS[rank - 1]
    return f"{_round_half_up(seconds / unit)} {name}"


def analyze(value: str) -> StrengthReport:
    """
    Score an arbitrary string.

    Pure and deterministic. Entropy and crack time use the alphabet
    observed in the string itself, not the one it was generated from.

    Args:
        value: Generated or hand-typed secret.

    Returns:
        StrengthReport. An empty string yields score 0, label
        "No Password", zero entropy and "Instantly".
    """
    if not value:
        return StrengthReport(
            score=0,
            label=NO_PASSWORD,
            entropy_bits=0.0,
            crack_time=INSTANTLY,
        )

    flags = classify(value)
    length = len(value)
    raw = raw_score(value, flags)
    charset_size = flags.charset_size()
    seconds = crack_seconds(length, charset_size)

    return StrengthReport(
        score=normalized_score(raw),
        label=strength_label(raw),
        entropy_bits=entropy_bits(length, charset_size),
        crack_time=format_crack_time(seconds),
        flags=flags,
        length=length,
        unique_chars=len(set(value)),
        raw_score=raw,
        crack_time_seconds=seconds,
    )


def pattern_feedback(value: str) -> dict:
    """
    Offline pattern analysis using the zxcvbn library.
    https://pypi.org/project/zxcvbn/

    Detects dictionary words, names, dates, keyboard patterns and
    repeats that the character class estimate cannot see. Supplements
    analyze(); it does not change the StrengthReport.

    Returns:
        Dict with score (0-4), warning, suggestions and the offline fast
        hashing crack time display. Empty input returns score 0 with no
        feedback.
    """
    if not value:
        return {"score": 0, "warning": "", "suggestions": [], "crack_time": INSTANTLY}

    results = zxcvbn(value[:ZXCVBN_MAX_LENGTH], max_length=ZXCVBN_MAX_LENGTH)

    return {
        "score": results["score"],
        "warning": results["feedback"]["warning"],
        "suggestions": list(results["feedback"]["suggestions"]),
        "crack_time": results["crack_times_display"]["offline_fast_hashing_1e10_per_second"],
    }
