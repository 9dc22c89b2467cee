from dataclasses import dataclass

from passforge.config.config_passforge import (
    LOWERCASE, UPPERCASE, DIGITS, SYMBOLS, MIN_LENGTH, MAX_LENGTH, PASS_DEFAULTS,
)
from passforge.errors import InvalidPolicy

_ALNUM = frozenset(LOWERCASE + UPPERCASE + DIGITS)


@dataclass(frozen=True)
class CharClassFlags:
    """Which of the four character classes occur in a string."""
    lower: bool = False
    upper: bool = False
    digit: bool = False
    symbol: bool = False

    def charset_size(self) -> int:
        """Sum of the sizes of the classes present (26/26/10/32)."""
        size = 0
        if self.lower:
            size += len(LOWERCASE)
        if self.upper:
            size += len(UPPERCASE)
        if self.digit:
            size += len(DIGITS)
        if self.symbol:
            size += len(SYMBOLS)
        return size


@dataclass(frozen=True)
class CharsetPolicy:
    """
    Character class selection and length for one password generation.

    Immutable once built. Construction validates that at least one class
    is enabled and that the length lies within the allowed bounds.

    Raises:
        InvalidPolicy: On an empty selection or an out-of-range length.
    """
    include_lower: bool = PASS_DEFAULTS["lowercase"]
    include_upper: bool = PASS_DEFAULTS["uppercase"]
    include_digits: bool = PASS_DEFAULTS["numbers"]
    include_symbols: bool = PASS_DEFAULTS["symbols"]
    length: int = PASS_DEFAULTS["length"]

    def __post_init__(self):
        if not any((self.include_lower, self.include_upper,
                    self.include_digits, self.include_symbols)):
            raise InvalidPolicy("Select at least one character type")

        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidPolicy("Length must be an integer")

        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise InvalidPolicy(
                f"Length {self.length} out of range ({MIN_LENGTH}-{MAX_LENGTH})"
            )

    def alphabet(self) -> str:
        """
        Concatenate the enabled classes in fixed order: lower, upper, digits, symbols.
        """
        alphabet = ""
        if self.include_lower:
            alphabet += LOWERCASE
        if self.include_upper:
            alphabet += UPPERCASE
        if self.include_digits:
            alphabet += DIGITS
        if self.include_symbols:
            alphabet += SYMBOLS
        return alphabet


def classify(value: str) -> CharClassFlags:
    """
    Detect which character classes a string contains.

    Lower/upper/digit are ASCII membership tests. Anything that is not
    an ASCII letter or digit counts as a symbol.
    """
    return CharClassFlags(
        lower=any(c in LOWERCASE for c in value),
        upper=any(c in UPPERCASE for c in value),
        digit=any(c in DIGITS for c in value),
        symbol=any(c not in _ALNUM for c in value),
    )


def char_counts(value: str) -> dict:
    """
    Count characters per class, as shown in manual mode.

    Returns:
        Dict with keys total, lowercase, uppercase, numbers, symbols.
    """
    counts = {
        "total": len(value),
        "lowercase": 0,
        "uppercase": 0,
        "numbers": 0,
        "symbols": 0,
    }
    for c in value:
        if c in LOWERCASE:
            counts["lowercase"] += 1
        elif c in UPPERCASE:
            counts["uppercase"] += 1
        elif c in DIGITS:
            counts["numbers"] += 1
        else:
            counts["symbols"] += 1
    return counts
