from dataclasses import dataclass

from passforge.config.config_passforge import MASK_CHAR
from passforge.errors import InvalidPolicy
from .charsets import CharsetPolicy
from .random_source import RandomSource, default_source


@dataclass(frozen=True)
class GeneratedSecret:
    """Direct engine output. Not archived unless the caller does so."""
    value: str
    length: int

    @classmethod
    def of(cls, value: str) -> "GeneratedSecret":
        return cls(value=value, length=len(value))

    def __repr__(self):
        return f"GeneratedSecret(value=<hidden>, length={self.length})"


def generate_password(policy: CharsetPolicy,
                      source: RandomSource = default_source) -> GeneratedSecret:
    """
    Generate a cryptographically secure random password.

    Builds the alphabet from the enabled character classes in fixed
    order (lower, upper, digits, symbols) and draws every position
    independently and uniformly from it.

    Args:
        policy: Character classes and length to use.
        source: Secure index source. Defaults to the OS CSPRNG.

    Returns:
        The generated password.

    Raises:
        InvalidPolicy: If the policy selects no character class.
        RngUnavailable: If secure randomness cannot be obtained.

    Security Notes:
        - Does not write to history; archival is the caller's decision.
    """
    alphabet = policy.alphabet()
    if not alphabet:
        raise InvalidPolicy("Select at least one character type")

    chars = [alphabet[source.next_index(len(alphabet))] for _ in range(policy.length)]
    return GeneratedSecret.of("".join(chars))


def shuffle_password(value: str, source: RandomSource = default_source) -> str:
    """
    Randomly reorder the characters of a string.

    Used in manual mode to scramble a typed password. The result keeps
    the exact multiset of characters.
    """
    chars = list(value)
    source.shuffle(chars)
    return "".join(chars)


def mask(value: str) -> str:
    """Hide a secret behind one mask character per position."""
    return MASK_CHAR * len(value)
