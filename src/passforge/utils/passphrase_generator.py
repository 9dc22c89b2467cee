from dataclasses import dataclass

from passforge.config.config_passforge import (
    MIN_WORDS, MAX_WORDS, SEPARATORS, NUMBER_PLACEMENTS, PHRASE_DEFAULTS,
)
from passforge.errors import InvalidPolicy
from .password_generator import GeneratedSecret
from .random_source import RandomSource, default_source
from .wordlists import get_word_list


@dataclass(frozen=True)
class PassphrasePolicy:
    """
    Word count, vocabulary, separator, capitalization and number placement.

    Raises:
        InvalidPolicy: If any field is outside its allowed values.
    """
    word_count: int = PHRASE_DEFAULTS["word_count"]
    list_id: str = PHRASE_DEFAULTS["list_id"]
    separator: str = PHRASE_DEFAULTS["separator"]
    capitalize: bool = PHRASE_DEFAULTS["capitalize"]
    number_placement: str = PHRASE_DEFAULTS["number_placement"]

    def __post_init__(self):
        if isinstance(self.word_count, bool) or not isinstance(self.word_count, int):
            raise InvalidPolicy("Word count must be an integer")
        if not MIN_WORDS <= self.word_count <= MAX_WORDS:
            raise InvalidPolicy(
                f"Word count {self.word_count} out of range ({MIN_WORDS}-{MAX_WORDS})"
            )
        if self.separator not in SEPARATORS:
            raise InvalidPolicy(f"Unsupported separator {self.separator!r}")
        if self.number_placement not in NUMBER_PLACEMENTS:
            raise InvalidPolicy(
                f"Unknown number placement '{self.number_placement}'. "
                f"Choose from: {', '.join(NUMBER_PLACEMENTS)}"
            )
        # Raises InvalidPolicy for an unknown list
        get_word_list(self.list_id)


def generate_passphrase(policy: PassphrasePolicy,
                        source: RandomSource = default_source) -> GeneratedSecret:
    """
    Compose a passphrase from randomly drawn words.

    Words are drawn with replacement, so the same word may appear more
    than once. Numbers are injected according to policy.number_placement:

        none    - words joined by the separator
        prefix  - one number in [0, 1000) before the words
        suffix  - one number in [0, 1000) after the words
        between - a fresh digit 0-9 after every word but the last

    All draws, numbers included, come from the secure source.

    Args:
        policy: Passphrase options.
        source: Secure index source. Defaults to the OS CSPRNG.

    Returns:
        The generated passphrase.
    """
    words = get_word_list(policy.list_id)
    sep = policy.separator

    selected = []
    for _ in range(policy.word_count):
        word = words[source.next_index(len(words))]
        if policy.capitalize:
            word = word[:1].upper() + word[1:]
        selected.append(word)

    placement = policy.number_placement
    if placement == "prefix":
        parts = [str(source.next_index(1000))] + selected
    elif placement == "suffix":
        parts = selected + [str(source.next_index(1000))]
    elif placement == "between":
        parts = []
        for i, word in enumerate(selected):
            if i < len(selected) - 1:
                parts.extend((word, str(source.next_index(10))))
            else:
                parts.append(word)
    else:
        parts = selected

    return GeneratedSecret.of(sep.join(parts))
