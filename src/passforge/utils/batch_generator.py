from dataclasses import dataclass

from passforge.config.config_passforge import MIN_BATCH, MAX_BATCH
from passforge.errors import InvalidPolicy
from .charsets import CharsetPolicy
from .passphrase_generator import PassphrasePolicy, generate_passphrase
from .password_generator import GeneratedSecret, generate_password
from .password_utils import StrengthReport, analyze
from .random_source import RandomSource, default_source


@dataclass(frozen=True)
class BatchItem:
    """One batch row: a generated secret and its strength."""
    id: int
    secret: GeneratedSecret
    strength: StrengthReport

    @property
    def value(self) -> str:
        return self.secret.value

    def to_dict(self) -> dict:
        """Serialize the row for export."""
        return {
            "id": self.id,
            "password": self.secret.value,
            "length": self.secret.length,
            "strength": self.strength.label,
        }


def generate_many(policy: CharsetPolicy | PassphrasePolicy,
                  count: int,
                  source: RandomSource = default_source) -> list[BatchItem]:
    """
    Generate `count` independent secrets, each with its StrengthReport.

    Every row is drawn from scratch; no output is derived from another.
    The policy is validated once before the loop, so no row can fail on
    its own.

    Args:
        policy: A CharsetPolicy for passwords or a PassphrasePolicy.
        count: Number of rows, 1-50.
        source: Secure index source.

    Returns:
        Rows numbered from 1 in request order.

    Raises:
        InvalidPolicy: If count is out of range, the policy type is
            unsupported, or the charset selection is empty.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidPolicy("Batch count must be an integer")
    if not MIN_BATCH <= count <= MAX_BATCH:
        raise InvalidPolicy(f"Batch count {count} out of range ({MIN_BATCH}-{MAX_BATCH})")

    if isinstance(policy, CharsetPolicy):
        if not policy.alphabet():
            raise InvalidPolicy("Select at least one character type")
        generate = generate_password
    elif isinstance(policy, PassphrasePolicy):
        generate = generate_passphrase
    else:
        raise InvalidPolicy(f"Unsupported policy type {type(policy).__name__}")

    items = []
    for i in range(1, count + 1):
        secret = generate(policy, source)
        items.append(BatchItem(id=i, secret=secret, strength=analyze(secret.value)))
    return items
