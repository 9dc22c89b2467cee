import secrets
import logging

import pendulum

from passforge.errors import RngUnavailable

logger = logging.getLogger(__name__)


class RandomSource:
    """
    Uniform index source backed by the operating system CSPRNG.

    Every call is self-contained; the only state is the one kept by the
    OS generator behind the `secrets` module. There is no fallback to a
    non-cryptographic generator: if the OS cannot provide randomness the
    call fails with RngUnavailable.
    """

    def next_index(self, bound: int) -> int:
        """
        Draw a uniformly distributed integer in [0, bound).

        Args:
            bound: Exclusive upper bound. Must be positive.

        Returns:
            An integer in [0, bound).

        Raises:
            ValueError: If bound is not a positive integer.
            RngUnavailable: If no secure random source is available.
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        try:
            return secrets.randbelow(bound)
        except (NotImplementedError, OSError) as e:
            msg = f"Secure random source unavailable: {e}"
            logger.error(f"[{pendulum.now().to_iso8601_string()}] {msg}\n")
            raise RngUnavailable(msg) from e

    def shuffle(self, items: list) -> None:
        """Shuffle a list in place (Fisher-Yates)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_index(i + 1)
            items[i], items[j] = items[j], items[i]


# Shared default source
default_source = RandomSource()
