"""Password synthesis by rejection sampling.

Characters are drawn uniformly from the union of the required classes.  A
draw that misses any required class is discarded whole and redrawn; single
positions are never patched, so the place where a required character lands
stays uniformly distributed.  With every class required and a length close
to the number of classes, several draws per password are normal.
"""

from __future__ import annotations

from inputforge.corpus import BadPasswordCorpus
from inputforge.policy import PasswordPolicy
from inputforge.rand.source import RandomSource
from inputforge.utils.logging import get_logger

__all__ = ["password", "password_for"]

logger = get_logger(__name__)


def _sample(source: RandomSource, policy: PasswordPolicy, length: int) -> str:
    charset = policy.charset
    required = policy.required_classes
    attempts = 0
    while True:
        attempts += 1
        candidate = "".join(source.choice(charset) for _ in range(length))
        if all(any(ch in cls for ch in candidate) for cls in required):
            logger.debug("password of length %d accepted after %d draw(s)", length, attempts)
            return candidate


def _draw(source: RandomSource, policy: PasswordPolicy, corpus: BadPasswordCorpus | None) -> str:
    bound = policy.bounds()
    while True:
        candidate = _sample(source, policy, source.between(bound.min, bound.max))
        if corpus is None or not corpus.is_bad(candidate):
            return candidate
        logger.debug("drawn password found in the bad-password corpus; redrawing")


def password(
    source: RandomSource,
    min_length: int = 0,
    max_length: int = 0,
    *,
    lower: bool = False,
    upper: bool = False,
    digit: bool = False,
    special: bool = False,
) -> str:
    """Return a password meeting the given class requirements.

    With no class required the password is lowercase letters only.  Bounds
    of ``0``/``0`` select ``[classes, 4096]``.
    """

    policy = PasswordPolicy(
        min_length,
        max_length,
        require_lower=lower,
        require_upper=upper,
        require_digit=digit,
        require_special=special,
    )
    return _draw(source, policy, None)


def password_for(
    source: RandomSource,
    policy: PasswordPolicy,
    *,
    corpus: BadPasswordCorpus | None = None,
) -> str:
    """Return a password for ``policy``, redrawing any hit in ``corpus``."""

    return _draw(source, policy, corpus)
