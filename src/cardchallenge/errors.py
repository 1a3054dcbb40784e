"""Error taxonomy for deck naming, transcoding, and persistence."""

from __future__ import annotations


class CardChallengeError(Exception):
    """Base class for every error raised by this package."""


class MalformedCardToken(CardChallengeError, ValueError):
    """A short-name token could not be parsed into a card."""


class InconsistentRecordSet(CardChallengeError, ValueError):
    """Flat records do not describe a valid selection state."""


class PartitionError(CardChallengeError):
    """A selection state lost, duplicated, or double-booked a card."""


class PersistenceUnavailable(CardChallengeError):
    """A storage backend could not be reached or has nothing stored yet."""


class RoundTripMismatch(CardChallengeError):
    """State read back from a backend differs from the in-memory state."""


class ConfigurationError(CardChallengeError, ValueError):
    """An environment setting has an invalid value."""
