from __future__ import annotations

from collections.abc import Callable

from .dictionary import Dictionary
from .errors import InvalidChallengeError, InvalidChallengeReason
from .history import EntryType, HistoryEntry

ChallengeValidator = Callable[[HistoryEntry | None, Dictionary], bool]


def validate_challenge(last_play: HistoryEntry | None, is_word_valid: Dictionary) -> bool:
    """Overí, či je námietka voči poslednému ťahu prípustná a či uspeje.

    Námietka uspeje, ak aspoň jedno zo slov vytvorených ťahom slovník
    neuzná. Neprípustná námietka vyvolá `InvalidChallengeError`.
    """
    if last_play is None:
        raise InvalidChallengeError(InvalidChallengeReason.NO_PLAY_TO_CHALLENGE)
    if last_play.type in (EntryType.CHALLENGE_FAIL, EntryType.CHALLENGE_SUCCESS):
        raise InvalidChallengeError(InvalidChallengeReason.PLAY_ALREADY_CHALLENGED)
    if last_play.type is not EntryType.PLAY:
        raise InvalidChallengeError(InvalidChallengeReason.NO_PLAY_TO_CHALLENGE)

    return any(not is_word_valid(w.word) for w in last_play.words_formed)
