"""
Exceptions raised by the Katsuyo conjugation engine.
"""

from typing import Optional


class KatsuyoError(Exception):
    """Base class for conjugation errors."""


class NotAVerb(KatsuyoError):
    """The word does not end in a u-row syllable, so it is not a dictionary-form verb."""

    def __init__(self, word):
        self.word = word
        super().__init__(f"Not a verb in dictionary form: {word.kana!r}")


class UnexpectedEnding(KatsuyoError):
    """No stem table entry matches the final syllable of the word."""

    def __init__(self, word, ending: Optional[str] = None):
        self.word = word
        self.ending = ending
        if ending is None:
            message = f"Word has no ending to conjugate: {word.kana!r}"
        else:
            message = f"Unexpected ending {ending!r} in {word.kana!r}"
        super().__init__(message)
