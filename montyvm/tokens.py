"""Splitting script lines into words and reading ``push`` arguments."""

from .errors import PushArgumentError

DELIMS = " \n\t\a\b"


def split_words(text, delims=DELIMS):
    """Return the words of ``text``, separated by any run of ``delims`` characters."""
    words = []
    current = []
    for ch in text:
        if ch in delims:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        words.append("".join(current))
    return words


def is_blank(text, delims=DELIMS):
    """Tell whether ``text`` holds nothing but delimiter characters."""
    return all(ch in delims for ch in text)


def parse_push_argument(token):
    """Read the integer argument of ``push``.

    Only decimal digits are accepted, with an optional leading minus sign.
    A lone ``-`` reads as zero. Raises :class:`PushArgumentError` when the
    argument is missing or malformed.
    """
    if token is None:
        raise PushArgumentError()
    body = token[1:] if token.startswith("-") else token
    if not all("0" <= ch <= "9" for ch in body):
        raise PushArgumentError()
    if not body:
        return 0
    return int(token)