"""UTF-8 validation and code point counting."""

_ACCEPT = 0
_REJECT = 1

# Byte classes of a UTF-8 validating automaton.
_BYTE_CLASSES = bytes(
    [0] * 0x80  # 00..7f
    + [1] * 0x10  # 80..8f
    + [9] * 0x10  # 90..9f
    + [7] * 0x20  # a0..bf
    + [8] * 2  # c0..c1
    + [2] * 30  # c2..df
    + [10]  # e0
    + [3] * 12  # e1..ec
    + [4]  # ed
    + [3] * 2  # ee..ef
    + [11]  # f0
    + [6] * 3  # f1..f3
    + [5]  # f4
    + [8] * 11  # f5..ff
)

_TRANSITIONS = (
    (0, 1, 2, 3, 5, 8, 7, 1, 1, 1, 4, 6, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 1, 1, 1, 1, 1, 0, 1, 0, 1, 1, 1, 1, 1, 1),
    (1, 2, 1, 1, 1, 1, 1, 2, 1, 2, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 2, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 3, 1, 3, 1, 1, 1, 1, 1, 1),
    (1, 3, 1, 1, 1, 1, 1, 3, 1, 3, 1, 1, 1, 1, 1, 1),
    (1, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)


class InvalidUtf8Error(ValueError):
    """The data is not valid UTF-8; ``location`` is the offending byte offset."""

    def __init__(self, location):
        super().__init__(f"invalid UTF-8 at byte {location}")
        self.location = location


def codepoint_count(source):
    """Return the number of code points in UTF-8 ``source``.

    Raises InvalidUtf8Error at the first byte that makes the data invalid,
    or at the end of the data when a sequence is left unfinished.
    """
    state = _ACCEPT
    count = 0
    for position, byte in enumerate(source):
        state = _TRANSITIONS[state][_BYTE_CLASSES[byte]]
        if state == _ACCEPT:
            count += 1
        elif state == _REJECT:
            raise InvalidUtf8Error(position)
    if state != _ACCEPT:
        raise InvalidUtf8Error(len(source))
    return count