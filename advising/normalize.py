# normalize.py
WHITESPACE = " \t\r\n"
ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def normalize(s: str) -> str:
    """Trim surrounding whitespace and fold ASCII letters to uppercase.

    Only a-z are folded, so the result does not depend on locale or on
    Unicode case rules ("straße" stays "STRAßE").
    """
    return str(s).strip(WHITESPACE).translate(ASCII_UPPER)
