"""
JavaScript escape decoding for string literal contents and template "cooked" values.
"""

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}
_LINE_TERMINATORS = "\n\r\u2028\u2029"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_OCTAL_DIGITS = "01234567"
_DECIMAL_DIGITS = "0123456789"


class EscapeError(ValueError):
    pass


def _hex_value(digits: str, expected: int = 0) -> int:
    if not digits or (expected and len(digits) != expected):
        raise EscapeError(f"Invalid hex escape: {digits!r}")
    if any(c not in _HEX_DIGITS for c in digits):
        raise EscapeError(f"Invalid hex escape: {digits!r}")
    return int(digits, 16)


def _join_surrogates(value: str) -> str:
    # A surrogate pair written as two \u escapes is one code point in JS.
    try:
        return value.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    except UnicodeDecodeError:
        return value


def decode_escapes(raw: str, template: bool = False) -> str:
    """
    Decode the escape sequences of a JS string body (quotes removed).

    With template=True this produces a template segment's cooked value:
    CR and CRLF become LF, and legacy octal escapes are invalid.
    Raises EscapeError on malformed escapes.
    """
    out = []
    i = 0
    n = len(raw)
    while i < n:
        ch = raw[i]
        if ch != "\\":
            if template and ch == "\r":
                out.append("\n")
                i += 2 if raw.startswith("\r\n", i) else 1
            else:
                out.append(ch)
                i += 1
            continue

        i += 1
        if i >= n:
            raise EscapeError("Dangling backslash")
        ch = raw[i]

        if ch in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[ch])
            i += 1
        elif ch in _LINE_TERMINATORS:
            # line continuation
            i += 2 if raw.startswith("\r\n", i) else 1
        elif ch == "x":
            out.append(chr(_hex_value(raw[i + 1:i + 3], 2)))
            i += 3
        elif ch == "u":
            if raw.startswith("{", i + 1):
                close = raw.find("}", i + 2)
                if close == -1:
                    raise EscapeError("Unterminated \\u{ escape")
                code_point = _hex_value(raw[i + 2:close])
                if code_point > 0x10FFFF:
                    raise EscapeError(f"Code point out of range: {code_point:#x}")
                i = close + 1
            else:
                code_point = _hex_value(raw[i + 1:i + 5], 4)
                i += 5
            out.append(chr(code_point))
        elif ch == "0" and not (i + 1 < n and raw[i + 1] in _DECIMAL_DIGITS):
            out.append("\0")
            i += 1
        elif ch in _DECIMAL_DIGITS:
            if template:
                raise EscapeError(f"Octal escape in template: \\{ch}")
            if ch in "89":
                out.append(ch)
                i += 1
                continue
            # Legacy octal: up to three digits, value at most 0o377.
            limit = 3 if ch in "0123" else 2
            j = i
            while j < n and j - i < limit and raw[j] in _OCTAL_DIGITS:
                j += 1
            out.append(chr(int(raw[i:j], 8)))
            i = j
        else:
            out.append(ch)
            i += 1

    return _join_surrogates("".join(out))
