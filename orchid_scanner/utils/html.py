"""Plain-text extraction from HTML fragments."""


def strip_tags(fragment: str) -> str:
    """
    Drop everything between an unmatched ``<`` and the next ``>``.

    Angle brackets themselves never reach the output; a stray ``>`` outside a
    tag is dropped as well. No entity decoding is done. An unterminated
    trailing tag swallows the rest of the input.
    """
    out = []
    in_tag = False
    for ch in fragment:
        if ch == "<":
            in_tag = True
        elif ch == ">":
            in_tag = False
        elif not in_tag:
            out.append(ch)
    return "".join(out)
