"""Command line tokenizer.

Splits an input line on unquoted spaces. Single or double quotes group
characters (spaces included) into one token; the quote characters are
dropped. An unterminated quote runs to the end of the line.
"""

QUOTE_CHARS = ('"', "'")


def tokenize(line: str) -> list[str]:
    """Split a command line into tokens.

    Examples:
        >>> tokenize('git commit -m "first commit"')
        ['git', 'commit', '-m', 'first commit']
        >>> tokenize("echo 'it is'  ok")
        ['echo', 'it is', 'ok']
    """
    tokens = []
    current = ""
    quote = ""

    for char in line:
        if not quote and char in QUOTE_CHARS:
            quote = char
        elif quote and char == quote:
            quote = ""
        elif char == " " and not quote:
            if current:
                tokens.append(current)
                current = ""
        else:
            current += char

    if current:
        tokens.append(current)

    return tokens
