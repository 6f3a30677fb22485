import re

NON_WORD_PATTERN = re.compile(r"\s|\W")

# DOT reads a backslash run as escape pairs where it meets a quote, a line
# break or the closing quote. Elsewhere backslashes are kept as written.
_ESCAPE_PATTERN = re.compile(r'(\\*)("|\n|\Z)')
_UNESCAPE_PATTERN = re.compile(r'(\\*)(\\"|\n|\Z)')


def quote(label: str) -> str:
    return quote_value(label.strip())


def quote_value(value: str) -> str:
    return f'"{_ESCAPE_PATTERN.sub(_escape, value)}"'


def unquote(identifier: str) -> str:
    if len(identifier) >= 2 and identifier[0] == '"' and identifier[-1] == '"':
        return _UNESCAPE_PATTERN.sub(_unescape, identifier[1:-1])
    return identifier


def sanitize_cluster_id(raw: str) -> tuple[str, bool]:
    """Strip whitespace and non-word characters; report whether any were removed."""
    cleaned = NON_WORD_PATTERN.sub("", raw)
    return cleaned, cleaned != raw


def _escape(match: re.Match) -> str:
    backslashes, tail = match.groups()
    return backslashes * 2 + ('\\"' if tail == '"' else tail)


def _unescape(match: re.Match) -> str:
    backslashes, tail = match.groups()
    return backslashes[: len(backslashes) // 2] + ('"' if tail == '\\"' else tail)
