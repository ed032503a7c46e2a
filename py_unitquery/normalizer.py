"""Query text normalization.

Free-form conversion queries arrive with all sorts of noise: thousands
separators, arrow glyphs, polite filler ("please convert ..."), glued numbers
("100kg") and stray whitespace. `normalize` reduces a query to a canonical
form the parser can split on whitespace.

Each step is a small scanner that can be used on its own:

    >>> strip_thousands_separators('1,500 kg')
    '1500 kg'
    >>> collapse_whitespace(rewrite_arrows('m→ft'))
    'm to ft'
    >>> split_digit_letter_runs('100kg')
    '100 kg'
    >>> normalize('Please convert 1,500 KG -> lb?')
    '1500 kg to lb'

Numeric content is never removed by any step.
"""
import re
from typing import Sequence, Tuple

from typing_extensions import Final

__all__ = (
    'CONNECTOR_WORDS',
    'NUMBER_PATTERN',
    'FILLER_PHRASES',
    'normalize',
    'normalize_for_completion',
    'strip_thousands_separators',
    'rewrite_arrows',
    'space_connectors',
    'remove_filler_phrases',
    'collapse_whitespace',
    'split_digit_letter_runs',
    'is_numeric_query',
    'has_connector',
)

#: Words that separate the source unit from the target unit.
CONNECTOR_WORDS: Final[Tuple[str, ...]] = ('into', 'to', 'in')

#: Conversational phrases that carry no conversion information.
FILLER_PHRASES: Final[Tuple[str, ...]] = (
    'convert', 'please', 'me', 'for',
    'how much is', 'how much', 'how many',
    'calculate', 'calc',
    'what is', "what's", 'whats',
    'the value of', 'value of', 'value',
    'amount of', 'amount',
)

# Two-character arrows must be checked before the bare '='
_ARROWS: Final[Tuple[str, ...]] = ('->', '=>', '→', '➔', '=')
_ASCII_DIGITS: Final[str] = '0123456789'
_SUPERSCRIPTS: Final[str] = '⁰¹²³⁴⁵⁶⁷⁸⁹'
_TRAILING_PUNCTUATION: Final[str] = '?!'

_FILLER_TOKENS: Final[Tuple[Tuple[str, ...], ...]] = tuple(
    sorted((tuple(p.split()) for p in FILLER_PHRASES), key=len, reverse=True)
)

NUMBER_PATTERN: Final[str] = r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?'

_NUMBER_RE: Final = re.compile(NUMBER_PATTERN)
_EXPONENT_TAIL_RE: Final = re.compile(r'[eE][+-]?\d')


def _is_letter(ch: str) -> bool:
    return ch.isalpha() or ch == '°'


def _is_digit(ch: str) -> bool:
    return ch in _ASCII_DIGITS


def strip_thousands_separators(text: str) -> str:
    """Remove commas ('1,500' -> '1500')."""
    return text.replace(',', '')


def rewrite_arrows(text: str) -> str:
    """Replace arrow glyphs and '=' with the ' to ' connector."""
    out = []
    i = 0
    while i < len(text):
        for arrow in _ARROWS:
            if text.startswith(arrow, i):
                out.append(' to ')
                i += len(arrow)
                break
        else:
            out.append(text[i])
            i += 1
    return ''.join(out)


def space_connectors(text: str) -> str:
    """Surround standalone connector words with spaces.

    A connector glued to digits or symbols ('m²to ft²', '5in') is separated;
    connectors inside words ('pint', 'tons', 'min²') are left alone.
    """
    out = []
    lowered = text.lower()
    i = 0
    while i < len(text):
        for word in CONNECTOR_WORDS:
            end = i + len(word)
            if not lowered.startswith(word, i):
                continue
            if i > 0 and _is_letter(text[i - 1]):
                continue
            # an exponent right after 'in' ('in²', 'in^2') belongs to the unit
            if end < len(text) and (_is_letter(text[end]) or text[end] in _SUPERSCRIPTS or text[end] == '^'):
                continue
            out.append(f' {text[i:end]} ')
            i = end
            break
        else:
            out.append(text[i])
            i += 1
    return ''.join(out)


def remove_filler_phrases(text: str, phrases: Sequence[Tuple[str, ...]] = _FILLER_TOKENS) -> str:
    """Drop filler phrases, matching whole words case-insensitively.

    Longer phrases are tried first, so 'the value of' wins over 'value'.
    Trailing question and exclamation marks are dropped as well.
    """
    tokens = text.rstrip().rstrip(_TRAILING_PUNCTUATION).split()
    lowered = [token.lower() for token in tokens]
    kept = []
    i = 0
    while i < len(tokens):
        for phrase in phrases:
            if tuple(lowered[i:i + len(phrase)]) == phrase:
                i += len(phrase)
                break
        else:
            kept.append(tokens[i])
            i += 1
    return ' '.join(kept)


def collapse_whitespace(text: str) -> str:
    """Trim and collapse whitespace runs to single spaces."""
    return ' '.join(text.split())


def split_digit_letter_runs(text: str) -> str:
    """Insert a space wherever a digit run meets a letter run.

    The exponent of scientific notation is kept intact: '1.5e3' and '2E-4'
    are not split, while '100kg' becomes '100 kg' and 'm2' becomes 'm 2'.
    Superscript digits are not digits here, so 'm²' is left alone.
    """
    out = []
    for i, ch in enumerate(text):
        out.append(ch)
        if i + 1 >= len(text):
            break
        nxt = text[i + 1]
        if _is_digit(ch) and _is_letter(nxt):
            if _EXPONENT_TAIL_RE.match(text, i + 1):
                continue
            out.append(' ')
        elif _is_letter(ch) and _is_digit(nxt):
            if ch in 'eE' and i > 0 and (_is_digit(text[i - 1]) or text[i - 1] == '.'):
                continue
            out.append(' ')
    return ''.join(out)


def normalize(raw: str, *, lowercase: bool = True, split_digit_runs: bool = False) -> str:
    """Normalize a raw conversion query.

    Args:
        raw: Query text as typed by the user.
        lowercase: Lowercase the result. The parser passes False so SI prefix
            symbols keep their case ('M' mega vs 'm' milli).
        split_digit_runs: Separate glued digit and letter runs ('100kg').

    Returns:
        The normalized text, trimmed, with single spaces between tokens.
    """
    text = strip_thousands_separators(raw)
    text = rewrite_arrows(text)
    text = space_connectors(text)
    text = remove_filler_phrases(text)
    text = collapse_whitespace(text)
    if lowercase:
        text = text.lower()
    if split_digit_runs:
        text = collapse_whitespace(split_digit_letter_runs(text))
    return text


def normalize_for_completion(raw: str) -> str:
    """Normalization used while the user is still typing."""
    return normalize(raw, lowercase=True, split_digit_runs=True)


def is_numeric_query(text: str) -> bool:
    """True when the query is only a number after normalization.

    Such input should be treated as a plain value, not as a conversion query.
    """
    return _NUMBER_RE.fullmatch(normalize(text)) is not None


def has_connector(text: str) -> bool:
    """True when the normalized query contains a standalone connector word."""
    return any(token in CONNECTOR_WORDS for token in normalize(text).split())
