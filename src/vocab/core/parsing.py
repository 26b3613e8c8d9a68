"""
User input cleanup and import-file parsing.
"""

import re
from dataclasses import dataclass


# latin letters, digits, umlauts, kana, CJK, full-width digits and some punctuation
ALLOWED_SYMBOLS = re.compile(
    "[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\uff66-\uff9f"
    "a-zA-Z0-9äöüÄÖÜß \\-,;\"\uff10-\uff19()「」.]"
)


def correct_whitespace(text: str) -> str:
    """Normalise japanese spaces and commas to their western forms."""
    text = text.replace("\u3000", " ").strip()
    text = re.sub(" +", " ", text)
    return text.replace("、", ",").replace(" ,", ",").replace(", ", ",")


def sanitize(text: str) -> tuple[str, list[str]]:
    """Return the cleaned text and the characters that were dropped."""
    text = correct_whitespace(text)
    kept = []
    skipped = []
    for ch in text:
        if ALLOWED_SYMBOLS.fullmatch(ch):
            kept.append(ch)
        elif ch not in skipped:
            skipped.append(ch)
    return "".join(kept), skipped


def split_words(text: str) -> list[str]:
    """'sun, sol,,star' -> ['sun', 'sol', 'star']"""
    return [w.strip() for w in text.split(",") if w.strip()]


@dataclass
class ImportLine:
    line_no: int
    native: list[str]
    foreign: list[str]
    raw: str


def parse_import_line(line: str, delimiter: str = "-", standard_order: bool = True) -> tuple[list[str], list[str]]:
    """
    Parse 'foreign, words - native, words'.
    With standard_order False the two halves are swapped.
    """
    parts = correct_whitespace(line).split(delimiter)
    if len(parts) != 2:
        raise ValueError(f"expected exactly one '{delimiter}' in {line!r}")
    first, second = split_words(parts[0]), split_words(parts[1])
    if not first or not second:
        raise ValueError(f"both sides need words in {line!r}")
    if standard_order:
        return second, first
    return first, second


def parse_import_file(text: str, delimiter: str = "-", standard_order: bool = True) -> list[ImportLine]:
    lines = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            native, foreign = parse_import_line(stripped, delimiter, standard_order)
        except ValueError as e:
            raise ValueError(f"line {line_no}: {e}") from e
        lines.append(ImportLine(line_no, native, foreign, stripped))
    return lines
