"""
Character substitution table for the single-byte page font.

Helvetica is embedded with a one-byte encoding, so anything above U+00FF has
to be spelled with Latin-1 characters before it reaches the PDF canvas. The
table is an ordered sequence of (character, replacement) pairs; when a
character appears more than once the first entry wins.
"""
from typing import Dict, Iterable, List, Tuple

# Combining dot above; shows up after a decomposed Turkish capital I.
STRAY_COMBINING_DOT = 775

FALLBACK = "?"

MAX_SINGLE_BYTE = 255


def _pairs(sources: str, targets: str) -> List[Tuple[str, str]]:
    """Zip two equal-length strings into one-to-one substitutions"""
    if len(sources) != len(targets):
        raise ValueError(f"unbalanced substitution group: {sources!r} -> {targets!r}")
    return list(zip(sources, targets))


TURKISH = _pairs("İıŞşĞğ", "IiSsGg")

AZERBAIJANI = _pairs("Əə", "Ee")

CYRILLIC = [
    ("А", "A"), ("Б", "B"), ("В", "V"), ("Г", "G"), ("Д", "D"), ("Е", "E"),
    ("Ё", "Yo"), ("Ж", "Zh"), ("З", "Z"), ("И", "I"), ("Й", "Y"), ("К", "K"),
    ("Л", "L"), ("М", "M"), ("Н", "N"), ("О", "O"), ("П", "P"), ("Р", "R"),
    ("С", "S"), ("Т", "T"), ("У", "U"), ("Ф", "F"), ("Х", "Kh"), ("Ц", "Ts"),
    ("Ч", "Ch"), ("Ш", "Sh"), ("Щ", "Shch"), ("Ъ", ""), ("Ы", "Y"), ("Ь", ""),
    ("Э", "E"), ("Ю", "Yu"), ("Я", "Ya"),
    ("а", "a"), ("б", "b"), ("в", "v"), ("г", "g"), ("д", "d"), ("е", "e"),
    ("ё", "yo"), ("ж", "zh"), ("з", "z"), ("и", "i"), ("й", "y"), ("к", "k"),
    ("л", "l"), ("м", "m"), ("н", "n"), ("о", "o"), ("п", "p"), ("р", "r"),
    ("с", "s"), ("т", "t"), ("у", "u"), ("ф", "f"), ("х", "kh"), ("ц", "ts"),
    ("ч", "ch"), ("ш", "sh"), ("щ", "shch"), ("ъ", ""), ("ы", "y"), ("ь", ""),
    ("э", "e"), ("ю", "yu"), ("я", "ya"),
    # Ukrainian and Belarusian
    ("Є", "Ye"), ("є", "ye"), ("І", "I"), ("і", "i"), ("Ї", "Yi"), ("ї", "yi"),
    ("Ґ", "G"), ("ґ", "g"), ("Ў", "U"), ("ў", "u"),
    # Azerbaijani Cyrillic
    ("Ә", "E"), ("ә", "e"), ("Ғ", "Gh"), ("ғ", "gh"), ("Ҹ", "C"), ("ҹ", "c"),
    ("Ө", "O"), ("ө", "o"), ("Ү", "U"), ("ү", "u"), ("Һ", "H"), ("һ", "h"),
    ("Ј", "Y"), ("ј", "y"), ("Ҝ", "G"), ("ҝ", "g"), ("Қ", "Q"), ("қ", "q"),
]

LATIN_EXTENDED_A = (
    _pairs("ĀāĂăĄąĆćĈĉĊċČčĎďĐđ", "AaAaAaCcCcCcCcDdDd")
    + _pairs("ĒēĔĕĖėĘęĚěĜĝĠġĢģĤĥĦħ", "EeEeEeEeEeGgGgGgHhHh")
    + _pairs("ĨĩĪīĬĭĮįĴĵĶķĸĹĺĻļĽľĿŀŁł", "IiIiIiIiJjKkkLlLlLlLlLl")
    + _pairs("ŃńŅņŇňŊŋŌōŎŏŐő", "NnNnNnNnOoOoOo")
    + _pairs("ŔŕŖŗŘřŚśŜŝŠšŢţŤťŦŧ", "RrRrRrSsSsSsTtTtTt")
    + _pairs("ŨũŪūŬŭŮůŰűŲųŴŵŶŷŸŹźŻżŽžſ", "UuUuUuUuUuUuWwYyYZzZzZzs")
    + [("Ĳ", "IJ"), ("ĳ", "ij"), ("ŉ", "'n"), ("Œ", "OE"), ("œ", "oe")]
)

TYPOGRAPHY = [
    ("‘", "'"), ("’", "'"), ("‚", "'"), ("‛", "'"),
    ("“", '"'), ("”", '"'), ("„", '"'), ("‟", '"'),
    ("‹", "<"), ("›", ">"), ("′", "'"), ("″", '"'),
    ("‐", "-"), ("‑", "-"), ("‒", "-"), ("–", "-"),
    ("—", "-"), ("―", "-"), ("…", "..."), ("•", "*"),
    ("‣", "*"), ("⁃", "-"), ("◦", "o"), ("⁄", "/"),
    ("ﬁ", "fi"), ("ﬂ", "fl"), ("ﬀ", "ff"),
    ("ﬃ", "ffi"), ("ﬄ", "ffl"),
]

CURRENCY = [
    ("€", "EUR"), ("₺", "TL"), ("₼", "AZN"), ("₽", "RUB"),
    ("₴", "UAH"), ("₸", "KZT"), ("₹", "INR"), ("₩", "KRW"),
    ("₪", "ILS"), ("₫", "VND"), ("₱", "PHP"), ("₿", "BTC"),
]

MATH = [
    ("−", "-"), ("≤", "<="), ("≥", ">="), ("≠", "!="),
    ("≈", "~"), ("∞", "inf"), ("√", "sqrt"), ("∑", "sum"),
    ("∏", "prod"), ("∆", "delta"), ("π", "pi"), ("∂", "d"),
    ("∫", "int"), ("‰", "0/00"), ("™", "(TM)"),
    ("℃", "°C"), ("℉", "°F"), ("→", "->"),
    ("←", "<-"), ("↔", "<->"), ("⇒", "=>"), ("⇐", "<="),
    ("∕", "/"), ("∗", "*"), ("⋅", "·"),
]

WHITESPACE = [
    ("\u00a0", " "), ("\u00ad", ""),
    ("\u2000", " "), ("\u2001", " "), ("\u2002", " "), ("\u2003", " "),
    ("\u2004", " "), ("\u2005", " "), ("\u2006", " "), ("\u2007", " "),
    ("\u2008", " "), ("\u2009", " "), ("\u200a", " "), ("\u202f", " "),
    ("\u205f", " "), ("\u3000", " "),
    # zero width
    ("\u200b", ""), ("\u200c", ""), ("\u200d", ""), ("\u2060", ""),
    ("\ufeff", ""),
    # line and paragraph separators
    ("\u2028", " "), ("\u2029", " "),
]

SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = tuple(
    TURKISH + AZERBAIJANI + CYRILLIC + LATIN_EXTENDED_A
    + TYPOGRAPHY + CURRENCY + MATH + WHITESPACE
)


def build_table(pairs: Iterable[Tuple[str, str]]) -> Dict[int, str]:
    """Compile ordered pairs into a code point lookup; the first entry for a character wins."""
    table: Dict[int, str] = {}
    for char, replacement in pairs:
        table.setdefault(ord(char), replacement)
    return table


CHAR_TABLE: Dict[int, str] = build_table(SUBSTITUTIONS)
