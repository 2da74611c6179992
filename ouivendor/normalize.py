"""Turn raw IEEE registry organisation names into short display names.

The pipeline mirrors the cleanup Wireshark applies when it builds its
``manuf`` file: drop a trailing legal suffix, erase legal/organisational
terms anywhere in the name, fold punctuation, collapse whitespace and
title-case the result. Every rule table below is ordered; changing the
order changes the output of existing tables.
"""
from __future__ import annotations

import re
from typing import List, Pattern, Tuple

# Placeholder emitted for '.' and ',' runs. It still splits words while
# title-casing and is deleted afterwards.
SEPARATOR = "/"

# Trailing legal suffixes. Each rule is applied once, in order.
SUFFIX_RULES: List[Pattern[str]] = [
    re.compile(r",?\s*\b(llc|ltd|limited|inc|incorporated)\.?$", re.IGNORECASE),
    re.compile(r",?\s*\b(co|company|corp|corporation)\.?$", re.IGNORECASE),
    re.compile(r",?\s*\bgmbh\.?$", re.IGNORECASE),
]

# Terms erased wherever they start a word. Abbreviations the registry writes
# with dots (S.A., N.V., S.p.A.) also match dotted; a trailing dot is
# consumed, so those terms end in (?!\w) rather than \b. They never start
# right after a dot, which keeps initialisms such as U.S.A. intact.
LEGAL_TERMS: List[str] = [
    r"a +s\b",
    r"ab\b",
    r"ag\b",
    r"(?<!\.)b\.? ?v\.?(?!\w)",
    r"closed joint stock company\b",
    r"co\b",
    r"company\b",
    r"corp\b",
    r"corporation\b",
    r"corporate\b",
    r"(?<!\.)de c\.? ?v\.?(?!\w)",
    r"gmbh\b",
    r"holding\b",
    r"inc\b",
    r"incorporated\b",
    r"jsc\b",
    r"kg\b",
    r"k k\b",
    r"limited\b",
    r"llc\b",
    r"ltd\b",
    r"(?<!\.)n\.? ?v\.?(?!\w)",
    r"oao\b",
    r"of\b",
    r"open joint stock company\b",
    r"ooo\b",
    r"oü\b",
    r"oy\b",
    r"oyj\b",
    r"plc\b",
    r"pty\b",
    r"pvt\b",
    r"(?<!\.)s\.? ?a\.? ?r\.? ?l\.?(?!\w)",
    r"(?<!\.)s\.? ?a\.?(?!\w)",
    r"(?<!\.)s\.? ?p\.? ?a\.?(?!\w)",
    r"(?<!\.)sp\.? ?k\.?(?!\w)",
    r"(?<!\.)s\.? ?r\.? ?l\.?(?!\w)",
    r"systems\b",
    r"\bthe\b",
    r"zao\b",
    r"(?<!\.)z\.? ?o\.? ?o\.?(?!\w)",
]

LEGAL_TERM_PATTERN = re.compile(r"\b(?:" + "|".join(LEGAL_TERMS) + ")", re.IGNORECASE)

# Punctuation folding. At each position the first matching entry wins, so
# multi-character sequences must stay ahead of their single-character parts.
REPLACEMENTS: List[Tuple[str, str]] = [
    (",.", SEPARATOR),
    (".,", SEPARATOR),
    (". ,", SEPARATOR),
    (", .", SEPARATOR),
    (" . ", SEPARATOR),
    (". ", SEPARATOR),
    (" .", SEPARATOR),
    (".", SEPARATOR),
    (" , ", SEPARATOR),
    (", ", SEPARATOR),
    (" ,", SEPARATOR),
    (",", SEPARATOR),
    (" a ", " "),
    (" & ", " "),
    ("&", " "),
    ("(", ""),
    (")", ""),
    ("'", " "),
    ("-", " "),
    ("*", ""),
    ("/", ""),
]

_REPLACEMENT_MAP = dict(REPLACEMENTS)
_REPLACEMENT_PATTERN = re.compile("|".join(re.escape(old) for old, _ in REPLACEMENTS))

# Characters that continue a word while title-casing.
_MID_WORD = frozenset("'.:·’_")


def simplify_suffix(name: str) -> str:
    for rule in SUFFIX_RULES:
        name = rule.sub("", name)
    return name


def erase_legal_terms(name: str) -> str:
    return LEGAL_TERM_PATTERN.sub("", name)


def fold_punctuation(name: str) -> str:
    return _REPLACEMENT_PATTERN.sub(lambda match: _REPLACEMENT_MAP[match.group(0)], name)


def title_case(text: str) -> str:
    """Upper-case the first cased letter of each word and lower-case the rest.

    Digits keep a word open without consuming its capital ("3COM" -> "3Com");
    any character that is neither alphanumeric nor a mid-word mark starts a
    new word ("foo/bar" -> "Foo/Bar").
    """
    out = []
    in_word = False
    for char in text:
        if char.lower() != char.upper():
            out.append(char.lower() if in_word else char.title())
            in_word = True
            continue
        out.append(char)
        if not (char.isalnum() or char in _MID_WORD):
            in_word = False
    return "".join(out)


def normalize_vendor(raw: str) -> str:
    """Return the display name for a raw registry organisation name."""
    name = raw.strip().replace('"', "")
    name = simplify_suffix(name)
    name = erase_legal_terms(name)
    name = fold_punctuation(name)
    name = " ".join(name.split())
    name = title_case(name)
    return name.replace(SEPARATOR, "").strip()
