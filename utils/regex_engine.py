"""
Regex replace engine.
Compiles patterns, computes the replaced text and the per-match breakdown
used by the before/after preview. Built on Python's re module.

Engine calls never raise: compile() returns None for a pattern it cannot
build, the other operations return a Failure value.
"""

import re

from constants import INVALID_PATTERN_ERROR
from models.replace_result import MatchInfo, ReplaceResult, Failure
from utils.replacement import process_escapes, expand_template, make_replacer


# Flag characters accepted by compile(). 'g' only changes how many matches
# execute() replaces and 'u' is the default for str patterns.
FLAG_MAP = {
    'g': 0,
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'u': 0,
}


def translate_flags(flags):
    """Translate a flag string like 'gim' into re flags.

    Raises ValueError for unknown or repeated flag characters.
    """
    re_flags = 0
    seen = set()
    for ch in flags:
        if ch not in FLAG_MAP:
            raise ValueError(f"Invalid flag {ch!r} in {flags!r}")
        if ch in seen:
            raise ValueError(f"Duplicate flag {ch!r} in {flags!r}")
        seen.add(ch)
        re_flags |= FLAG_MAP[ch]
    return re_flags


def scan(regex, text):
    """Yield every non-overlapping match of *regex* in *text*, left to right.

    An empty match does not move the scan position, so the cursor is pushed
    one character past it. This gives one empty match before each character
    and one at the end of the text.
    """
    pos = 0
    end = len(text)
    while pos <= end:
        match = regex.search(text, pos)
        if match is None:
            break
        yield match
        if match.end() == match.start():
            pos = match.end() + 1
        else:
            pos = match.end()


class RegexEngine:
    """Stateless entry points for compiling, previewing and executing replacements"""

    @staticmethod
    def compile(pattern, flags):
        """Compile *pattern* with *flags*, or return None if either is invalid."""
        try:
            return re.compile(pattern, translate_flags(flags))
        except Exception:
            return None

    @staticmethod
    def _substitute(regex, text, replacement, flags):
        """Build the replaced text from the same matches scan() reports.

        Only the first match is replaced unless *flags* contains 'g'.
        """
        parts = []
        last_end = 0
        for match in scan(regex, text):
            parts.append(text[last_end:match.start()])
            parts.append(expand_template(replacement, match))
            last_end = match.end()
            if 'g' not in flags:
                break
        parts.append(text[last_end:])
        return ''.join(parts)

    @classmethod
    def preview(cls, text, pattern, replacement, flags):
        """Return a ReplaceResult with the replaced text and every match, or a Failure."""
        regex = cls.compile(pattern, flags)
        if regex is None:
            return Failure(INVALID_PATTERN_ERROR)

        try:
            processed = process_escapes(replacement)
            replaced = cls._substitute(regex, text, processed, flags)
        except Exception as e:
            return Failure(str(e))

        matches = cls.collect_matches(text, pattern, processed, flags)
        if isinstance(matches, Failure):
            return matches

        return ReplaceResult(text, replaced, matches)

    @classmethod
    def collect_matches(cls, text, pattern, replacement, flags):
        """List every match of *pattern* in *text* with its own substituted text.

        The scan is always global. Each match's replacement is computed by a
        single substitution of the same pattern against the matched text on
        its own, so lookaround that depends on surrounding text is not seen.
        *replacement* must already have its escape tokens processed.
        """
        global_flags = flags if 'g' in flags else flags + 'g'
        scanner = cls.compile(pattern, global_flags)
        single = cls.compile(pattern, flags.replace('g', ''))
        if scanner is None or single is None:
            return Failure(INVALID_PATTERN_ERROR)

        replacer = make_replacer(replacement)
        matches = []
        try:
            for found in scan(scanner, text):
                matched_text = found.group(0)
                matches.append(MatchInfo(
                    index=found.start(),
                    length=len(matched_text),
                    match=matched_text,
                    replacement=single.sub(replacer, matched_text, count=1),
                ))
        except Exception as e:
            return Failure(str(e))

        return matches

    @classmethod
    def execute(cls, text, pattern, replacement, flags):
        """Return the replaced text, or a Failure.

        Only the first match is replaced unless *flags* contains 'g'.
        """
        regex = cls.compile(pattern, flags)
        if regex is None:
            return Failure(INVALID_PATTERN_ERROR)

        try:
            return cls._substitute(regex, text, process_escapes(replacement), flags)
        except Exception as e:
            return Failure(str(e))
