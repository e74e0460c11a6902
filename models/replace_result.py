"""
Data model for regex replace results.
Plain value objects passed between the engine, the segment builder and the UI.
"""


class MatchInfo:
    """One matched occurrence and what it resolves to under the replacement"""

    def __init__(self, index, length, match, replacement):
        self.index = index
        self.length = length
        self.match = match
        self.replacement = replacement

    @property
    def end(self):
        return self.index + self.length

    def __eq__(self, other):
        if not isinstance(other, MatchInfo):
            return NotImplemented
        return (self.index, self.length, self.match, self.replacement) == \
            (other.index, other.length, other.match, other.replacement)

    def __repr__(self):
        return (f"MatchInfo(index={self.index}, length={self.length}, "
                f"match={self.match!r}, replacement={self.replacement!r})")


class ReplaceResult:
    """Successful preview: full replaced text plus the per-match breakdown"""

    is_error = False

    def __init__(self, original, replaced, matches):
        self.original = original
        self.replaced = replaced
        self.matches = list(matches)

    @property
    def match_count(self):
        return len(self.matches)

    def __eq__(self, other):
        if not isinstance(other, ReplaceResult):
            return NotImplemented
        return (self.original, self.replaced, self.matches) == \
            (other.original, other.replaced, other.matches)

    def __repr__(self):
        return (f"ReplaceResult(original={self.original!r}, replaced={self.replaced!r}, "
                f"match_count={self.match_count})")


class Failure:
    """Failed engine call. Carries a description instead of a result.

    Returned in place of a result by compile-dependent operations so callers
    branch on the value rather than catching exceptions.
    """

    is_error = True

    def __init__(self, error):
        self.error = error

    def __eq__(self, other):
        if not isinstance(other, Failure):
            return NotImplemented
        return self.error == other.error

    def __repr__(self):
        return f"Failure(error={self.error!r})"


class Segment:
    """A span of preview text, either literal or highlighted"""

    def __init__(self, text, is_match=False, is_replacement=False):
        self.text = text
        self.is_match = is_match
        self.is_replacement = is_replacement

    @property
    def is_highlighted(self):
        return self.is_match or self.is_replacement

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return (self.text, self.is_match, self.is_replacement) == \
            (other.text, other.is_match, other.is_replacement)

    def __repr__(self):
        kind = "replacement" if self.is_replacement else "match" if self.is_match else "literal"
        return f"Segment({self.text!r}, {kind})"
