"""
Segment builder for the before/after preview.

Turns the original text and its ordered match list into runs of literal and
highlighted text. Pure positional work: no regex evaluation happens here.
"""

from constants import PREVIEW_MAX_LENGTH
from models.replace_result import Segment


def _build_segments(text, matches, use_replacement):
    segments = []
    last_index = 0

    for match in matches:
        if match.index > last_index:
            segments.append(Segment(text[last_index:match.index]))

        if use_replacement:
            segments.append(Segment(match.replacement, is_replacement=True))
        else:
            segments.append(Segment(text[match.index:match.end], is_match=True))

        last_index = match.end

    if last_index < len(text):
        segments.append(Segment(text[last_index:]))

    return segments


def build_original_segments(text, matches):
    """Split *text* into literal runs and matched spans.

    Joining the segment texts gives back *text* exactly.
    """
    return _build_segments(text, matches, use_replacement=False)


def build_replacement_segments(text, matches):
    """Like build_original_segments, with each match swapped for its replacement."""
    return _build_segments(text, matches, use_replacement=True)


def join_segments(segments):
    return ''.join(segment.text for segment in segments)


def truncate_segments(segments, max_length):
    """Clip *segments* to *max_length* characters of text.

    Returns (segments, truncated). Segments keep their order and kind; the one
    that crosses the boundary is cut and everything after it is dropped.
    """
    if max_length is None:
        return list(segments), False

    clipped = []
    used = 0
    for segment in segments:
        if used >= max_length:
            break
        text = segment.text[:max_length - used]
        clipped.append(Segment(text, segment.is_match, segment.is_replacement))
        used += len(text)

    total = sum(len(segment.text) for segment in segments)
    return clipped, total > max_length


class PreviewSegments:
    """Both preview views of a ReplaceResult, clipped for display"""

    def __init__(self, original, original_truncated, replaced, replaced_truncated):
        self.original = original
        self.original_truncated = original_truncated
        self.replaced = replaced
        self.replaced_truncated = replaced_truncated


def build_preview(result, max_length=PREVIEW_MAX_LENGTH):
    """Build the clipped before/after segment lists for *result*."""
    original, original_truncated = truncate_segments(
        build_original_segments(result.original, result.matches), max_length)
    replaced, replaced_truncated = truncate_segments(
        build_replacement_segments(result.original, result.matches), max_length)
    return PreviewSegments(original, original_truncated, replaced, replaced_truncated)
