"""
Replacement template handling.

Templates use the dollar syntax shown in the dialog placeholder:

    $$        literal dollar sign
    $&        whole match
    $`        text before the match
    $'        text after the match
    $1..$99   numbered capture group
    $<name>   named capture group

Backslashes carry no meaning in a template apart from the visible escape
tokens \\n, \\t and \\r, which are turned into control characters first.
"""

ESCAPE_TOKENS = (
    ('\\n', '\n'),
    ('\\t', '\t'),
    ('\\r', '\r'),
)


def process_escapes(replacement):
    """Turn typed escape tokens (backslash-n etc.) into control characters."""
    for token, char in ESCAPE_TOKENS:
        replacement = replacement.replace(token, char)
    return replacement


def _group_text(match, group):
    # Groups that did not take part in the match expand to nothing
    value = match.group(group)
    return value if value is not None else ''


def expand_template(template, match):
    """Resolve a dollar template against a single re.Match.

    References to groups the pattern does not define are kept literally.
    """
    parts = []
    group_count = match.re.groups
    named_groups = match.re.groupindex
    length = len(template)
    i = 0

    while i < length:
        ch = template[i]
        if ch != '$' or i + 1 == length:
            parts.append(ch)
            i += 1
            continue

        nxt = template[i + 1]
        if nxt == '$':
            parts.append('$')
            i += 2
        elif nxt == '&':
            parts.append(match.group(0))
            i += 2
        elif nxt == '`':
            parts.append(match.string[:match.start()])
            i += 2
        elif nxt == "'":
            parts.append(match.string[match.end():])
            i += 2
        elif nxt.isdigit() and nxt.isascii():
            # Prefer the two-digit reference when that group exists
            if i + 2 < length and template[i + 2].isdigit() and template[i + 2].isascii():
                number = int(template[i + 1:i + 3])
                if 1 <= number <= group_count:
                    parts.append(_group_text(match, number))
                    i += 3
                    continue
            number = int(nxt)
            if 1 <= number <= group_count:
                parts.append(_group_text(match, number))
                i += 2
            else:
                parts.append('$')
                i += 1
        elif nxt == '<' and named_groups:
            close = template.find('>', i + 2)
            if close == -1:
                parts.append('$')
                i += 1
                continue
            name = template[i + 2:close]
            if name in named_groups:
                parts.append(_group_text(match, name))
            i = close + 1
        else:
            parts.append('$')
            i += 1

    return ''.join(parts)


def make_replacer(template):
    """Return a callable for re.Pattern.sub that expands *template* per match."""
    def _replace(match):
        return expand_template(template, match)
    return _replace
