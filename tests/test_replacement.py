"""
Tests for replacement template handling (utils/replacement.py).
"""

import re

from utils.replacement import expand_template, make_replacer, process_escapes


def expand(pattern, text, template):
    """Expand *template* against the first match of *pattern* in *text*"""
    match = re.search(pattern, text)
    assert match is not None
    return expand_template(template, match)


class TestProcessEscapes:
    """Test typed escape tokens"""

    def test_newline(self):
        assert process_escapes('a\\nb') == 'a\nb'

    def test_tab_and_carriage_return(self):
        assert process_escapes('\\t|\\r') == '\t|\r'

    def test_plain_text_untouched(self):
        assert process_escapes('$1 and $2') == '$1 and $2'

    def test_other_backslashes_untouched(self):
        assert process_escapes('\\d\\w') == '\\d\\w'


class TestExpandTemplate:
    """Test dollar references"""

    def test_literal_text(self):
        assert expand('b', 'abc', 'xyz') == 'xyz'

    def test_double_dollar(self):
        assert expand('b', 'abc', '$$') == '$'

    def test_trailing_dollar(self):
        assert expand('b', 'abc', 'cost$') == 'cost$'

    def test_whole_match(self):
        assert expand('b+', 'abbc', '[$&]') == '[bb]'

    def test_before_and_after_match(self):
        assert expand('b', 'abc', "$`|$'") == 'a|c'

    def test_numbered_groups(self):
        assert expand('(a)(b)', 'ab', '$2$1') == 'ba'

    def test_missing_group_kept_literally(self):
        assert expand('(a)', 'a', '$2') == '$2'

    def test_dollar_zero_is_literal(self):
        assert expand('(a)', 'a', '$0') == '$0'

    def test_two_digit_falls_back_to_one_digit(self):
        """$10 with a single group is group 1 followed by 0"""
        assert expand('(a)', 'a', '$10') == 'a0'

    def test_two_digit_group(self):
        pattern = ''.join(f'({c})' for c in 'abcdefghijk')
        assert expand(pattern, 'abcdefghijk', '$11-$10') == 'k-j'

    def test_leading_zero_reference(self):
        assert expand('(a)', 'a', '$01') == 'a'

    def test_unmatched_group_is_empty(self):
        assert expand('(a)|(b)', 'b', '[$1][$2]') == '[][b]'

    def test_named_group(self):
        assert expand('(?P<word>\\w+)', 'hello', '<$<word>>') == '<hello>'

    def test_unknown_named_group_is_empty(self):
        assert expand('(?P<word>\\w+)', 'hello', '[$<other>]') == '[]'

    def test_named_syntax_without_named_groups_is_literal(self):
        assert expand('(\\w+)', 'hello', '$<word>') == '$<word>'

    def test_unterminated_named_reference_is_literal(self):
        assert expand('(?P<word>\\w+)', 'hello', '$<word') == '$<word'

    def test_backslash_references_not_special(self):
        assert expand('(a)', 'a', '\\1') == '\\1'

    def test_unknown_dollar_sequence(self):
        assert expand('a', 'a', '$x') == '$x'


class TestMakeReplacer:
    """Test the callable handed to re.sub"""

    def test_used_with_sub(self):
        regex = re.compile('(\\w+)@(\\w+)')
        assert regex.sub(make_replacer('$2 at $1'), 'me@home you@work') == 'home at me work at you'
