"""Property-based tests for HtmlSerializer.

Test Coverage:
- Property: any open/close sequence either balances or raises TagStackError
- Property: escaped content never contains markup characters and unescapes
  back to the original text
"""

import html

import pytest
from hypothesis import given
from hypothesis import strategies as st

from knots.exceptions import TagStackError
from knots.renderers.serializer import HtmlSerializer

tag_names = st.sampled_from(["div", "p", "span", "section", "ul", "li"])
operations = st.lists(st.one_of(tag_names, st.none()), max_size=40)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestSerializerProperties:
    """Property-based tests using Hypothesis."""

    @given(operations)
    def test_imbalance_is_always_reported(self, ops):
        """None means end_tag, a name means start_tag."""
        s = HtmlSerializer()
        depth = 0
        for op in ops:
            if op is None:
                if depth == 0:
                    with pytest.raises(TagStackError):
                        s.end_tag()
                    continue
                s.end_tag()
                depth -= 1
            else:
                s.start_tag(op)
                depth += 1

        assert s.depth == depth
        if depth:
            with pytest.raises(TagStackError):
                s.into_result()
        else:
            result = s.into_result()
            opens = sum(1 for op in ops if op is not None)
            assert result.count("</") == opens

    @given(st.text())
    def test_escaped_content_round_trips(self, text):
        s = HtmlSerializer()
        s.write_content(text)
        result = s.into_result()
        assert "<" not in result
        assert ">" not in result
        assert '"' not in result
        assert html.unescape(result) == text
