"""
Tests for result page rendering
"""

from datetime import datetime, timedelta, timezone

from csvwatch.core.render import DEFAULT_CSS, RenderResult, render_result, timestamp_token

SCRIPT_URL = "http://localhost:35729/livereload.js"


class TestRenderResult:
    """Test the render_result function"""

    def test_rows_carry_category_and_position_classes(self):
        result = RenderResult.success([['A', 'foo'], ['B', 'bar']], '', 't0')
        html = render_result(result, SCRIPT_URL)

        assert '<tr class="A row-0">' in html
        assert '<tr class="B row-1">' in html
        assert '<td class="col-0">A</td>' in html
        assert '<td class="col-1">bar</td>' in html
        assert 'ERROR' not in html

    def test_query_echo(self):
        html = render_result(RenderResult.success([], 'ab', 't0'), SCRIPT_URL)
        assert '<p>e=ab</p>' in html

        html = render_result(RenderResult.success([], '', 't0'), SCRIPT_URL)
        assert '<p>e=' not in html

    def test_error_panel_replaces_table(self):
        html = render_result(RenderResult.failure('Invalid Query: 1a', 't0'), SCRIPT_URL)

        assert 'ERROR:<br>Invalid Query: 1a' in html
        assert '<table' not in html
        assert '<p>e=' not in html

    def test_field_content_is_escaped(self):
        result = RenderResult.success([['<b>', 'a & b', '<script>alert(1)</script>']], '', 't0')
        html = render_result(result, SCRIPT_URL)

        assert '&lt;b&gt;' in html
        assert 'a &amp; b' in html
        assert '&lt;script&gt;alert(1)&lt;/script&gt;' in html
        assert '<script>alert(1)</script>' not in html
        assert '<b>' not in html

    def test_error_message_is_escaped(self):
        html = render_result(RenderResult.failure('Invalid Query: <i>', 't0'), SCRIPT_URL)
        assert 'Invalid Query: &lt;i&gt;' in html

    def test_stylesheet_link_and_script(self):
        html = render_result(RenderResult.success([], '', '2024-01-02T03:04:05+00:00'), SCRIPT_URL)

        assert 'href="style.css?t=2024-01-02T03:04:05+00:00"' in html
        assert f'<script src="{SCRIPT_URL}"></script>' in html

    def test_rendering_is_idempotent(self):
        result = RenderResult.success([['A', 'x'], ['B', 'y']], 'c', 'token')

        assert render_result(result, SCRIPT_URL) == render_result(result, SCRIPT_URL)

    def test_only_timestamp_differs(self):
        first = render_result(RenderResult.success([['A', 'x']], '', 'first'), SCRIPT_URL)
        second = render_result(RenderResult.success([['A', 'x']], '', 'second'), SCRIPT_URL)

        assert first != second
        assert first.replace('first', 'second') == second

    def test_failure_has_no_content(self):
        result = RenderResult.failure('boom', 't0')

        assert result.error_occurred
        assert result.content == []
        assert result.query == ''


class TestTimestampToken:

    def test_rfc3339(self):
        now = datetime(2024, 1, 2, 3, 4, 5, 678, tzinfo=timezone(timedelta(hours=9)))
        assert timestamp_token(now) == '2024-01-02T03:04:05+09:00'

    def test_default_is_current_time(self):
        assert timestamp_token().startswith(str(datetime.now().year))


def test_default_css_is_commented_example():
    assert DEFAULT_CSS.startswith('/* example css */')
    assert 'tr.A { background-color: lightpink; }' in DEFAULT_CSS
