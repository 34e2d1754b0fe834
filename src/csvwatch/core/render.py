"""
HTML rendering of filtered CSV content
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from jinja2 import Environment

RESULT_TEMPLATE = """<!doctype html>
<html>
<head>
<title>Result</title>
<link rel="stylesheet" type="text/css" href="style.css?t={{ time }}">
</head>
<body>
<div>
<h1>Result</h1>
{% if error_occurred %}
<p style="color: red;">ERROR:<br>{{ error_message }}</p>
{% else %}
{% if query %}<p>e={{ query }}</p>{% endif %}
<table border="1" cellpadding="2" style="border-collapse: collapse;">
{% for record in content %}
	<tr class="{{ record[0] }} row-{{ loop.index0 }}">
	{% for value in record %}
		<td class="col-{{ loop.index0 }}">{{ value }}</td>
	{% endfor %}
	</tr>
{% endfor %}
</table>
{% endif %}
</div>
<script src="{{ livereload_script_url }}"></script>
</body>
</html>
"""

DEFAULT_CSS = """/* example css */

/*
tr.row-0 { text-align: center; }

td.col-0, td.col-1 { text-align: center; width: 30px; }

tr.A { background-color: lightpink; }
tr.B { background-color: peachpuff; }
tr.E { background-color: khaki; }
*/
"""

# Autoescaping is switched on for every template; field values come straight
# from the CSV file.
_environment = Environment(autoescape=True, keep_trailing_newline=True)
_template = _environment.from_string(RESULT_TEMPLATE)


def timestamp_token(now: Optional[datetime] = None) -> str:
    """RFC 3339 timestamp used to bust the stylesheet cache"""
    now = now or datetime.now(timezone.utc).astimezone()
    return now.isoformat(timespec='seconds')


@dataclass
class RenderResult:
    """View model for one /result response"""
    time: str
    query: str = ''
    error_occurred: bool = False
    error_message: str = ''
    content: List[List[str]] = field(default_factory=list)

    @classmethod
    def success(cls, content: List[List[str]], query: str, time: str) -> 'RenderResult':
        return cls(time=time, query=query, content=content)

    @classmethod
    def failure(cls, message: str, time: str) -> 'RenderResult':
        """Error state; carries no query echo and no rows"""
        return cls(time=time, error_occurred=True, error_message=message)


def render_result(result: RenderResult, livereload_script_url: str) -> str:
    """Render a RenderResult into the result page"""
    return _template.render(
        time=result.time,
        query=result.query,
        error_occurred=result.error_occurred,
        error_message=result.error_message,
        content=result.content,
        livereload_script_url=livereload_script_url,
    )
