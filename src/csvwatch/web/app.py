"""
HTTP endpoints serving the CSV table and its stylesheet
"""

from flask import Flask, Response, request, send_from_directory

from ..core.config import ServerConfig
from ..core.errors import DataFileError, InvalidQueryError
from ..core.loader import load_records
from ..core.query import parse_filter_query
from ..core.render import DEFAULT_CSS, RenderResult, render_result, timestamp_token
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


def build_result(config: ServerConfig, query: str) -> RenderResult:
    """Validate the filter query, load the data file and build the view model"""
    time = timestamp_token()

    try:
        exclude = parse_filter_query(query)
    except InvalidQueryError as e:
        logger.info(str(e))
        return RenderResult.failure(str(e), time)

    logger.debug(f"exclude: {sorted(exclude)}")
    try:
        content = load_records(config.target, exclude)
    except DataFileError as e:
        logger.warning(str(e))
        return RenderResult.failure(str(e), time)

    return RenderResult.success(content, query, time)


def create_app(config: ServerConfig) -> Flask:
    """Create the Flask app for a given configuration"""
    app = Flask('csvwatch')

    @app.route('/result')
    def result():
        query = request.args.get('e', '')
        page = render_result(build_result(config, query), config.livereload_script_url)
        return Response(page, mimetype='text/html')

    @app.route('/style.css')
    def stylesheet():
        if config.uses_custom_stylesheet:
            css_path = config.stylesheet.resolve()
            return send_from_directory(css_path.parent, css_path.name,
                                       mimetype='text/css', max_age=0)
        return Response(DEFAULT_CSS, mimetype='text/css')

    return app
