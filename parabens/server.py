"""HTTP server exposing the handlers through Flask

Every request is converted into a handler event (API-Gateway-proxy shaped
dict), dispatched to the handler owning the route, and the handler's
response dict is converted back into a Flask response.

Routes:
    POST     /s              shorten_url     (20 requests/minute per client IP)
    GET      /s/<code>       redirect_url
    POST     /api/track      track_event     (120 requests/minute per client IP)
    GET/HEAD /og-image.png   og_image
    *        /, /<path>      page

Example:
    >>> context = AppContext(short_link_dao=ShortLinkJsonDAO(), og_image_queue=OgImageQueue())
    >>> app = create_app(context)
    >>> app.test_client().get('/aniversario/Joana').status_code
    200
"""

import time
import base64
import logging
from collections.abc import Callable

from flask import Flask, Response, g, request
from flask_limiter import Limiter
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix

from parabens.context import AppContext
from parabens.types import HandlerEvent, HandlerResponse
from parabens.dao.json import ShortLinkJsonDAO
from parabens.render import OgImageQueue
from parabens.handlers.responses import response_error
from parabens.handlers.shorten_url import app as shorten_url
from parabens.handlers.redirect_url import app as redirect_url
from parabens.handlers.track_event import app as track_event
from parabens.handlers.og_image import app as og_image
from parabens.handlers.page import app as page
from parabens.utils import initialize_logging, client_ip
from parabens.utils.config import app_env, server_port
from parabens.utils.constants import MAX_TRACK_BODY_BYTES, SHORTLINK_RATE_LIMIT, TRACK_RATE_LIMIT


logger = logging.getLogger(__name__)

ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']

# fmt: off
SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'Referrer-Policy': 'no-referrer',
    'Content-Security-Policy': "default-src 'self'; script-src 'self'; style-src 'self'; img-src 'self'; "
                               "base-uri 'self'; frame-ancestors 'none'",
}
# fmt: on
HSTS_HEADER = 'max-age=31536000; includeSubDomains'


def request_client_ip() -> str:
    """Rate limiting key: the originating client IP of the current request"""
    return client_ip(request.headers, request.remote_addr)


def build_event(path_parameters: dict[str, str] | None = None) -> HandlerEvent:
    """Convert the current Flask request into a handler event"""
    return {
        'httpMethod': request.method,
        'path': request.path,
        'headers': dict(request.headers),
        'queryStringParameters': request.args.to_dict() or None,
        'pathParameters': path_parameters,
        'body': request.get_data(as_text=True),
        'requestContext': {'sourceIp': request.remote_addr},
    }


def to_flask_response(result: HandlerResponse) -> Response:
    body = result.get('body') or ''
    if result.get('isBase64Encoded'):
        body = base64.b64decode(body)
    return Response(body, status=result['statusCode'], headers=result.get('headers') or {})


def dispatch(handler: Callable[[HandlerEvent, AppContext], HandlerResponse], context: AppContext, **path_parameters) -> Response:
    event = build_event(path_parameters or None)
    return to_flask_response(handler(event, context))


def create_app(context: AppContext) -> Flask:
    """Flask application factory

    Args:
        context (AppContext):
            Shortlink store and render queue shared by all requests.

    Returns:
        Flask: configured application (rate limiter included)
    """
    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = MAX_TRACK_BODY_BYTES
    app.config['APP_CONTEXT'] = context

    # Deployed behind a TLS terminating reverse proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    limiter = Limiter(
        key_func=request_client_ip,
        app=app,
        storage_uri='memory://',
        headers_enabled=True,
    )
    app.extensions['parabens_limiter'] = limiter

    @app.route('/s', methods=ALL_METHODS)
    @limiter.limit(SHORTLINK_RATE_LIMIT, methods=['POST'])
    def create_shortlink():
        return dispatch(shorten_url.handler, context)

    @app.route('/s/', defaults={'code': ''})
    @app.route('/s/<code>')
    def follow_shortlink(code: str):
        return dispatch(redirect_url.handler, context, code=code)

    @app.route('/api/track', methods=ALL_METHODS)
    @limiter.limit(TRACK_RATE_LIMIT, methods=['POST'])
    def track():
        return dispatch(track_event.handler, context)

    @app.route('/og-image.png')
    def og_image_png():
        return dispatch(og_image.handler, context)

    @app.route('/', defaults={'path': ''}, methods=ALL_METHODS)
    @app.route('/<path:path>', methods=ALL_METHODS)
    def catch_all(path: str):
        return dispatch(page.handler, context)

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        # 413 (MAX_CONTENT_LENGTH), 429 (rate limits), 405 on fixed routes
        return to_flask_response(response_error(error.code or 500, error.name))

    @app.before_request
    def start_timer():
        g.start_time = time.perf_counter()

    @app.after_request
    def finish_request(response: Response) -> Response:
        response.headers.update(SECURITY_HEADERS)
        if request.is_secure:
            response.headers['Strict-Transport-Security'] = HSTS_HEADER

        extra = {
            'method': request.method,
            'path': request.path,
            'status': response.status_code,
            'size': response.calculate_content_length() or 0,
            'ip': request_client_ip(),
            'user_agent': request.user_agent.string,
        }
        if request.query_string:
            extra['query'] = request.query_string.decode('utf-8', errors='replace')
        if 'start_time' in g:
            extra['duration_ms'] = int((time.perf_counter() - g.start_time) * 1000)
        logger.info('request', extra=extra)
        return response

    return app


def main() -> None:
    """Run the server (`parabens` console script)"""
    initialize_logging()

    short_link_dao = ShortLinkJsonDAO()
    og_image_queue = OgImageQueue()
    context = AppContext(short_link_dao=short_link_dao, og_image_queue=og_image_queue)

    port = server_port()
    logger.info(
        'Starting server.',
        extra={'port': port, 'env': app_env(), 'shortlink_db': str(short_link_dao.db_path), 'og_cache_dir': str(og_image_queue.cache_dir)},
    )

    with og_image_queue:
        create_app(context).run(host='0.0.0.0', port=port, threaded=True)  # noqa: S104

    logger.info('Server stopped.')


if __name__ == '__main__':
    main()
