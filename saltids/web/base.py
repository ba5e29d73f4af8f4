import asyncio
import json
import logging
import signal
import tornado.web

from .. import __version__


logger = logging.getLogger(__name__)


class GracefulApplication(tornado.web.Application):
    """Application that keeps serving for a while after SIGTERM.

    /health reports 503 during that time.
    """
    def __init__(self, *args, shutdown_time=30, **kwargs):
        super(GracefulApplication, self).__init__(*args, **kwargs)

        self.is_exiting = False
        self.shutdown_time = shutdown_time
        self.exited = asyncio.Event()

    def install_signal_handlers(self):
        loop = asyncio.get_running_loop()
        for signum in (signal.SIGTERM, signal.SIGINT):
            loop.add_signal_handler(signum, self._got_signal, signum)

    def _got_signal(self, signum):
        logger.info("Got signal %d", signum)
        if self.is_exiting:
            return
        self.is_exiting = True
        asyncio.get_running_loop().call_later(self.shutdown_time, self._exit)

    def _exit(self):
        logger.info("Shutting down")
        self.exited.set()


class Application(GracefulApplication):
    def __init__(self, handlers, ids, multi_ids, **kwargs):
        super(Application, self).__init__(handlers, **kwargs)

        self.ids = ids
        self.multi_ids = multi_ids

    def log_request(self, handler):
        if handler.request.path == '/health':
            return
        super(Application, self).log_request(handler)


class BaseHandler(tornado.web.RequestHandler):
    """Base class for all request handlers.
    """
    application: Application

    def set_default_headers(self):
        self.set_header('Server', 'SaltIDs/%s' % __version__)

    def get_json(self):
        type_ = self.request.headers.get('Content-Type', '')
        if not type_.startswith('application/json'):
            raise tornado.web.HTTPError(400, "Expected JSON")
        try:
            obj = json.loads(self.request.body.decode('utf-8'))
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise tornado.web.HTTPError(400, "Invalid JSON")
        if not isinstance(obj, dict):
            raise tornado.web.HTTPError(400, "Expected a JSON object")
        return obj

    def send_json(self, obj):
        if isinstance(obj, list):
            obj = {'results': obj}
        elif not isinstance(obj, dict):
            raise ValueError("Can't encode %r to JSON" % type(obj))
        self.set_header('Content-Type', 'application/json; charset=utf-8')
        return self.finish(json.dumps(obj))

    def send_error_json(self, status, message, kind=None):
        self.set_status(status)
        obj = {'error': message}
        if kind is not None:
            obj['kind'] = kind
        return self.send_json(obj)

    def write_error(self, status_code, **kwargs):
        message = self._reason
        if 'exc_info' in kwargs:
            exc = kwargs['exc_info'][1]
            if isinstance(exc, tornado.web.HTTPError) and exc.log_message:
                message = exc.log_message
        self.send_error_json(status_code, message)
