import argparse
import asyncio
import logging
import sys

from . import __version__
from .config import from_environ
from .errors import ConfigurationError, DecodeError
from .ids import MultiSaltIDs, SaltIDs
from .utils import setup_logging
from .web import make_app


logger = logging.getLogger(__name__)


def _non_negative(value):
    try:
        number = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError("%r is not an integer" % value)
    if number < 0:
        raise argparse.ArgumentTypeError("%r is negative" % value)
    return number


def make_parser(settings):
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('-s', '--salt', default=settings.salt,
                        help="Salt (default: $SALTIDS_SALT)")
    common.add_argument('-m', '--min-length', type=_non_negative,
                        default=settings.min_length,
                        help="Minimum length of ids "
                             "(default: $SALTIDS_MIN_LENGTH or 0)")
    common.add_argument('-a', '--alphabet', default=settings.alphabet,
                        help="Alphabet (default: $SALTIDS_ALPHABET or "
                             "alphanumeric)")

    parser = argparse.ArgumentParser(
        prog='saltids',
        description="Encode numbers into short salted ids, and back",
    )
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)
    subparsers = parser.add_subparsers(dest='command', required=True)

    encode = subparsers.add_parser('encode', parents=[common],
                                   help="Encode numbers into an id")
    encode.add_argument('numbers', nargs='+', type=_non_negative)

    decode = subparsers.add_parser('decode', parents=[common],
                                   help="Decode an id into numbers")
    decode.add_argument('hashid')

    encode_hex = subparsers.add_parser('encode-hex', parents=[common],
                                       help="Encode a hexadecimal string")
    encode_hex.add_argument('hex')

    decode_hex = subparsers.add_parser('decode-hex', parents=[common],
                                       help="Decode an id made by encode-hex")
    decode_hex.add_argument('hashid')

    serve = subparsers.add_parser('serve', parents=[common],
                                  help="Run the HTTP API")
    serve.add_argument('-p', '--port', type=_non_negative,
                       default=settings.port,
                       help="Port to listen on (default: $SALTIDS_PORT or "
                            "8000)")

    return parser


async def serve(settings, args, ids):
    multi_ids = MultiSaltIDs(args.salt, args.min_length, args.alphabet)

    if settings.debug:
        logger.warning("Debug mode is ON")
        asyncio.get_running_loop().set_debug(True)
    app = make_app(ids, multi_ids, debug=settings.debug,
                   shutdown_time=settings.shutdown_time)
    app.install_signal_handlers()
    server = app.listen(args.port, address='0.0.0.0', xheaders=True)

    print("\n    saltids is now running: http://localhost:%d/\n" % args.port)
    await app.exited.wait()
    server.stop()


def main(argv=None):
    try:
        settings = from_environ()
    except ValueError as e:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        logger.error("Invalid configuration: %s", e)
        return 2
    args = make_parser(settings).parse_args(argv)

    if args.command == 'serve':
        setup_logging(
            'SALTIDS',
            level=logging.DEBUG if settings.debug else logging.INFO,
        )
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        ids = SaltIDs(args.salt, args.min_length, args.alphabet)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.command == 'serve':
        asyncio.run(serve(settings, args, ids))
    elif args.command == 'encode':
        print(ids.encode(args.numbers))
    elif args.command == 'decode':
        try:
            numbers = ids.decode(args.hashid)
        except DecodeError as e:
            logger.error("Can't decode %r: %s", args.hashid, e)
            return 1
        print(' '.join('%d' % n for n in numbers))
    elif args.command == 'encode-hex':
        hashid = ids.encode_hex(args.hex)
        if hashid is None:
            logger.error("Not a hexadecimal string: %r", args.hex)
            return 1
        print(hashid)
    elif args.command == 'decode-hex':
        hexstr = ids.decode_hex(args.hashid)
        if hexstr is None:
            logger.error("Can't decode %r", args.hashid)
            return 1
        print(hexstr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
