"""Command-line interface for minigit"""
import argparse, logging, sys
from pathlib import Path
from .config import log_level_from_env, root_from_env
from .errors import ObjectError
from .name import Name
from .objects import Blob
from .store import ObjectStore

logger = logging.getLogger(__name__)


def _content(args) -> bytes:
    if args.stdin:
        return sys.stdin.buffer.read()
    if not args.file:
        raise ObjectError('a file or --stdin is required')
    return Path(args.file).read_bytes()


def _store(args) -> ObjectStore:
    return ObjectStore(args.root if args.root else root_from_env())


def hash_object(args) -> int:
    blob = Blob(_content(args))
    name = _store(args).write(blob) if args.write else blob.name()
    print(name)
    return 0


def cat_file(args) -> int:
    content = _store(args).read(Name.from_hex(args.name))
    sys.stdout.buffer.write(content)
    sys.stdout.buffer.flush()
    return 0


def show(args) -> int:
    blob = Blob(_content(args))
    print('name', blob.name())
    print('data', blob.encode().hex())
    print('compress', blob.compress().hex())
    _store(args).write(blob)
    return 0


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = argparse.ArgumentParser(prog='minigit')
    parser.add_argument('--root', help='directory holding .git (default: $ROOT)')
    parser.add_argument('-v', '--verbose', action='store_true')
    sub = parser.add_subparsers(dest='cmd')

    p_hash = sub.add_parser('hash-object'); p_hash.set_defaults(func=hash_object)
    p_hash.add_argument('-w', action='store_true', dest='write')
    p_hash.add_argument('--stdin', action='store_true'); p_hash.add_argument('file', nargs='?')

    p_cat = sub.add_parser('cat-file'); p_cat.set_defaults(func=cat_file)
    p_cat.add_argument('name')

    p_show = sub.add_parser('show'); p_show.set_defaults(func=show)
    p_show.add_argument('--stdin', action='store_true'); p_show.add_argument('file', nargs='?')

    args = parser.parse_args(argv)
    if args.cmd is None:
        parser.print_help(); return 2

    try:
        level = logging.DEBUG if args.verbose else log_level_from_env()
        logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
        return args.func(args)
    except (ObjectError, OSError) as e:
        logger.debug('%s failed', args.cmd, exc_info=True)
        print(f'fatal: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
