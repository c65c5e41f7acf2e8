# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import glob
import logging
import os

from .tool import JsonTreeCodec, PickleTreeCodec

logger = logging.getLogger('canonjava')


def init_logging():
    logging.basicConfig(format='%(message)s')


def add_jobs_argument(parser):
    parser.add_argument('-j', '--jobs', metavar='NUM', type=int, default=os.cpu_count(),
                        help='parallelization level (default: number of cpu cores (%(default)d)).')


def add_encoding_argument(parser, help):
    parser.add_argument('--encoding', metavar='NAME', default='utf-8',
                        help=help)


def add_encoding_errors_argument(parser):
    parser.add_argument('--encoding-errors', metavar='NAME', default='strict',
                        help='encoding error handling scheme (default: %(default)s).')


def add_serializer_argument(parser):
    parser.add_argument('-s', '--serializer', metavar='NAME', default='canonjava.runtime.canonical_serializer',
                        help='reference to a serializer (in package.module.function format) that takes a tree and produces a string from it (default: %(default)s).')


tree_formats = {
    'json': {'extension': 'json', 'codec_class': JsonTreeCodec},
    'pickle': {'extension': 'pickle', 'codec_class': PickleTreeCodec},
}


def add_tree_format_argument(parser):
    parser.add_argument('--tree-format', metavar='NAME', choices=sorted(tree_formats.keys()), default='json',
                        help='format of the tree files (choices: %(choices)s, default: %(default)s)')


def process_tree_format_argument(args):
    tree_format = tree_formats[args.tree_format]
    args.tree_extension = tree_format['extension']
    args.tree_codec = tree_format['codec_class']()


def iter_files(args):
    """
    Iterate over the input files given either explicitly (``args.input``) or
    by wildcard patterns (``args.glob``).
    """
    for fn in args.input or []:
        yield fn

    for pattern in args.glob or []:
        for fn in sorted(glob.glob(pattern, recursive=True)):
            if os.path.isfile(fn):
                yield fn


def load_tree(fn, codec):
    """
    Load a tree from a file.

    :param str fn: Path to the tree file.
    :param ~canonjava.tool.TreeCodec codec: Codec to decode the file with.
    :return: Root of the tree or ``None`` if the file cannot be read or does
        not contain a valid tree.
    :rtype: ~canonjava.runtime.Rule
    """
    try:
        with open(fn, 'rb') as f:
            data = f.read()
    except OSError as e:
        logger.warning('Cannot read file %s: %s', fn, e)
        return None

    root = codec.decode(data)

    if root is None:
        logger.warning('File %s does not contain a valid tree.', fn)
    return root
