# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import difflib
import sys

from argparse import ArgumentParser

from inators.arg import add_log_level_argument, add_sys_path_argument, add_sys_recursion_limit_argument, add_version_argument, process_log_level_argument, process_sys_path_argument, process_sys_recursion_limit_argument
from inators.imp import import_object

from .cli import add_serializer_argument, add_tree_format_argument, init_logging, load_tree, logger, process_tree_format_argument
from .pkgdata import __version__


def compare(texts, names=('first', 'second'), diff=False):
    """
    Compare the canonical texts of two trees.

    :param tuple[str,str] texts: The canonical texts.
    :param tuple[str,str] names: Names of the trees used in the report.
    :param bool diff: Add a unified diff of the texts to the report if they
        differ.
    :return: Whether the texts are identical, and a human-readable report.
    :rtype: tuple[bool,str]
    """
    if texts[0] == texts[1]:
        return True, f'{names[0]} and {names[1]} are structurally identical.'

    report = f'{names[0]} and {names[1]} differ.'
    if diff:
        lines = difflib.unified_diff(texts[0].splitlines(keepends=True), texts[1].splitlines(keepends=True),
                                     fromfile=names[0], tofile=names[1])
        report += '\n' + ''.join(lines)
    return False, report


def execute(argv=None):
    parser = ArgumentParser(description='canonjava: Compare',
                            epilog="""
                            The tool decodes two tree files and compares their canonical
                            texts. Exit status is 0 if they are identical, 1 if they
                            differ, and 2 if a file does not contain a valid tree.
                            """)
    parser.add_argument('files', metavar='FILE', nargs=2,
                        help='tree files to compare.')
    parser.add_argument('--diff', default=False, action='store_true',
                        help='show the difference of the canonical texts.')
    add_serializer_argument(parser)
    add_tree_format_argument(parser)
    add_sys_path_argument(parser)
    add_sys_recursion_limit_argument(parser)
    add_log_level_argument(parser, short_alias=())
    add_version_argument(parser, version=__version__)
    args = parser.parse_args(argv)

    init_logging()
    process_tree_format_argument(args)
    process_log_level_argument(args, logger)
    process_sys_path_argument(args)
    process_sys_recursion_limit_argument(args)

    serializer = import_object(args.serializer)

    roots = [load_tree(fn, args.tree_codec) for fn in args.files]
    if any(root is None for root in roots):
        sys.exit(2)

    identical, report = compare([serializer(root) for root in roots], names=args.files, diff=args.diff)
    print(report)
    sys.exit(0 if identical else 1)


if __name__ == '__main__':
    execute()
