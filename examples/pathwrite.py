# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Modify a TOML document through write cursors."""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path

from genro_treepath import ValueTree


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')
    text = (Path(__file__).parent / 'sample.toml').read_text()
    tree = ValueTree(tomllib.loads(text))

    tree.path_mut('ip') << '127.0.0.2'

    # key/value pairs into a table
    host = tree.path_mut('host') << ('newkey1', 1) << ('newkey2', '2')

    # scalar onto a leaf of the same kind
    host / 'port' << 8888

    # rejected: port is an integer, the debug log says why
    tree.path_mut('host/port') << 'eighty'

    # single items into an array
    tree.path_mut('host/protocol') << (8989,) << ('xyz',)

    # <<= changes the kind, << cannot
    node = tree.path_mut('misc/bool')
    node <<= 'false'

    print(json.dumps(tree.root, indent=2, default=str))


if __name__ == '__main__':
    main()
