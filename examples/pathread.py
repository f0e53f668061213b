# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Read values from a TOML document through path cursors."""

from __future__ import annotations

import tomllib
from pathlib import Path

from genro_treepath import path


def main() -> None:
    text = (Path(__file__).parent / 'sample.toml').read_text()
    doc = tomllib.loads(text)

    print('original toml content:')
    print(text)
    print('read by path:')

    root = path(doc)
    print(f"/ip = {root / 'ip' | ''}")

    host = root / 'host'
    print(f"/host/ip = {host / 'ip' | ''}")
    print(f"/host/port = {host / 'port' | 0}")

    print(f"/service/0/name = {root / 'service' / 0 / 'name' | ''}")
    print(f"/service/1/desc = {path(doc, 'service.1.desc') | ''}")

    misc = root / 'misc'
    print(f"/misc/int = {misc / 'int' | 0}")
    print(f"/misc/float = {misc / 'float' | 0.0}")
    print(f"/misc/bool = {misc / 'bool' | False}")


if __name__ == '__main__':
    main()
