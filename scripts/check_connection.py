#!/usr/bin/env python3
"""Verifica conectividade com a API do Inter (mTLS + OAuth + saldo).

Uso:
    python scripts/check_connection.py
    python scripts/check_connection.py --sandbox

Lê as mesmas variáveis do servidor (.env incluído). Sai com status 1 se a
configuração estiver incompleta ou se o Inter recusar a chamada.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import sys

from app.bootstrap import create_inter_client, initialize_app, load_environment
from config.settings import get_inter_settings
from utils.errors import InterMcpError


async def check_connection(*, sandbox: bool) -> dict:
    settings = get_inter_settings()
    if sandbox:
        settings = dataclasses.replace(settings, is_sandbox=True)

    client = create_inter_client(settings)
    try:
        return await client.get_saldo()
    finally:
        await client.aclose()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--sandbox",
        action="store_true",
        help="Usa o host de sandbox mesmo sem INTER_IS_SANDBOX=true.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    load_environment()
    initialize_app()

    try:
        saldo = asyncio.run(check_connection(sandbox=args.sandbox))
    except InterMcpError as exc:
        print(f"[falha] {exc}", file=sys.stderr)
        sys.exit(1)

    print("[ok] conexão com o Inter estabelecida")
    print(json.dumps(saldo, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
