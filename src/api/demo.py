"""
デモ CLI

Usage:
    creational-demo                       # factory → singleton の順に両方実行
    creational-demo factory [KEY ...]     # 既定キー: circle rectangle square
    creational-demo singleton
    python -m api.demo --log-level DEBUG factory Circle triangle

終了コード:
    0: 全キーを解決できた / 1: 未知キーを含む
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from common.logging import setup_default_logging
from common.settings import LOG_LEVELS

from .shape_factory import G
from .single_object import get_instance

logger = logging.getLogger(__name__)

DEFAULT_KEYS = ("circle", "rectangle", "square")


def run_factory_demo(keys: Sequence[str] = DEFAULT_KEYS) -> int:
    """各キーのシェイプを生成して draw() する。未知キーの個数を返す。"""
    missing = 0
    for key in keys:
        obj = G.create(key)
        if obj is None:
            logger.warning("unknown shape: %r (available: %s)", key, ", ".join(G.list_shapes()))
            missing += 1
            continue
        obj.draw()
    return missing


def run_singleton_demo() -> None:
    get_instance().print()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="creational-demo", description="Factory / Singleton demo")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        default=None,
        help="log level (default: $CP_LOG_LEVEL or WARNING)",
    )
    sub = p.add_subparsers(dest="command")
    fp = sub.add_parser("factory", help="create shapes by key and draw them")
    fp.add_argument("keys", nargs="*", default=list(DEFAULT_KEYS), metavar="KEY")
    sub.add_parser("singleton", help="print from the shared instance")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    missing = 0
    if args.command in (None, "factory"):
        keys = getattr(args, "keys", None) or DEFAULT_KEYS
        missing = run_factory_demo(keys)
    if args.command in (None, "singleton"):
        run_singleton_demo()
    return 1 if missing else 0


if __name__ == "__main__":
    raise SystemExit(main())
