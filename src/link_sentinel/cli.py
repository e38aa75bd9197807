"""Command line entrypoint for link-sentinel."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from link_sentinel.app.run import check_link, inspect_link, trust_last_scan
from link_sentinel.app.state import custom_whitelist, is_enabled, last_scan, set_enabled
from link_sentinel.config.settings import AppConfig, load_config
from link_sentinel.core.errors import LinkSentinelError
from link_sentinel.core.logging import configure_logging
from link_sentinel.infra.store import JsonFileStore
from link_sentinel.ui.presentation import format_alert, format_tooltip, render_record, status_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="link-sentinel")
    parser.add_argument("--url", help="Inspect a link, honouring stored settings, and print JSON.")
    parser.add_argument("--check", metavar="URL", help="Check a link once and print an alert.")
    parser.add_argument(
        "--trust",
        action="append",
        default=[],
        metavar="HOST",
        help="Extra trusted hostname for this run (repeatable).",
    )
    parser.add_argument("--trust-last", action="store_true", help="Trust the host of the last scan.")
    toggle = parser.add_mutually_exclusive_group()
    toggle.add_argument("--enable", action="store_true", help="Turn protection on.")
    toggle.add_argument("--disable", action="store_true", help="Turn protection off.")
    parser.add_argument("--status", action="store_true", help="Show protection status and the last scan.")
    parser.add_argument("--config", help="Path to a YAML config file.")
    return parser


def _dump(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=True)


def run_once(url: str, store: JsonFileStore, cfg: AppConfig, extra_trusted: Sequence[str] = ()) -> str:
    record = inspect_link(
        url,
        store,
        extra_trusted=[*cfg.trusted_hostnames, *extra_trusted],
        default_enabled=cfg.default_enabled,
    )
    if record is None:
        if not is_enabled(store, default=cfg.default_enabled):
            return _dump({"status": "disabled"})
        return _dump({"status": "skipped", "url": url})
    return _dump(record.model_dump(mode="json"))


def run_status(store: JsonFileStore, cfg: AppConfig) -> str:
    lines = [status_text(is_enabled(store, default=cfg.default_enabled))]
    record = last_scan(store)
    if record is not None:
        lines.append(render_record(record, custom_whitelist(store)))
    return "\n".join(lines)


def run_chat(store: JsonFileStore, cfg: AppConfig, extra_trusted: Sequence[str] = ()) -> None:
    print(f"link-sentinel ready ({status_text(is_enabled(store, default=cfg.default_enabled))})")
    while True:
        try:
            raw = input("> ").strip()
        except EOFError:
            break
        if raw.lower() in {"exit", "quit"}:
            break
        if not raw:
            continue
        record = inspect_link(
            raw,
            store,
            extra_trusted=[*cfg.trusted_hostnames, *extra_trusted],
            default_enabled=cfg.default_enabled,
        )
        if record is None:
            print(status_text(False) if not is_enabled(store, default=cfg.default_enabled) else "skipped")
            continue
        print(format_tooltip(record))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg, _ = load_config(args.config)
        configure_logging(cfg.log_level, cfg.log_format)
        store = JsonFileStore(cfg.resolved_state_path())

        if args.enable or args.disable:
            set_enabled(store, bool(args.enable))
            print(status_text(bool(args.enable)))
            return 0
        if args.trust_last:
            record = trust_last_scan(store)
            print(_dump(record.model_dump(mode="json") if record else {"status": "no_scan"}))
            return 0
        if args.status:
            print(run_status(store, cfg))
            return 0
        if args.check:
            print(format_alert(check_link(args.check)))
            return 0
        if args.url:
            print(run_once(args.url, store, cfg, args.trust))
            return 0
        # No-arg startup for easier local usage.
        run_chat(store, cfg, args.trust)
        return 0
    except LinkSentinelError as exc:
        print(f"link-sentinel: {exc}", file=sys.stderr)
        return 2
