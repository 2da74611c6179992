from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, Optional

import uvicorn

from ouivendor import __version__
from ouivendor.builder import NAME_COLUMN, OUI_COLUMN, build_from_csv, write_table
from ouivendor.config import apply_config, load_config
from ouivendor.exceptions import OuiVendorError
from ouivendor.fetch import IEEE_OUI_CSV_URL, download_registry
from ouivendor.log import parse_level, setup_logging
from ouivendor.lookup import VendorLookup, mac_to_bytes
from ouivendor.normalize import normalize_vendor


def _require(value: str | None, option: str, command: str) -> str:
    if not value:
        raise SystemExit(f"{command} requires {option} (or set it in ouivendor.toml)")
    return value


def cmd_fetch(args: argparse.Namespace) -> None:
    path = download_registry(args.url, args.output, args.timeout)
    print(f"[*] Registry saved to {path}")


def cmd_build(args: argparse.Namespace) -> None:
    source = _require(args.source, "--source", "build")
    output = _require(args.output, "--output", "build")
    table = build_from_csv(source, args.oui_column, args.name_column)
    write_table(table, output)
    print(f"[*] Wrote {len(table.ouis)} OUIs / {len(table.vendors)} vendors to {output}")


def cmd_lookup(args: argparse.Namespace) -> None:
    lookup = VendorLookup.from_file(_require(args.table, "--table", "lookup"))
    for key in args.keys:
        if args.suffix:
            try:
                vendor = lookup.vendor_with_mac(mac_to_bytes(key))
            except ValueError as exc:
                print(f"warning: {exc}", file=sys.stderr)
                vendor = ""
        else:
            vendor = lookup.vendor(key)
        print(f"{key}\t{vendor or '-'}")


def cmd_normalize(args: argparse.Namespace) -> None:
    for name in args.names:
        print(normalize_vendor(name))


def cmd_serve(args: argparse.Namespace) -> None:
    from ouivendor.web import api

    api.configure(_require(args.table, "--table", "serve"))
    print(f"[*] Serving vendor lookups on {args.host}:{args.port}")
    uvicorn.run(api.app, host=args.host, port=args.port, reload=False)


# Global config keys that are also passed down to the subcommands.
SHARED_OPTIONS = ("table",)


def build_parser(config: Optional[Dict[str, Any]] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ouivendor",
        description="Compile the IEEE OUI registry and look up MAC address vendors.",
    )
    parser.add_argument("--log-level", default="info", help="Logging level (debug, info, warning, error)")
    parser.add_argument("--version", action="version", version=f"ouivendor {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch_parser = subparsers.add_parser("fetch", help="Download the IEEE OUI registry CSV")
    fetch_parser.add_argument("--url", default=IEEE_OUI_CSV_URL, help="Registry URL")
    fetch_parser.add_argument("--output", default="oui.csv", help="Destination CSV path")
    fetch_parser.add_argument("--timeout", type=float, default=30.0, help="Download timeout seconds")
    fetch_parser.set_defaults(func=cmd_fetch)

    build_parser_ = subparsers.add_parser("build", help="Compile a registry CSV into a vendor table")
    build_parser_.add_argument("--source", help="Registry CSV file")
    build_parser_.add_argument("--output", help="Vendor table JSON to write")
    build_parser_.add_argument("--oui-column", type=int, default=OUI_COLUMN, help="Zero-based OUI column")
    build_parser_.add_argument("--name-column", type=int, default=NAME_COLUMN, help="Zero-based vendor name column")
    build_parser_.set_defaults(func=cmd_build)

    lookup_parser = subparsers.add_parser("lookup", help="Resolve OUIs or MAC addresses to vendors")
    lookup_parser.add_argument("--table", help="Vendor table JSON")
    lookup_parser.add_argument("--suffix", action="store_true", help="Append the device bytes (full MACs only)")
    lookup_parser.add_argument("keys", nargs="+", help="OUI or MAC address")
    lookup_parser.set_defaults(func=cmd_lookup)

    normalize_parser = subparsers.add_parser("normalize", help="Show the display form of raw vendor names")
    normalize_parser.add_argument("names", nargs="+", help="Raw registry organisation name")
    normalize_parser.set_defaults(func=cmd_normalize)

    serve_parser = subparsers.add_parser("serve", help="Serve vendor lookups over HTTP")
    serve_parser.add_argument("--table", help="Vendor table JSON")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.set_defaults(func=cmd_serve)

    commands = {
        "fetch": fetch_parser,
        "build": build_parser_,
        "lookup": lookup_parser,
        "normalize": normalize_parser,
        "serve": serve_parser,
    }
    apply_config(parser, config or {}, commands, SHARED_OPTIONS)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser(load_config())
    args = parser.parse_args(argv)
    try:
        setup_logging(parse_level(args.log_level))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    try:
        args.func(args)
    except OuiVendorError as exc:
        raise SystemExit(f"error: {exc}") from exc
    return 0


if __name__ == "__main__":
    sys.exit(main())
