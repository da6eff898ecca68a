"""CLI for passcraft — generate, strength, info, config (show/set/reset)."""

import argparse
import logging
from typing import List, Optional

from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .charsets import CharacterClass, parse_options
from .config import (
    DEFAULTS,
    check_settings,
    coerce_value,
    config_path,
    length_bounds,
    load_config,
    save_config,
)
from .errors import SecureRandomUnavailable
from .generator import generate
from .randomsource import default_source, secure_random_available
from .strength import estimate_strength

log = logging.getLogger(__name__)

_DISABLE_FLAGS = {
    "no_upper": CharacterClass.UPPER,
    "no_lower": CharacterClass.LOWER,
    "no_digits": CharacterClass.DIGIT,
    "no_symbols": CharacterClass.SYMBOL,
}

def setup_logging(level: str) -> None:
    logger = logging.getLogger("passcraft")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)

def cmd_generate(args, cfg):
    lo, hi = length_bounds(cfg)
    length = args.length if args.length is not None else cfg["length"]
    if not lo <= length <= hi:
        print(f"[red]Length must be between {lo} and {hi}.[/red]")
        return 2
    copies = args.copies if args.copies is not None else cfg["copies"]
    if copies < 1:
        print("[red]Copies must be at least 1.[/red]")
        return 2

    try:
        options = set(parse_options(cfg["classes"]))
    except ValueError as e:
        print(f"[red]Bad 'classes' setting in {config_path()}: {escape(str(e))}[/red]")
        return 2
    for flag, cls in _DISABLE_FLAGS.items():
        if getattr(args, flag):
            options.discard(cls)

    allow_insecure = cfg["allow_insecure_fallback"] is True and not args.require_secure
    try:
        source = default_source(allow_insecure=allow_insecure)
    except SecureRandomUnavailable as e:
        print(f"[red]{e}[/red]")
        return 2
    if not source.secure:
        print("[bold yellow]WARNING: no secure random generator available; "
              "these passwords are NOT cryptographically secure.[/bold yellow]")

    for i in range(copies):
        result = generate(length, options, source)
        if not result.ok:
            print(f"[red]{escape(result.message)}[/red]")
            return 1
        line = f"[bold green]Password #{i+1}:[/bold green] {escape(result.password)}"
        if args.show_strength:
            s = estimate_strength(result.password, len(options))
            line += f"  [dim]({s['label']}, {s['percent']}%)[/dim]"
        print(line)
    return 0

def cmd_strength(args, cfg):
    result = estimate_strength(args.password)
    header = f"Strength: {result['label']}"
    body = (
        f"Score: {result['percent']}%\n"
        "Advisory only: based on length and character variety."
    )
    print(Panel(body, title=header))
    return 0

def cmd_info(args, cfg):
    available = secure_random_available()
    if available:
        print("[green]Secure random generator: available[/green]")
    else:
        print("[bold yellow]Secure random generator: NOT available[/bold yellow]")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Class")
    table.add_column("Size", justify="right")
    table.add_column("Characters")
    for cls in CharacterClass:
        table.add_row(cls.value, str(len(cls.characters)), escape(cls.characters))
    print(table)
    return 0

# Config subcommands

def cmd_config_show(args, cfg):
    table = Table(show_header=True, header_style="bold magenta", title=config_path())
    table.add_column("Key")
    table.add_column("Value")
    for key in sorted(cfg):
        table.add_row(key, escape(str(cfg[key])))
    print(table)
    return 0

def cmd_config_set(args, cfg):
    try:
        value = coerce_value(args.key, args.value)
    except KeyError:
        print(f"[red]Unknown setting: {escape(args.key)}[/red]")
        return 2
    except ValueError as e:
        print(f"[red]{escape(str(e))}[/red]")
        return 2
    cfg[args.key] = value
    try:
        check_settings(cfg)
        if args.key == "classes":
            parse_options(value)
    except ValueError as e:
        print(f"[red]{escape(str(e))}[/red]")
        return 2
    save_config(cfg)
    print(f"[green]Saved {args.key} = {escape(str(value))}[/green]")
    return 0

def cmd_config_reset(args, cfg):
    save_config(DEFAULTS.copy())
    print(f"[green]Reset settings in {config_path()}[/green]")
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passcraft")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=None, help="Password length")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--copies", type=int, default=None, help="How many passwords to generate")
    gen.add_argument("--require-secure", action="store_true",
                     help="Fail instead of falling back to a non-secure generator")
    gen.add_argument("--show-strength", action="store_true", help="Show the advisory strength label")
    gen.set_defaults(func=cmd_generate)

    st = sub.add_parser("strength", help="Advisory strength estimate for a password")
    st.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    st.set_defaults(func=cmd_strength)

    info = sub.add_parser("info", help="Show random source status and character classes")
    info.set_defaults(func=cmd_info)

    c = sub.add_parser("config", help="Settings")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Show current settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change a setting")
    c_set.add_argument("key", help="Setting name")
    c_set.add_argument("value", help="New value (lists are comma separated)")
    c_set.set_defaults(func=cmd_config_set)

    c_reset = csub.add_parser("reset", help="Restore default settings")
    c_reset.set_defaults(func=cmd_config_reset)

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")
    cfg = load_config()
    if not args.verbose:
        setup_logging(str(cfg.get("log_level", "WARNING")).upper())
    log.debug("config loaded from %s", config_path())
    return args.func(args, cfg)

if __name__ == "__main__":
    raise SystemExit(main())
