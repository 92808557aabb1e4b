#!/usr/bin/env python3
"""
Textbook RSA CLI – one entry point for the number-theory demos.

Usage:
  Interactive menu:
    python rsa_cli.py

  Non-interactive:
    python rsa_cli.py --run keys --bits 512
    python rsa_cli.py --run roundtrip --message 1230948092384098
    python rsa_cli.py --run textbook
    python rsa_cli.py --run bench
    python rsa_cli.py --run dashboard
    python rsa_cli.py --run all
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
import textwrap
from typing import Optional, Sequence

# Ensure relative repo imports work even if executed from another directory.
sys.path.insert(0, str(pathlib.Path(__file__).parent.resolve()))

from textbook_rsa import (
    RsaConfig,
    RsaError,
    decode,
    encode,
    find_prime,
    generate_key_pair,
    generate_keys,
    parse_int,
)
from utils import benchmark, console_ui
from utils.bits import to_bits
from utils.plotting import HAS_MPL as _HAS_MPL

logger = logging.getLogger("rsa_cli")

DEFAULT_MESSAGE = "1230948092384098"
DEFAULT_BITS = 1024


def _invoke(title: str, func) -> bool:
    """Run one demo, reporting failures instead of crashing the menu."""

    logger.info("Running %s", title)
    console_ui.running_panel(title)
    try:
        func()
    except (RsaError, ValueError) as exc:
        console_ui.error(f"{type(exc).__name__}: {exc}")
        return False
    console_ui.success("Demo completed successfully.")
    return True


def _print_keys(keys) -> None:
    console_ui.section("Key pair")
    console_ui.key_pair(keys)
    console_ui.kv("Modulus n size", f"{keys.n.bit_length()} bits")


def _run_keys(config: RsaConfig):
    keys = benchmark.report(
        f"{config.bit_length}-bit key generation",
        lambda: generate_keys(config=config),
    )
    _print_keys(keys)
    return keys


def _run_roundtrip(config: RsaConfig, message: str):
    keys = _run_keys(config)
    value = parse_int(message, field="message")
    encrypted = encode(value, keys.public_key)
    decrypted = decode(encrypted, keys.private_key)
    console_ui.section("Round trip")
    console_ui.kv("Message", value)
    console_ui.kv("Encrypted", encrypted)
    console_ui.kv("Decrypted", decrypted)
    console_ui.kv("Round-trip OK", decrypted == value)
    if decrypted != value:
        console_ui.error("RSA round-trip failed.")
    return value, encrypted, decrypted


def _run_textbook():
    p, q, e = 61, 53, 17
    keys = generate_key_pair(p, q, 6, public_exponent=e)
    console_ui.section("Textbook example (p=61, q=53, e=17)")
    console_ui.kv("n = p*q", keys.n)
    console_ui.kv("phi = (p-1)(q-1)", (p - 1) * (q - 1))
    console_ui.kv("d = e^-1 mod phi", keys.d)
    message = 65
    cipher = encode(message, keys.public_key)
    console_ui.kv("Message", message)
    console_ui.kv("Encrypted", cipher)
    console_ui.kv("Decrypted", decode(cipher, keys.private_key))
    console_ui.kv("Message bits", to_bits(message, keys.n.bit_length()))
    return keys, cipher


def _run_bench(config: RsaConfig, sizes: Sequence[int] = (128, 256, 512, 1024)):
    console_ui.section("Prime generation benchmark")
    rows = []
    for bits in sizes:
        result, millis = benchmark.measure(lambda: find_prime(bits, **config.search_kwargs()))
        console_ui.kv(f"{bits:>5} bits", f"{millis:9.2f} ms, {result.attempts} candidate(s)")
        rows.append((bits, result.attempts, millis))
    return rows


def _run_dashboard(config: RsaConfig, out_dir: str = "out"):
    console_ui.section("Export dashboard (PNG)")
    if not _HAS_MPL:
        console_ui.warning("matplotlib is not installed; skipping dashboard export.")
        return None
    from reports import collect_samples, make_prime_search_dashboard

    samples = collect_samples(config=config)
    outcome = make_prime_search_dashboard(
        pathlib.Path(out_dir) / "prime_search.png", samples
    )
    console_ui.kv("Saved", pathlib.Path(outcome["path"]).resolve())
    return outcome["path"]


def run_all(config: RsaConfig, message: str) -> None:
    steps = [
        ("Key generation", lambda: _run_keys(config)),
        ("Encode/decode round trip", lambda: _run_roundtrip(config, message)),
        ("Textbook example", _run_textbook),
        ("Prime generation benchmark", lambda: _run_bench(config)),
    ]

    for index, (title, func) in enumerate(steps, start=1):
        print(f"[{index}/{len(steps)}] {title}")
        console_ui.running_panel(title)
        try:
            _, millis = benchmark.measure(func)
        except (RsaError, ValueError) as exc:
            console_ui.error(f"{type(exc).__name__}: {exc}")
        else:
            console_ui.elapsed("DONE", millis)
        console_ui.line()

    console_ui.success("All demos completed.")


def menu() -> str:
    console_ui.banner("Textbook RSA")
    console_ui.bullet("Choose a demo to run:")
    print("  1) Generate and print a key pair")
    print("  2) Encode/decode a message")
    print("  3) Textbook example (61, 53, 17)")
    print("  4) Prime generation benchmark")
    print("  5) Export prime-search dashboard (PNG)")
    print("  6) Run ALL")
    print("  0) Exit")
    return input("\nEnter choice: ").strip()


def build_config(args: argparse.Namespace) -> RsaConfig:
    return RsaConfig(
        bit_length=args.bits,
        fixed_witness=args.fixed_witness,
        max_prime_attempts=args.max_attempts,
        deadline=args.deadline,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Textbook RSA CLI — keys, encode/decode and benchmarks.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        Examples:
          python rsa_cli.py
          python rsa_cli.py --run roundtrip --bits 256
          python rsa_cli.py --run all --plain
        """),
    )
    ap.add_argument(
        "--run",
        choices=["keys", "roundtrip", "textbook", "bench", "dashboard", "all"],
        help="Run a specific demo non-interactively.",
    )
    ap.add_argument("--bits", type=int, default=DEFAULT_BITS, help="Bit length of each prime.")
    ap.add_argument("--message", default=DEFAULT_MESSAGE, help="Integer message to encode.")
    ap.add_argument(
        "--fixed-witness",
        action="store_true",
        help="Use the single base-2 Miller-Rabin witness instead of random witnesses.",
    )
    ap.add_argument("--max-attempts", type=int, help="Cap on candidates per prime search.")
    ap.add_argument("--deadline", type=float, help="Seconds allowed per prime search.")
    ap.add_argument("--out-dir", default="out", help="Directory for dashboard PNGs.")
    ap.add_argument(
        "--plain",
        action="store_true",
        help="Disable colors/banners; print plain ASCII.",
    )
    ap.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging verbosity (DEBUG, INFO, WARNING, ...)",
    )
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    console_ui.init(plain=args.plain)
    try:
        config = build_config(args)
    except ValueError as exc:
        console_ui.error(str(exc))
        return 2

    mapping = {
        "1": ("keys", "Key generation", lambda: _run_keys(config)),
        "2": ("roundtrip", "Encode/decode round trip", lambda: _run_roundtrip(config, args.message)),
        "3": ("textbook", "Textbook example", _run_textbook),
        "4": ("bench", "Prime generation benchmark", lambda: _run_bench(config)),
        "5": ("dashboard", "Prime-search dashboard", lambda: _run_dashboard(config, args.out_dir)),
    }

    if args.run:
        if args.run == "all":
            run_all(config, args.message)
            return 0
        for name, title, func in mapping.values():
            if name == args.run:
                return 0 if _invoke(title, func) else 1

    # interactive loop
    while True:
        choice = menu()
        if choice in mapping:
            _, title, func = mapping[choice]
            _invoke(title, func)
        elif choice == "6":
            run_all(config, args.message)
        elif choice == "0" or choice.lower() in {"q", "quit", "exit"}:
            print("Goodbye!")
            return 0
        else:
            console_ui.warning("Invalid choice. Please select 0–6.")


if __name__ == "__main__":
    sys.exit(main())
