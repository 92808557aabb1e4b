"""Console presentation helpers with graceful fallbacks."""
from __future__ import annotations

import os
import shutil
import sys
from typing import Optional

try:  # optional dependency
    import colorama
    from colorama import Fore, Style
except Exception:  # pragma: no cover - optional dep
    colorama = None
    Fore = None  # type: ignore[assignment]
    Style = None  # type: ignore[assignment]

try:  # optional dependency
    import pyfiglet
except Exception:  # pragma: no cover - optional dep
    pyfiglet = None

__all__ = [
    "init",
    "banner",
    "running_panel",
    "section",
    "kv",
    "bullet",
    "success",
    "warning",
    "error",
    "elapsed",
    "key_pair",
    "rule",
    "line",
]

_width = 100
_plain_mode = True
_use_color = False
_palette = {"success": "", "warning": "", "error": "", "heading": ""}
_symbols = {"success": "[OK]", "warning": "[!]", "error": "[X]", "bullet": "-"}


def init(plain: bool = False) -> None:
    """Configure width, colours and symbols for the current terminal."""

    global _width, _plain_mode, _use_color, _palette, _symbols

    _width = shutil.get_terminal_size(fallback=(100, 24)).columns or 100

    try:
        is_tty = bool(sys.stdout.isatty())
    except Exception:  # pragma: no cover - conservative fallback
        is_tty = False

    _plain_mode = plain or bool(os.environ.get("NO_COLOR")) or not is_tty
    _use_color = not _plain_mode and colorama is not None
    if _use_color:
        try:
            colorama.init(autoreset=True)
        except Exception:  # pragma: no cover - best-effort init
            _use_color = False

    if _plain_mode:
        _symbols = {"success": "[OK]", "warning": "[!]", "error": "[X]", "bullet": "-"}
    else:
        _symbols = {"success": "✓", "warning": "!", "error": "✗", "bullet": "•"}

    if _use_color:
        _palette = {
            "success": Fore.GREEN + Style.BRIGHT,
            "warning": Fore.YELLOW + Style.BRIGHT,
            "error": Fore.RED + Style.BRIGHT,
            "heading": Fore.MAGENTA + Style.BRIGHT,
        }
    else:
        _palette = {"success": "", "warning": "", "error": "", "heading": ""}


def _paint(kind: str, message: str) -> str:
    if not _use_color:
        return message
    return f"{_palette[kind]}{message}{Style.RESET_ALL}"


def rule(char: str = "=", width: Optional[int] = None) -> None:
    print(char * max(1, width if width is not None else _width))


def line() -> None:
    rule("-")


def banner(title: str) -> None:
    """Print a figlet banner, or a centred title line in plain mode."""

    if not _plain_mode and pyfiglet is not None:
        try:
            print(pyfiglet.figlet_format(title, width=_width))
            return
        except Exception:
            pass
    print(f"=== {title} ===".center(_width))


def running_panel(title: str) -> None:
    rule("=")
    print(_paint("heading", f"RUNNING: {title}"))
    rule("=")


def section(title: str) -> None:
    rule("=")
    print(f" {title.upper()}")
    rule("=")


def kv(key: str, value: object) -> None:
    print(f"{key}: {value}")


def bullet(msg: str) -> None:
    print(f"{_symbols['bullet']} {msg}")


def success(msg: str) -> None:
    print(_paint("success", f"{_symbols['success']} {msg}"))


def warning(msg: str) -> None:
    print(_paint("warning", f"{_symbols['warning']} {msg}"))


def error(msg: str) -> None:
    print(_paint("error", f"{_symbols['error']} {msg}"))


def elapsed(label: str, milliseconds: float) -> None:
    """Print a timing line in milliseconds."""

    print(f"{label} took: {milliseconds:.3f} ms")


def key_pair(keys) -> None:
    """Print the public ``(e, n)`` and private ``(d, n)`` halves of *keys*."""

    print("Public key:")
    print(keys.public_key.e)
    print(keys.public_key.n)
    print("Private key:")
    print(keys.private_key.d)
    print(keys.private_key.n)
