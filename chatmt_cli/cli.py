"""CLI for chatmt-cli - translate text through an OpenAI-compatible endpoint."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict

from .translation import (
    TranslationError,
    TranslatorFactory,
    TranslatorMetadata,
    build_language_map,
)

__all__ = ["load_config_file", "build_config", "main"]

API_KEY_ENV = "CHATMT_API_KEY"
DEFAULT_TRANSLATOR = "openai_compat"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for CLI output.

    Args:
        verbose: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_config_file(path: str) -> Dict[str, Any]:
    """Read a JSON object of plugin options."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of plugin options")
    return data


def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge the config file, command-line overrides and the environment."""
    config: Dict[str, Any] = load_config_file(args.config) if args.config else {}

    if args.api_key:
        config["apiKey"] = args.api_key
    elif not config.get("apiKey") and os.environ.get(API_KEY_ENV):
        config["apiKey"] = os.environ[API_KEY_ENV]
    if args.endpoint:
        config["requestPath"] = args.endpoint
    if args.model:
        config["model"] = args.model
    if args.stream:
        config["use_stream"] = "true"

    if not args.raw_codes:
        codes = [args.source_lang, args.target_lang, args.detect]
        configured = config.get("language") or {}
        config["language"] = {**configured, **build_language_map(codes, overrides=configured)}
    return config


class _ProgressPrinter:
    """Render streaming updates on a single stderr line."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stderr
        self.enabled = self.stream.isatty()

    def __call__(self, text: str) -> None:
        if not self.enabled:
            return
        last_line = text.splitlines()[-1] if text else ""
        self.stream.write(f"\r\x1b[K{last_line}")
        self.stream.flush()

    def close(self) -> None:
        if self.enabled:
            self.stream.write("\r\x1b[K")
            self.stream.flush()


# =============================================================================
# Subcommand: translators
# =============================================================================

def cmd_translators(args: argparse.Namespace) -> int:
    """List available translators."""
    translators = TranslatorMetadata.get_all()
    if not translators:
        print("No translators found.")
        return 0

    for tid, info in translators.items():
        stream = " (streaming)" if info.supports_streaming else ""
        print(f"{tid}: {info.display_name}{stream}")
        print(f"    {info.description}")
    return 0


# =============================================================================
# Subcommand: translate
# =============================================================================

def cmd_translate(args: argparse.Namespace) -> int:
    """Translate text given as an argument or on stdin."""
    text = args.text if args.text is not None else sys.stdin.read()

    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        print(f"Error: Could not load config: {e}", file=sys.stderr)
        return 1

    progress = _ProgressPrinter() if args.stream else None
    try:
        with TranslatorFactory.create_translator(args.translator, config=config) as translator:
            result = translator.translate(
                text,
                args.source_lang,
                args.target_lang,
                detected_lang=args.detect,
                on_update=progress,
            )
    except (TranslationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if progress is not None:
            progress.close()

    print(result.text)
    return 0


# =============================================================================
# Main entry point
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="chatmt-cli",
        description="Translate text with an OpenAI-compatible chat completion API.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # translators command
    translators_parser = subparsers.add_parser("translators", help="List available translators")
    translators_parser.set_defaults(func=cmd_translators)

    # translate command
    translate_parser = subparsers.add_parser("translate", help="Translate text")
    translate_parser.add_argument(
        "text",
        nargs="?",
        help="Text to translate (default: read from stdin)",
    )
    translate_parser.add_argument(
        "--from",
        dest="source_lang",
        default="auto",
        help="Source language code (default: auto)",
    )
    translate_parser.add_argument(
        "--to",
        dest="target_lang",
        default="en",
        help="Target language code (default: en)",
    )
    translate_parser.add_argument(
        "--detect",
        help="Detected source language code, substituted for $detect",
    )
    translate_parser.add_argument(
        "-c", "--config",
        help="JSON file with plugin options (apiKey, requestPath, model, ...)",
    )
    translate_parser.add_argument(
        "--api-key",
        help=f"API key (default: ${API_KEY_ENV})",
    )
    translate_parser.add_argument(
        "--endpoint",
        help="API endpoint, e.g. api.openai.com/v1",
    )
    translate_parser.add_argument(
        "--model",
        help="Model name (default: gpt-4o-mini)",
    )
    translate_parser.add_argument(
        "--stream",
        action="store_true",
        help="Stream the response and show progress on stderr",
    )
    translate_parser.add_argument(
        "--raw-codes",
        action="store_true",
        help="Use language codes as-is instead of display names in prompts",
    )
    translate_parser.add_argument(
        "--translator",
        default=DEFAULT_TRANSLATOR,
        help=f"Translator ID (default: {DEFAULT_TRANSLATOR})",
    )
    translate_parser.set_defaults(func=cmd_translate)

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # No command specified - show help
    if args.command is None:
        parser.print_help()
        return 0

    # Execute the command
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
