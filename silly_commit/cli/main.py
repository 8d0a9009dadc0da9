"""CLI Main Entry Point"""

import os
import random
import sys
from dataclasses import replace
from typing import Mapping

from silly_commit.config import Config, load_config
from silly_commit.generator import generate_message, SelectionError, GeneratedMessage
from silly_commit.sources import load_names, load_messages, SourceLoadError
from silly_commit.output import success, warning, dim, print_error, print_warning, CHECK

from silly_commit.cli.args import PROG, parse_args
from silly_commit.cli.commands import display_config, run_install_completion, run_save_config
from silly_commit.cli.utils import copy_to_clipboard, parse_seed


def _resolve_settings(args, config: Config, environ: Mapping[str, str] | None = None) -> Config:
    """Resolve word sources, count and seed from args, env, or config.

    Precedence: CLI args > environment variables > config file
    """
    env = os.environ if environ is None else environ

    seed = args.seed
    if seed is None:
        env_seed, valid = parse_seed(env.get('SC_SEED'))
        if not valid:
            print_warning(f"Ignoring invalid SC_SEED={env['SC_SEED']!r}")
        seed = env_seed if env_seed is not None else config.seed

    count = args.count if args.count is not None else config.count

    return replace(
        config,
        names_file=args.names or env.get('SC_NAMES_FILE') or config.names_file,
        messages_file=args.messages or env.get('SC_MESSAGES_FILE') or config.messages_file,
        count=max(1, count),
        seed=seed,
    )


def _handle_subcommands(args, config: Config, settings: Config):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(PROG), True
    if args.display_config:
        return display_config(settings), True
    if args.save_config:
        # Only flags and the existing config are saved, never env overrides
        return run_save_config(_resolve_settings(args, config, environ={})), True
    return 0, False


def _print_verbose(message: GeneratedMessage) -> None:
    print(dim(f"  Name: {message.name}"), file=sys.stderr)
    print(dim(f"  Template: {message.template}"), file=sys.stderr)


def _copy_and_report(text: str) -> None:
    copied, reason = copy_to_clipboard(text)
    if copied:
        print(f"{success(CHECK)} Copied to clipboard!", file=sys.stderr)
    else:
        print(f"{warning('!')} Could not copy to clipboard: {reason}", file=sys.stderr)


def _generate_flow(args, settings: Config) -> int:
    """Load word lists, generate messages and print them.

    Returns:
        int: Exit code
    """
    try:
        names = load_names(settings.names_file)
        templates = load_messages(settings.messages_file)
    except SourceLoadError as e:
        print_error(str(e))
        return 1

    rng = random.Random(settings.seed)

    message = None
    for _ in range(settings.count):
        try:
            message = generate_message(names, templates, rng)
        except SelectionError as e:
            print_error(str(e))
            return 1
        if args.verbose:
            _print_verbose(message)
        print(message.text)

    if args.copy and message is not None:
        _copy_and_report(message.text)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Load config and apply CLI/env overrides
    config = load_config()
    settings = _resolve_settings(args, config)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args, config, settings)
    if should_exit:
        return exit_code

    return _generate_flow(args, settings)
