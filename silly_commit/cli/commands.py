"""CLI Commands"""

import os
from dataclasses import replace
from pathlib import Path

from silly_commit import PLACEHOLDERS
from silly_commit.config import Config, get_config_path, save_config
from silly_commit.output import bold, dim, info, print_success

ENV_VARS = ('SC_NAMES_FILE', 'SC_MESSAGES_FILE', 'SC_SEED')

# Shell -> (rc file, line that enables completion); {cmd} is the register command
COMPLETION_SETUP = {
    'zsh': ('~/.zshrc', 'eval "$({cmd})"'),
    'bash': ('~/.bashrc', 'eval "$({cmd})"'),
    'fish': ('~/.config/fish/config.fish', '{cmd} --shell fish | source'),
    'pwsh': ('$PROFILE', '{cmd} --shell powershell | Out-String | Invoke-Expression'),
}


def display_config(config: Config) -> int:
    """Display current configuration."""
    config_path = get_config_path()
    source = config_path or "defaults (no .sillyrc found)"

    print(f"\n{bold('Current Configuration')}\n")
    print(f"  {dim('Loaded from:')} {source}")

    overrides = [(name, os.environ[name]) for name in ENV_VARS if os.environ.get(name)]
    if overrides:
        print(f"  {dim('Environment overrides:')}")
        for name, value in overrides:
            print(f"    {name}={value}")

    settings = {
        'names_file': config.names_file or 'bundled',
        'messages_file': config.messages_file or 'bundled',
        'count': str(config.count),
        'seed': 'random' if config.seed is None else str(config.seed),
    }
    print(f"\n  {bold('Settings:')}")
    for key, value in settings.items():
        print(f"    {key + ':':<15}{info(value)}")

    print(f"\n  {bold('Placeholders:')}")
    for token, description in PLACEHOLDERS.items():
        print(f"    {token:<14}{dim(description)}")

    print(f"\n  {dim('Config is read from ./.sillyrc, then ~/.sillyrc')}\n")
    return 0


def _absolute(path: str | None) -> str | None:
    if path is None:
        return None
    return str(Path(path).expanduser().resolve())


def run_save_config(config: Config) -> int:
    """Persist settings to ~/.sillyrc.

    Word list paths are stored absolute so the saved config works from any
    directory.
    """
    config = replace(
        config,
        names_file=_absolute(config.names_file),
        messages_file=_absolute(config.messages_file),
    )
    path = save_config(config, global_config=True)
    print_success(f"Saved to {path}")
    return 0


def run_install_completion(prog: str) -> int:
    """Print the line that enables tab completion for the current shell."""
    register = f"register-python-argcomplete {prog}"
    shell = Path(os.environ.get('SHELL', '')).name

    print(f"\n{bold('Tab Completion Setup')}\n")

    if shell in COMPLETION_SETUP:
        shells = [shell]
    else:
        print("Add the line for your shell to its startup file:\n")
        shells = list(COMPLETION_SETUP)

    for name in shells:
        rc_file, line = COMPLETION_SETUP[name]
        print(f"  {dim('# ' + name + ' (' + rc_file + ')')}")
        print(f"  {line.format(cmd=register)}\n")

    print(dim('Then open a new shell and press TAB to autocomplete flags.'))
    return 0
