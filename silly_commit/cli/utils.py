"""CLI Utility Functions"""

import shutil
import subprocess
import sys

# Clipboard writers per platform, tried in order
CLIPBOARD_COMMANDS = {
    'win32': [['clip']],
    'darwin': [['pbcopy']],
    'linux': [
        ['wl-copy'],
        ['xclip', '-selection', 'clipboard'],
        ['xsel', '--clipboard', '--input'],
    ],
}


def copy_to_clipboard(text: str) -> tuple[bool, str]:
    """Put a generated message on the clipboard, ready for ``git commit -m``.

    Returns (success, failure_reason). The message is copied without a
    trailing newline so pasting it doesn't submit a shell prompt early.
    """
    candidates = CLIPBOARD_COMMANDS.get(sys.platform, CLIPBOARD_COMMANDS['linux'])
    available = [cmd for cmd in candidates if shutil.which(cmd[0])]
    if not available:
        tools = ', '.join(cmd[0] for cmd in candidates)
        return False, f"No clipboard tool found (tried {tools})"

    command = available[0]
    try:
        subprocess.run(command, input=text.rstrip('\n').encode('utf-8'), check=True)
    except (subprocess.CalledProcessError, OSError) as e:
        return False, f"{command[0]} failed: {e}"
    return True, ""


def parse_seed(value: str | None) -> tuple[int | None, bool]:
    """Parse a seed from the environment. Returns (seed, valid)."""
    if value is None or value == '':
        return None, True
    try:
        return int(value), True
    except ValueError:
        return None, False
