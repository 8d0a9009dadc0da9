"""
Silly Commit

Random, silly commit messages built from a list of names and a list of
message templates.
"""

__version__ = "1.0.0"

# Centralized placeholder tokens - single source of truth
# Used by: generator/placeholders.py (substitution), cli/commands.py (help text)
NAME_TOKEN = 'XNAMEX'
UPPER_NAME_TOKEN = 'XUPPERNAMEX'
LOWER_NAME_TOKEN = 'XLOWERNAMEX'

# XNUM<spec>X where <spec> is digits and commas, e.g. XNUMX, XNUM10X, XNUM5,20X
NUMBER_TOKEN_PATTERN = r'XNUM([0-9,]*)X'

# Default bounds for number placeholders
DEFAULT_NUMBER_START = 1
DEFAULT_NUMBER_END = 999

# Bounds are 32-bit unsigned; wider specifiers fall back to the default bound
MAX_NUMBER = 2 ** 32 - 1

# Placeholder reference, in the order the name tokens are replaced
PLACEHOLDERS = {
    UPPER_NAME_TOKEN: 'The chosen name in UPPERCASE',
    LOWER_NAME_TOKEN: 'The chosen name in lowercase',
    NAME_TOKEN: 'The chosen name as written',
    'XNUMX': f'A number from {DEFAULT_NUMBER_START} to {DEFAULT_NUMBER_END}',
    'XNUM50X': f'A number from {DEFAULT_NUMBER_START} to 50',
    'XNUM5,20X': 'A number from 5 to 20',
    'XNUM5,X': f'A number from 5 to {DEFAULT_NUMBER_END}',
}
