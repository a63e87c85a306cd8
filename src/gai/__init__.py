"""gai: generate commit, stash and pull request messages with AI.

The CLI entry point lives in ``gai.cli.cli``. See ``gai --help`` for details.
"""

__version__ = "1.0.2"
