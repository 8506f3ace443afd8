# topmark:header:start
#
#   project      : SnipMark
#   file         : __main__.py
#   file_relpath : src/snipmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Allow ``python -m snipmark``."""

from snipmark.cli.main import cli

if __name__ == "__main__":
    cli()
