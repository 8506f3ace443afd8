# topmark:header:start
#
#   project      : SnipMark
#   file         : scripting.py
#   file_relpath : src/snipmark/filetypes/builtins/scripting.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Scripting languages and line-oriented configuration formats.

Exports:
    FILETYPES (list[FileType]): Python, shell, Ruby, Perl, R, Lua, Makefile,
        Dockerfile, YAML, TOML and INI-style files.

Notes:
    Python honors ``-with-copyright`` start markers; the preamble is everything
    above the first ``import`` statement (shebang, license comment, module docstring).
"""

from __future__ import annotations

from ..base import DecoderVariant, FileType

FILETYPES: list[FileType] = [
    FileType(
        name="python",
        extensions=[".py", ".pyi"],
        filenames=[],
        patterns=[],
        description="Python sources and stubs (*.py, *.pyi)",
        variant=DecoderVariant.CODE_WITH_COPYRIGHT,
        preamble_end_regex=r"^\s*(import|from)\s",
    ),
    FileType(
        name="shell",
        extensions=[".sh", ".bash", ".zsh"],
        filenames=[],
        patterns=[],
        description="Shell scripts (*.sh, *.bash, *.zsh)",
    ),
    FileType(
        name="ruby",
        extensions=[".rb"],
        filenames=["Rakefile", "Gemfile"],
        patterns=[],
        description="Ruby sources (*.rb, Rakefile, Gemfile)",
    ),
    FileType(
        name="perl",
        extensions=[".pl", ".pm"],
        filenames=[],
        patterns=[],
        description="Perl sources (*.pl, *.pm)",
    ),
    FileType(
        name="r",
        extensions=[".r", ".R"],
        filenames=[],
        patterns=[],
        description="R sources (*.r, *.R)",
    ),
    FileType(
        name="lua",
        extensions=[".lua"],
        filenames=[],
        patterns=[],
        description="Lua sources (*.lua)",
    ),
    FileType(
        name="makefile",
        extensions=[".mk"],
        filenames=["Makefile", "makefile", "GNUmakefile"],
        patterns=[],
        description="Makefiles (Makefile, *.mk)",
    ),
    FileType(
        name="dockerfile",
        extensions=[],
        filenames=["Dockerfile"],
        patterns=[r"Dockerfile\..+", r".+\.Dockerfile"],
        description="Dockerfiles",
    ),
    FileType(
        name="yaml",
        extensions=[".yaml", ".yml"],
        filenames=[],
        patterns=[],
        description="YAML documents (*.yaml, *.yml)",
    ),
    FileType(
        name="toml",
        extensions=[".toml"],
        filenames=[],
        patterns=[],
        description="TOML documents (*.toml)",
    ),
    FileType(
        name="ini",
        extensions=[".ini", ".cfg", ".properties"],
        filenames=[],
        patterns=[],
        description="INI-style configuration files (*.ini, *.cfg, *.properties)",
    ),
]
