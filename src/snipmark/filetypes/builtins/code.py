# topmark:header:start
#
#   project      : SnipMark
#   file         : code.py
#   file_relpath : src/snipmark/filetypes/builtins/code.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Curly-brace and compiled languages.

Exports:
    FILETYPES (list[FileType]): C, C++, C#, Go, Java, JavaScript, TypeScript,
        Kotlin, Scala, Groovy, Rust, Swift, CSS and SQL.

Notes:
    JVM languages honor ``-with-copyright`` start markers: every line preceding
    the ``package`` declaration is captured as the copyright preamble.
"""

from __future__ import annotations

from ..base import DecoderVariant, FileType

_PACKAGE_DECLARATION: str = r"^\s*package\b"

FILETYPES: list[FileType] = [
    FileType(
        name="c",
        extensions=[".c", ".h"],
        filenames=[],
        patterns=[],
        description="C sources and headers (*.c, *.h)",
    ),
    FileType(
        name="cpp",
        extensions=[".cc", ".cxx", ".cpp", ".hh", ".hpp", ".hxx"],
        filenames=[],
        patterns=[],
        description="C++ sources and headers (*.cc, *.cxx, *.cpp, *.hh, *.hpp, *.hxx)",
    ),
    FileType(
        name="cs",
        extensions=[".cs"],
        filenames=[],
        patterns=[],
        description="C# sources (*.cs)",
    ),
    FileType(
        name="go",
        extensions=[".go"],
        filenames=[],
        patterns=[],
        description="Go sources (*.go)",
    ),
    FileType(
        name="java",
        extensions=[".java"],
        filenames=[],
        patterns=[],
        description="Java sources (*.java)",
        variant=DecoderVariant.CODE_WITH_COPYRIGHT,
        preamble_end_regex=_PACKAGE_DECLARATION,
    ),
    FileType(
        name="javascript",
        extensions=[".js", ".mjs", ".cjs", ".jsx"],
        filenames=[],
        patterns=[],
        description="JavaScript sources (*.js, *.mjs, *.cjs, *.jsx)",
    ),
    FileType(
        name="typescript",
        extensions=[".ts", ".tsx"],
        filenames=[],
        patterns=[],
        description="TypeScript sources (*.ts, *.tsx)",
    ),
    FileType(
        name="kotlin",
        extensions=[".kt", ".kts"],
        filenames=[],
        patterns=[],
        description="Kotlin sources (*.kt, *.kts)",
        variant=DecoderVariant.CODE_WITH_COPYRIGHT,
        preamble_end_regex=_PACKAGE_DECLARATION,
    ),
    FileType(
        name="scala",
        extensions=[".scala", ".sc"],
        filenames=[],
        patterns=[],
        description="Scala sources (*.scala, *.sc)",
        variant=DecoderVariant.CODE_WITH_COPYRIGHT,
        preamble_end_regex=_PACKAGE_DECLARATION,
    ),
    FileType(
        name="groovy",
        extensions=[".groovy", ".gradle"],
        filenames=[],
        patterns=[],
        description="Groovy sources and Gradle scripts (*.groovy, *.gradle)",
        variant=DecoderVariant.CODE_WITH_COPYRIGHT,
        preamble_end_regex=_PACKAGE_DECLARATION,
    ),
    FileType(
        name="rust",
        extensions=[".rs"],
        filenames=[],
        patterns=[],
        description="Rust sources (*.rs)",
    ),
    FileType(
        name="swift",
        extensions=[".swift"],
        filenames=[],
        patterns=[],
        description="Swift sources (*.swift)",
    ),
    FileType(
        name="css",
        extensions=[".css"],
        filenames=[],
        patterns=[],
        description="Cascading Style Sheets (*.css)",
    ),
    FileType(
        name="sql",
        extensions=[".sql"],
        filenames=[],
        patterns=[],
        description="SQL scripts (*.sql)",
    ),
]
