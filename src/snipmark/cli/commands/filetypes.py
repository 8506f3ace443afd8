# topmark:header:start
#
#   project      : SnipMark
#   file         : filetypes.py
#   file_relpath : src/snipmark/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""SnipMark `filetypes` command.

Lists the registered file types, the marker decoder bound to each, and the
start-marker variant it honors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snipmark.cli.cmd_common import get_console, get_effective_verbosity
from snipmark.filetypes.base import DecoderVariant
from snipmark.filetypes.instances import get_file_type_registry
from snipmark.filetypes.registry import get_decoder_registry
from snipmark.pipeline.decoders import register_all_decoders

if TYPE_CHECKING:
    from snipmark.filetypes.base import FileType
    from snipmark.pipeline.decoders.base import MarkerDecoder


@click.command(
    name="filetypes",
    help="List the supported file types and their marker decoders.",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extensions, filenames, patterns and variant details.",
)
def filetypes_command(*, show_details: bool = False) -> None:
    """List supported file types."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    register_all_decoders()
    file_types: dict[str, FileType] = get_file_type_registry()
    decoders: dict[str, MarkerDecoder] = get_decoder_registry()

    if vlevel > 0:
        console.print(console.styled("Supported file types:\n", bold=True, underline=True))

    width: int = max((len(k) for k in file_types), default=1)
    num_width: int = len(str(len(file_types)))
    for idx, (name, ft) in enumerate(sorted(file_types.items()), start=1):
        decoder: MarkerDecoder | None = decoders.get(name)
        decoder_name: str = type(decoder).__name__ if decoder else "(no decoder)"
        descr: str = console.styled(ft.description, dim=True)
        console.print(f"{idx:>{num_width}}. {name:<{width}}  {decoder_name}  {descr}")
        if not show_details:
            continue
        if ft.extensions:
            console.print(f"      extensions : {', '.join(ft.extensions)}")
        if ft.filenames:
            console.print(f"      filenames  : {', '.join(ft.filenames)}")
        if ft.patterns:
            console.print(f"      patterns   : {', '.join(ft.patterns)}")
        if ft.variant is not DecoderVariant.PLAIN:
            console.print(f"      variant    : {ft.variant.value}")
        if ft.preamble_end_regex:
            console.print(f"      preamble   : ends at /{ft.preamble_end_regex}/")
