# topmark:header:start
#
#   project      : SnipMark
#   file         : __init__.py
#   file_relpath : src/snipmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""SnipMark configuration layer.

The package is split so that low-level modules (logging, diagnostics) can import
``snipmark.config.logging`` without pulling in the whole configuration model:

* [`snipmark.config.model`][]: the immutable `Config` snapshot and its
  `MutableConfig` builder;
* [`snipmark.config.loaders`][]: TOML discovery, parsing and rendering (tomlkit);
* [`snipmark.config.keys`][]: the external TOML schema;
* [`snipmark.config.logging`][]: logger setup shared by every module.
"""
