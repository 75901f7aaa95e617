"""
Formatter for Modelica (``.mo``) source files.

The package is organised into several modules:

* ``formatting`` – the five-stage text pipeline (preprocess, indent,
  normalize, corrective re-indent, cleanup) and its options model.
* ``host`` – the language registration, pass-through document and option
  schema a pretty-printing host needs to drive the formatter.
* ``config`` – workspace configuration discovery for the CLI.
* ``metadata_sync`` – keeps grammar manifest metadata in step with the
  package manifest.
* ``cli`` – the ``modelica-format`` command line interface.

Typical use::

    from modelica_format import format_text

    formatted = format_text(source, {"tabWidth": 4})
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import FormatterError, FormatOptionsError
from .formatting import FormatOptions, FormattedResult, ModelicaFormatter, format_text

__all__ = [
    "__version__",
    "FormatterError",
    "FormatOptionsError",
    "FormatOptions",
    "FormattedResult",
    "ModelicaFormatter",
    "format_text",
]
