"""Render a side-by-side HTML preview of a conversion."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, StrictUndefined

from .emitter import convert
from .io_utils import read_source, write_text
from .models import ConverterOptions

PREVIEW_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<meta name="viewport" content="width=device-width,initial-scale=1"/>
<title>{{ title }}</title>
<style>
body { font-family: sans-serif; margin: 0; display: flex; gap: 1em; padding: 1em; }
section { flex: 1; min-width: 0; }
pre { background: #f5f5f5; padding: 1em; overflow: auto; }
</style>
</head>
<body>
<section id="source">
<h2>HTML</h2>
<pre>{{ source }}</pre>
</section>
<section id="target">
<h2>Falco.Markup</h2>
<pre>{{ code }}</pre>
</section>
</body>
</html>
"""


def _environment() -> Environment:
    return Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined)


def render_preview(source: str, code: str, *, title: str = "falcogen preview") -> str:
    """Render the source markup and generated code into one page.

    Both values are HTML-escaped, so the page shows them verbatim.
    """

    template = _environment().from_string(PREVIEW_TEMPLATE.lstrip())
    return template.render(title=title, source=source, code=code) + "\n"


def write_preview(
    input_path: Path,
    out_path: Path,
    options: ConverterOptions,
    *,
    title: str,
    force: bool = False,
) -> Path:
    source = read_source(input_path)
    code = convert(source, options)
    return write_text(out_path, render_preview(source, code, title=title), force=force)


__all__ = ["render_preview", "write_preview"]
