"""Convert HTML markup into Falco.Markup F# code."""

from .emitter import convert, emit_document, emit_node, escape_string, map_attributes
from .models import ConverterOptions

__all__ = ["ConverterOptions", "convert", "emit_document", "emit_node", "escape_string", "map_attributes"]
