"""Renderings of a built tree: nested mapping/JSON and glyph lines."""

from .glyph_renderer import render_glyph_tree, stream_glyph_lines
from .serializer import dump_json, load_json, parse_tree, serialize_tree

__all__ = ["dump_json", "load_json", "parse_tree", "render_glyph_tree", "serialize_tree", "stream_glyph_lines"]
