from trellis.stylesheet.parser import parse_stylesheet, parse_stylesheet_file
from trellis.stylesheet.model import Stylesheet, StyleRule

__all__ = ["parse_stylesheet", "parse_stylesheet_file", "Stylesheet", "StyleRule"]
