"""rem-to-px: rewrite rem lengths in stylesheets as pixel values."""

__version__ = "0.1.0"

from rem_to_px.config import RemToPxConfig, load_config  # noqa: E402
from rem_to_px.errors import ConfigError, RemToPxError, StylesheetParseError  # noqa: E402
from rem_to_px.stylesheet import parse_stylesheet, serialize_stylesheet  # noqa: E402
from rem_to_px.transforms import RemToPxTransform, convert_css  # noqa: E402

__all__ = [
    "__version__",
    "RemToPxConfig",
    "load_config",
    "ConfigError",
    "RemToPxError",
    "StylesheetParseError",
    "parse_stylesheet",
    "serialize_stylesheet",
    "RemToPxTransform",
    "convert_css",
]
