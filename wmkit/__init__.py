"""Status-line readings and tiling layout geometry for minimal desktops."""

__version__ = "1.0.0"

__all__ = [
    "util",
    "power",
    "cpu",
    "files",
    "system",
    "memory",
    "network",
    "layout_model",
    "layouts",
    "status",
]