"""Per-field file metadata and its rendering for ls-style listings."""

__version__ = "0.1.0"
__all__ = [
    "access_control",
    "date",
    "filetype",
    "indicator",
    "name",
    "nodeinfo",
    "permissions",
    "size",
    "symlink",
]