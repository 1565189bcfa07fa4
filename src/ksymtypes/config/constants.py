"""Configuration constants.

Values fixed by the symtypes file format or by the output format. These are
not user-configurable; for configurable values see models.py.
"""

# =============================================================================
# Declaration File Format
# =============================================================================

SYMTYPES_SUFFIX = ".symtypes"
"""Extension of the declaration files produced by genksyms."""

TYPEREF_MARKER = "#"
"""Second character of a word that refers to another declared type (s#foo)."""

# =============================================================================
# Output
# =============================================================================

INDENT = "\t"
"""One indentation level in pretty-formatted declarations."""

DIFF_CONTEXT_MAX = 100
"""Maximum context lines accepted for diff rendering."""
