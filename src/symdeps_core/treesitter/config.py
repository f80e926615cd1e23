"""
Tree-sitter configuration module.

Maps source file extensions to the tree-sitter-language-pack grammars used
for decorator metadata extraction.
"""

from typing import Dict, Optional, Tuple


# =============================================================================
# LANGUAGE EXTENSIONS MAPPING
# =============================================================================
# Grammar name -> file extensions. Only languages with class decorators are
# listed; TSX needs its own grammar because of JSX syntax.

LANGUAGE_EXTENSIONS: Dict[str, Tuple[str, ...]] = {
    "typescript": (".ts", ".mts", ".cts"),
    "tsx": (".tsx",),
    "javascript": (".js", ".jsx", ".mjs", ".cjs"),
}


# =============================================================================
# EXTENSION TO LANGUAGE MAPPING (Reverse Lookup)
# =============================================================================

EXTENSION_TO_LANGUAGE: Dict[str, str] = {
    ext: lang
    for lang, extensions in LANGUAGE_EXTENSIONS.items()
    for ext in extensions
}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_language_by_extension(extension: str) -> Optional[str]:
    """
    Get the grammar name for a given file extension.

    Args:
        extension: File extension (with or without leading dot).
                   Examples: ".ts", "ts", ".tsx"

    Returns:
        Grammar name if found, None otherwise.

    Examples:
        >>> get_language_by_extension(".ts")
        'typescript'
        >>> get_language_by_extension("tsx")
        'tsx'
        >>> get_language_by_extension(".py")
        None
    """
    if not extension.startswith("."):
        extension = f".{extension}"

    return EXTENSION_TO_LANGUAGE.get(extension.lower())


def is_supported_language(language: str) -> bool:
    """Check if a grammar name is configured. Case-sensitive."""
    return language in LANGUAGE_EXTENSIONS


def is_supported_extension(extension: str) -> bool:
    """
    Check if a file extension is supported.

    Examples:
        >>> is_supported_extension(".ts")
        True
        >>> is_supported_extension("py")
        False
    """
    return get_language_by_extension(extension) is not None
