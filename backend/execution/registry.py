"""
Supported language identifiers
"""

SUPPORTED_LANGUAGES = frozenset({
    'c', 'cpp', 'python', 'javascript',
    'typescript', 'java', 'php', 'go',
    'html', 'css',
})

# Languages backed by a real toolchain; the rest are simulated
EXECUTABLE_LANGUAGES = frozenset({
    'c', 'cpp', 'python', 'javascript',
    'typescript', 'java', 'php', 'go',
})


def normalize_language(language: str) -> str:
    """Lowercase and trim a language id so lookups are case-insensitive"""
    return language.lower().strip()


def is_supported_language(language: str) -> bool:
    """
    Check if a language is supported

    Args:
        language: Raw language id from the request (any case, may be padded)

    Returns:
        True if the normalized id is one of the supported languages
    """
    if not isinstance(language, str):
        return False
    return normalize_language(language) in SUPPORTED_LANGUAGES
