"""Mapping from judge language names to source file extensions."""

DEFAULT_EXTENSION = "txt"

LANGUAGE_EXTENSIONS: dict[str, str] = {
    "bash": "sh",
    "c": "c",
    "cpp": "cpp",
    "csharp": "cs",
    "dart": "dart",
    "elixir": "ex",
    "erlang": "erl",
    "golang": "go",
    "java": "java",
    "javascript": "js",
    "kotlin": "kt",
    "mssql": "sql",
    "mysql": "sql",
    "oraclesql": "sql",
    "php": "php",
    "postgresql": "sql",
    "python": "py",
    "python3": "py",
    "racket": "rkt",
    "ruby": "rb",
    "rust": "rs",
    "scala": "scala",
    "swift": "swift",
    "typescript": "ts",
}


def extension_for(language: str) -> str:
    """Return the file extension for a language, falling back to "txt"."""
    return LANGUAGE_EXTENSIONS.get(language, DEFAULT_EXTENSION)
