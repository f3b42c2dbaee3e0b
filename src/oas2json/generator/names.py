"""Turn schema keys and declared names into stable, filesystem-safe stems."""

import re

RESERVED_CHARS_RE = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
WINDOWS_RESERVED_RE = re.compile(r"^(con|prn|aux|nul|com\d|lpt\d)$", re.IGNORECASE)
INVALID_URI_CHARS_RE = re.compile(r"[^a-zA-Z0-9\-._~:/?#\[\]@!$&'()*+,;=]")
MAX_FILENAME_LENGTH = 100


def sanitize_filename(value: str, replacement: str = "!") -> str:
    """Replace characters that are not allowed in a file name."""
    result = RESERVED_CHARS_RE.sub(replacement, value)
    if replacement:
        repeated = re.escape(replacement)
        result = re.sub(f"(?:{repeated}){{2,}}", replacement, result)
    if re.fullmatch(r"\.+", result):
        result = replacement
    if WINDOWS_RESERVED_RE.match(result):
        result += replacement
    return result[:MAX_FILENAME_LENGTH]


def format_file_name(value: str) -> str:
    """Final canonical pass: whitespace runs become `_`, no trailing dots."""
    return re.sub(r"\s+", "_", value.strip()).rstrip(".")


def get_filename(name: str) -> str:
    """Filename stem for a schema called `name`."""
    return format_file_name(sanitize_filename(name, replacement="-").lstrip("-"))


def strip_uri_chars(value: str) -> str:
    """Drop every character that may not appear unescaped in a URI."""
    return INVALID_URI_CHARS_RE.sub("", value)


def path_folder(endpoint: str) -> str:
    """Output folder for a URL template: `/widgets/{id}` -> `widgets/id`."""
    return strip_uri_chars(endpoint).strip("/")


def flatten_path(endpoint: str) -> str:
    """Single-segment stem for a URL template: `/widgets/{id}` -> `_widgets_id`."""
    return strip_uri_chars(endpoint).replace("/", "_")
