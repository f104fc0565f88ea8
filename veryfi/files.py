"""Helpers that turn local files and URLs into request arguments."""

import base64
import logging
from pathlib import Path

from veryfi.constants import FILE_DATA, FILE_NAME, FILE_URL, FILE_URLS

logger = logging.getLogger(__name__)


def get_file_extension(file_path: str | Path) -> str:
    """Extension without the dot, or "" when the name has none."""
    name = Path(file_path).name
    dot = name.rfind(".")
    if 0 < dot < len(name) - 1:
        return name[dot + 1 :]
    return ""


def get_uri_prefix(file_path: str | Path) -> str:
    extension = get_file_extension(file_path) or "png"
    return f"data:image/{extension};base64,"


def get_base64_file_content(file_path: str | Path, with_prefix: bool = True) -> str:
    """
    Read a file and encode it as base64.

    Args:
        file_path: Path to the file
        with_prefix: Prepend a data URI prefix derived from the extension

    Returns:
        Base64 string, optionally prefixed with e.g. "data:image/jpeg;base64,"

    Raises:
        OSError: If the file cannot be read
    """
    content = base64.b64encode(Path(file_path).read_bytes()).decode("utf-8")
    if with_prefix:
        return get_uri_prefix(file_path) + content
    return content


def add_file_to_parameters(file_name: str, file_data: str, parameters: dict | None = None) -> dict:
    arguments = dict(parameters or {})
    arguments[FILE_NAME] = file_name
    arguments[FILE_DATA] = file_data
    return arguments


def add_file_path_to_parameters(
    file_path: str | Path,
    parameters: dict | None = None,
    with_prefix: bool = False,
) -> dict:
    """
    Read a file from disk into file_name/file_data arguments.

    An unreadable file is logged and sent with empty file_data so the API
    reports the problem.
    """
    path = Path(file_path)
    try:
        file_data = get_base64_file_content(path, with_prefix=with_prefix)
    except OSError as e:
        logger.error("Could not read %s: %s", path, e)
        file_data = ""
    return add_file_to_parameters(path.name, file_data, parameters)


def add_url_to_parameters(
    file_url: str | None,
    file_urls: list[str] | None = None,
    parameters: dict | None = None,
) -> dict:
    arguments = dict(parameters or {})
    arguments[FILE_URL] = file_url
    if file_urls is not None:
        arguments[FILE_URLS] = list(file_urls)
    return arguments
