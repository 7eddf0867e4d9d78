from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import IO, Any, Optional, Union

# A single multipart part in the shape ``requests`` accepts for ``files=``
Part = tuple[str, Any]


def has_attachments(data: Optional[dict[str, Any]]) -> bool:
    return bool(data) and bool(data.get("attachments"))


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def prepare_multipart(data: dict[str, Any]) -> list[Part]:
    """Flatten a payload into multipart parts.

    Entries of ``attachments`` are passed through untouched; every other field
    becomes a plain form field. Lists are sent as repeated ``name[]`` fields,
    which is how Freshdesk reads arrays (tags, cc_emails, ...) in form bodies,
    and dicts (custom_fields) as ``name[key]`` fields.
    """
    parts: list[Part] = []
    for field, value in data.items():
        if field == "attachments":
            # a single attachment() entry passed without a list
            if isinstance(value, tuple) and value and isinstance(value[0], str):
                value = [value]
            parts.extend(value)
        elif value is None:
            continue
        elif isinstance(value, dict):
            for key, item in value.items():
                if item is not None:
                    parts.append((f"{field}[{key}]", (None, _form_value(item))))
        elif isinstance(value, (list, tuple)):
            for item in value:
                parts.append((f"{field}[]", (None, _form_value(item))))
        else:
            parts.append((field, (None, _form_value(value))))
    return parts


def attachment(
    file: Union[str, Path, IO[bytes]],
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    field: str = "attachments[]",
) -> Part:
    """Build an ``attachments`` entry from a path or an open binary file.

    Paths are opened here and left for the garbage collector to close once
    the request is sent; pass an open file to control its lifetime.
    """
    if isinstance(file, (str, Path)):
        path = Path(file)
        filename = filename or path.name
        file = path.open("rb")
    elif filename is None:
        filename = Path(getattr(file, "name", "attachment")).name
    if content_type is None:
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return (field, (filename, file, content_type))
