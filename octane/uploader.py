"""Anonymising report data and sending it to a collection server."""

from __future__ import annotations

import dataclasses
import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

_ANONYMOUS_ID = "anonymous"
_ANONYMOUS_EMAIL = "anonymous@example.com"
_ANONYMOUS_NAME = "Anonymous User"


@dataclass(frozen=True)
class AnonymizeData:
    """Identifying details of the person who ran a test."""

    user_id: str = ""
    user_email: str = ""
    user_name: str = ""


def anonymize(data: AnonymizeData) -> AnonymizeData:
    """Return the anonymous stand-in for any user details."""
    return AnonymizeData(user_id=_ANONYMOUS_ID, user_email=_ANONYMOUS_EMAIL, user_name=_ANONYMOUS_NAME)


def anonymize_json(json_data: str) -> str:
    """Anonymise user details given as a JSON object and return compact JSON.

    Raises ValueError when the input is not a JSON object whose user fields are strings.
    """
    parsed = json.loads(json_data)
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
    for f in dataclasses.fields(AnonymizeData):
        if f.name in parsed and parsed[f.name] is not None and not isinstance(parsed[f.name], str):
            raise ValueError(f"{f.name}: expected a string, got {type(parsed[f.name]).__name__}")
    source = AnonymizeData(**{
        f.name: parsed[f.name] or "" for f in dataclasses.fields(AnonymizeData) if f.name in parsed
    })
    return json.dumps(dataclasses.asdict(anonymize(source)), separators=(",", ":"), ensure_ascii=False)


def anonymize_string(text: str) -> str:
    """Replace the user field names in text with their anonymous values."""
    text = text.replace("user_id", _ANONYMOUS_ID)
    text = text.replace("user_email", _ANONYMOUS_EMAIL)
    return text.replace("user_name", _ANONYMOUS_NAME)


class UploadError(Exception):
    """The server answered an upload with a status other than 200 OK."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        try:
            reason = HTTPStatus(status_code).phrase
        except ValueError:
            reason = ""
        message = f"failed to upload data, status code: {status_code}"
        super().__init__(f"{message} ({reason})" if reason else message)


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        to_dict = getattr(obj, "to_dict", None)
        return to_dict() if callable(to_dict) else dataclasses.asdict(obj)
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serialisable")


@dataclass
class Uploader:
    """Posts data as JSON to ``server_url``, waiting at most ``timeout`` seconds."""

    server_url: str
    timeout: float = 10.0

    def upload(self, data: Any) -> None:
        """Send data as a JSON POST request.

        Raises TypeError when the data cannot be encoded, UploadError when the
        server does not answer 200, and OSError when the server cannot be reached.
        """
        body = json.dumps(data, default=_json_default).encode("utf-8")
        request = urllib.request.Request(
            self.server_url,
            data=body,
            method="POST",
            headers={"Content-Type": "application/json"},
        )
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                status = response.status
        except urllib.error.HTTPError as exc:
            status = exc.code
            exc.close()
        if status != HTTPStatus.OK:
            raise UploadError(status)