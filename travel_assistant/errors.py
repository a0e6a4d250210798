from typing import Iterable, Optional

from httpx import HTTPStatusError


class ApiError(Exception):
    """Error rendered to the client as ``{"error": ..., "mensaje": ...}``."""

    status_code = 500

    def __init__(self, error: str, mensaje: Optional[str] = None):
        super().__init__(error)
        self.error = error
        self.mensaje = mensaje


class BadRequestError(ApiError):
    """Missing or invalid request input."""

    status_code = 400


class ConfigurationError(ApiError):
    """A required credential or setting is not configured."""


class UpstreamError(ApiError):
    """An upstream API call failed (transport, status or malformed body)."""


def missing_parameters_message(names: Iterable[str]) -> str:
    """Build the Spanish message naming the missing request parameters."""
    unique = list(dict.fromkeys(names))
    if not unique:
        return "Parámetros inválidos"
    if len(unique) == 1:
        return f"Se requiere el parámetro {unique[0]}"
    return f"Se requieren los parámetros {', '.join(unique[:-1])} y {unique[-1]}"


def upstream_message(exc: Exception) -> str:
    """Describe an upstream failure without echoing the request URL.

    Status errors carry the full URL, which for OpenWeather includes the
    API key, so only the status code is reported for them.
    """
    if isinstance(exc, HTTPStatusError):
        return f"Request failed with status code {exc.response.status_code}"
    return str(exc) or type(exc).__name__
