"""
Описание исходящего HTTP запроса.

RequestSpec создается один раз, передается в DumpClient.execute() и больше
не изменяется.
"""

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .exceptions import ConfigurationError

SUPPORTED_METHODS = ("GET", "POST")

HeadersInput = Union[Mapping[str, str], Iterable[str], None]


def parse_header_lines(lines: Iterable[str]) -> Dict[str, str]:
    """
    Разобрать заголовки в формате curl ("Name: value").

    Args:
        lines: Строки заголовков

    Returns:
        Упорядоченный словарь имя -> значение

    Raises:
        ConfigurationError: Строка без двоеточия или с пустым именем

    Example:
        >>> parse_header_lines(["Content-Type: application/json", "Accept: text/html"])
        {'Content-Type': 'application/json', 'Accept': 'text/html'}
    """
    headers: Dict[str, str] = {}
    for line in lines:
        name, sep, value = line.partition(":")
        name = name.strip()
        if not sep or not name:
            raise ConfigurationError(f"Invalid header line: {line!r}")
        headers[name] = value.strip()
    return headers


def encode_fields(fields: Mapping[str, Any]) -> str:
    """
    Сериализовать поля POST запроса в компактный JSON.

    Порядок ключей сохраняется.

    Example:
        >>> encode_fields({"name": "John", "surname": "Doe"})
        '{"name":"John","surname":"Doe"}'
    """
    return json.dumps(dict(fields), separators=(",", ":"), ensure_ascii=False)


def decode_fields(text: str) -> Dict[str, Any]:
    """
    Обратная операция к encode_fields().

    Raises:
        ConfigurationError: Текст не является JSON объектом
    """
    try:
        value = json.loads(text)
    except ValueError as e:
        raise ConfigurationError(f"Invalid JSON payload: {e}") from e
    if not isinstance(value, dict):
        raise ConfigurationError("JSON payload must be an object")
    return value


def _normalize_headers(headers: HeadersInput) -> Mapping[str, str]:
    if headers is None:
        return MappingProxyType({})
    if isinstance(headers, Mapping):
        items = {str(k).strip(): str(v).strip() for k, v in headers.items()}
        if any(not name for name in items):
            raise ConfigurationError("Header name must not be empty")
        return MappingProxyType(items)
    if isinstance(headers, str):
        return MappingProxyType(parse_header_lines([headers]))
    return MappingProxyType(parse_header_lines(headers))


@dataclass(frozen=True)
class RequestSpec:
    """
    Immutable описание одного запроса.

    Args:
        url: Полный URL (http:// или https://)
        method: GET или POST
        headers: Заголовки (словарь или строки "Name: value")
        body: Тело запроса (только для POST)
        include_headers: Включать статус и заголовки ответа в захваченный текст

    Examples:
        >>> RequestSpec.get("http://swapi.co/api/people/")
        >>> RequestSpec.post(
        ...     "http://swapi.co/api/people/",
        ...     {"name": "John", "surname": "Doe"},
        ...     headers=["Content-Type: application/json"],
        ... )
    """
    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    body: Optional[str] = None
    include_headers: bool = False

    def __post_init__(self):
        """Валидация и нормализация."""
        if not self.url or not self.url.startswith(("http://", "https://")):
            raise ConfigurationError(f"URL must start with http:// or https://: {self.url!r}")

        method = (self.method or "").upper()
        if method not in SUPPORTED_METHODS:
            raise ConfigurationError(
                f"Unsupported method: {self.method!r}. "
                f"Available: {', '.join(SUPPORTED_METHODS)}"
            )
        if method == "GET" and self.body is not None:
            raise ConfigurationError("GET request must not have a body")

        # frozen dataclass - обходим через object.__setattr__
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "headers", _normalize_headers(self.headers))

    @classmethod
    def get(
        cls,
        url: str,
        headers: HeadersInput = None,
        include_headers: bool = False
    ) -> "RequestSpec":
        """Создать GET запрос."""
        return cls(url=url, method="GET", headers=headers, include_headers=include_headers)

    @classmethod
    def post(
        cls,
        url: str,
        fields: Mapping[str, Any],
        headers: HeadersInput = None,
        include_headers: bool = False
    ) -> "RequestSpec":
        """Создать POST запрос с JSON телом из полей."""
        return cls(
            url=url,
            method="POST",
            headers=headers,
            body=encode_fields(fields),
            include_headers=include_headers,
        )

    def header_lines(self) -> List[str]:
        """Заголовки в формате curl."""
        return [f"{name}: {value}" for name, value in self.headers.items()]
