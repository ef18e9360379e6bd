"""
Иерархия исключений http-dump.

Классификация:
- TransportError - запрос не дошел до сервера или ответ не получен
- ConfigurationError - невалидное описание запроса или конфиг клиента

HTTP статусы (4xx/5xx) ошибками не считаются: тело ответа выводится как есть.
"""

from typing import Optional
import requests

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HTTPDumpException(Exception):
    """Базовое исключение http-dump."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ТРАНСПОРТНЫЕ ОШИБКИ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TransportError(HTTPDumpException):
    """
    Сетевая ошибка: ответ от сервера не получен.

    Args:
        message: Сообщение об ошибке
        url: URL запроса
        cause: Исходное исключение requests
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        cause: Optional[BaseException] = None
    ):
        self.url = url
        self.cause = cause
        full_message = f"{message}"
        if url:
            full_message += f" (url: {url})"
        super().__init__(full_message)

class TimeoutError(TransportError):
    """
    Таймаут запроса.

    Args:
        message: Сообщение об ошибке
        url: URL запроса
        timeout_type: Тип таймаута ('connect' или 'read')
        cause: Исходное исключение
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        timeout_type: Optional[str] = None,
        cause: Optional[BaseException] = None
    ):
        self.timeout_type = timeout_type

        msg = message
        if timeout_type:
            msg += f" ({timeout_type} timeout)"

        super().__init__(msg, url, cause)

class ConnectionError(TransportError):
    """
    Ошибка подключения.

    Примеры:
    - Connection refused
    - Connection reset
    - Network unreachable
    """
    pass

class DNSError(ConnectionError):
    """DNS resolution failed."""
    pass

class ProxyError(ConnectionError):
    """Ошибка прокси."""
    pass

class SSLError(ConnectionError):
    """Ошибка TLS рукопожатия или проверки сертификата."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# КОНФИГУРАЦИЯ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ConfigurationError(HTTPDumpException):
    """Ошибка конфигурации или описания запроса."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# УТИЛИТЫ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
    "temporary failure in name resolution",
    "failed to resolve",
    "no address associated",
)


def _looks_like_dns_failure(exc: Exception) -> bool:
    """Проверить текст ошибки на признаки неудачного DNS резолва."""
    text = str(exc).lower()
    return any(marker in text for marker in _DNS_MARKERS)


def classify_requests_exception(
    exc: Exception,
    url: str
) -> HTTPDumpException:
    """
    Конвертировать requests.exceptions в наши исключения.

    Args:
        exc: Исключение из requests
        url: URL запроса

    Returns:
        Наше исключение с правильной классификацией

    Examples:
        >>> exc = requests.exceptions.ConnectTimeout()
        >>> our_exc = classify_requests_exception(exc, "http://swapi.co/api/people/")
        >>> assert isinstance(our_exc, TimeoutError)
        >>> assert our_exc.timeout_type == "connect"
    """

    # ConnectTimeout наследует и Timeout и ConnectionError - проверяем первым
    if isinstance(exc, requests.exceptions.ConnectTimeout):
        return TimeoutError("Request timeout", url, timeout_type="connect", cause=exc)

    elif isinstance(exc, requests.exceptions.Timeout):
        return TimeoutError("Request timeout", url, timeout_type="read", cause=exc)

    elif isinstance(exc, requests.exceptions.ProxyError):
        return ProxyError("Proxy error", url, cause=exc)

    elif isinstance(exc, requests.exceptions.SSLError):
        return SSLError("SSL error", url, cause=exc)

    elif isinstance(exc, requests.exceptions.ConnectionError):
        if _looks_like_dns_failure(exc):
            return DNSError("Could not resolve host", url, cause=exc)
        return ConnectionError("Connection error", url, cause=exc)

    elif isinstance(exc, requests.exceptions.RequestException):
        return TransportError(f"Request failed: {exc}", url, cause=exc)

    else:
        # Неизвестная ошибка - оборачиваем
        return HTTPDumpException(str(exc))
