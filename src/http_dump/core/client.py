# src/http_dump/core/client.py
from dataclasses import dataclass
from typing import Optional, Union
import itertools
import time
import uuid

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig
from .exceptions import HTTPDumpException, classify_requests_exception
from .raw import render_headers, render_raw
from .request import RequestSpec
from .logging import DumpLogger
from .logging.filters import set_correlation_id, clear_correlation_id

LOGGER_NAME = "http_dump.client"

# Each client logs through its own child logger and owns its handlers
_client_ids = itertools.count(1)


@dataclass(frozen=True)
class TransferInfo:
    """
    Информация о последней успешной передаче.

    Args:
        url: Итоговый URL (после редиректов, если они разрешены)
        status_code: HTTP статус ответа
        elapsed_ms: Время запроса (мс)
        header_size: Размер блока статус + заголовки (байты)
        body_size: Размер тела ответа (байты)
        content_type: Content-Type ответа
    """
    url: str
    status_code: int
    elapsed_ms: float
    header_size: int
    body_size: int
    content_type: Optional[str] = None


class DumpClient:
    """
    Клиент для одного запроса с захватом сырого ответа.

    Features:
        - Одна сессия requests на клиента, без ретраев
        - Ответ возвращается строкой (тело или заголовки + тело)
        - Сетевая ошибка -> False (или исключение при raise_on_error)
        - Контекстный менеджер для освобождения ресурсов

    Example:
        >>> with DumpClient() as client:
        ...     result = client.execute(RequestSpec.get("http://swapi.co/api/people/"))
        >>> dump(result)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize client.

        Args:
            config: ClientConfig instance (defaults повторяют curl)
            session: Готовая сессия (для тестов и переиспользования соединений)
        """
        self._config = config or ClientConfig()
        self._owns_session = session is None
        self._session = session if session is not None else self._create_session()
        self._closed = False
        self._last_error: Optional[HTTPDumpException] = None
        self._info: Optional[TransferInfo] = None

        self._logger: Optional[DumpLogger] = None
        if self._config.logging:
            self._logger = DumpLogger(
                config=self._config.logging,
                name=f"{LOGGER_NAME}.{next(_client_ids)}"
            )

    def _create_session(self) -> requests.Session:
        """Create configured session."""
        session = requests.Session()

        # Ретраи запрещены: один запрос на execute()
        adapter = HTTPAdapter(max_retries=0)
        session.mount('http://', adapter)
        session.mount('https://', adapter)

        if self._config.user_agent:
            session.headers['User-Agent'] = self._config.user_agent

        return session

    # ==================== Управление жизненным циклом ====================

    def __enter__(self):
        """Поддержка контекстного менеджера"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Автоматическое закрытие при выходе из контекста"""
        self.close()
        return False

    def close(self):
        """
        Закрывает сессию (если клиент ее создал) и логгер.

        Повторный вызов ничего не делает.
        """
        if self._closed:
            return
        if self._logger is not None:
            self._logger.close()
        if self._owns_session:
            self._session.close()
        self._closed = True

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def last_error(self) -> Optional[HTTPDumpException]:
        """Ошибка последнего execute(), None после успешной передачи."""
        return self._last_error

    @property
    def info(self) -> Optional[TransferInfo]:
        """TransferInfo последней успешной передачи."""
        return self._info

    # ==================== Запрос ====================

    def execute(self, request: RequestSpec) -> Union[str, bool]:
        """
        Выполняет запрос и возвращает сырой ответ.

        HTTP статус не проверяется: тело 404 или 500 возвращается так же,
        как тело 200.

        Args:
            request: Описание запроса

        Returns:
            Захваченный текст ответа или False при сетевой ошибке

        Raises:
            RuntimeError: Клиент уже закрыт
            HTTPDumpException: Сетевая ошибка при config.raise_on_error=True
        """
        if self._closed:
            raise RuntimeError("DumpClient is closed")

        self._last_error = None
        self._info = None

        if self._logger:
            set_correlation_id(str(uuid.uuid4()))
        try:
            return self._send(request)
        finally:
            if self._logger:
                clear_correlation_id()

    def _send(self, request: RequestSpec) -> Union[str, bool]:
        if self._logger:
            self._logger.debug(
                "Request started",
                method=request.method,
                url=request.url,
                headers=dict(request.headers),
                body_size=len(request.body.encode("utf-8")) if request.body else 0,
                include_headers=request.include_headers,
            )

        start_time = time.time()
        try:
            response = self._session.request(
                method=request.method,
                url=request.url,
                headers=dict(request.headers),
                data=request.body.encode("utf-8") if request.body is not None else None,
                timeout=self._config.requests_timeout(),
                verify=self._config.verify_ssl,
                allow_redirects=self._config.allow_redirects,
            )
        except requests.exceptions.RequestException as e:
            error = classify_requests_exception(e, request.url)
            self._last_error = error

            if self._logger:
                self._logger.error(
                    "Request failed",
                    method=request.method,
                    url=request.url,
                    error=str(error),
                    error_type=type(error).__name__,
                    duration_ms=round((time.time() - start_time) * 1000, 2),
                )

            if self._config.raise_on_error:
                raise error from e
            return False

        duration_ms = round((time.time() - start_time) * 1000, 2)
        self._info = TransferInfo(
            url=response.url,
            status_code=response.status_code,
            elapsed_ms=duration_ms,
            header_size=len(render_headers(response).encode("utf-8")),
            body_size=len(response.content),
            content_type=response.headers.get("Content-Type"),
        )

        if self._logger:
            self._logger.info(
                "Request completed",
                method=request.method,
                url=request.url,
                status_code=response.status_code,
                duration_ms=duration_ms,
                response_size=len(response.content),
            )

        return render_raw(response, include_headers=request.include_headers)
