"""
Система конфигурации для http-dump.

Все конфиги immutable (frozen dataclasses). Значения по умолчанию повторяют
поведение curl: без таймаута, без редиректов, с проверкой сертификатов.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .logging import LoggingConfig

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения данных (сек)

    Examples:
        >>> TimeoutConfig(connect=5, read=30)
    """
    connect: float = 5
    read: float = 30

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ValueError("connect timeout must be positive")
        if self.read <= 0:
            raise ValueError("read timeout must be positive")

    def as_tuple(self) -> Tuple[float, float]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CLIENT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class ClientConfig:
    """
    Конфигурация клиента.

    Args:
        timeout: Таймауты (None = ждать бесконечно, как curl по умолчанию)
        verify_ssl: Проверять SSL сертификаты
        allow_redirects: Следовать редиректам
        raise_on_error: Бросать исключение при сетевой ошибке вместо возврата False
        user_agent: Заголовок User-Agent (None = значение requests по умолчанию)
        logging: Конфигурация логирования (None = логирование выключено)

    Examples:
        >>> ClientConfig()
        >>> ClientConfig.create(timeout=10, raise_on_error=True)
    """
    timeout: Optional[TimeoutConfig] = None
    verify_ssl: bool = True
    allow_redirects: bool = False
    raise_on_error: bool = False
    user_agent: Optional[str] = None
    logging: Optional["LoggingConfig"] = None

    def __post_init__(self):
        """Валидация."""
        if self.timeout is not None and not isinstance(self.timeout, TimeoutConfig):
            raise ValueError("timeout must be a TimeoutConfig or None")
        if self.user_agent is not None and not self.user_agent.strip():
            raise ValueError("user_agent must not be empty")

    @classmethod
    def create(
        cls,
        timeout: Union[None, float, Tuple[float, float], TimeoutConfig] = None,
        **kwargs
    ) -> "ClientConfig":
        """
        Создать конфиг из простых значений.

        Args:
            timeout: Число (connect и read), кортеж (connect, read) или TimeoutConfig
            **kwargs: Остальные поля ClientConfig

        Returns:
            ClientConfig instance

        Example:
            >>> config = ClientConfig.create(timeout=(3, 10), verify_ssl=False)
            >>> config.timeout.as_tuple()
            (3, 10)
        """
        if isinstance(timeout, (int, float)):
            timeout = TimeoutConfig(connect=timeout, read=timeout)
        elif isinstance(timeout, tuple):
            timeout = TimeoutConfig(connect=timeout[0], read=timeout[1])

        return cls(timeout=timeout, **kwargs)

    def requests_timeout(self) -> Optional[Tuple[float, float]]:
        """Значение timeout для requests (None = без ограничения)."""
        if self.timeout is None:
            return None
        return self.timeout.as_tuple()

    def with_logging(self, logging_config: "LoggingConfig") -> "ClientConfig":
        """Вернуть копию конфига с другим логированием."""
        return replace(self, logging=logging_config)
