"""Settings comuns ao serviço (ambiente, nome nos logs, nível de log)."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from config.settings.env import env_bool, env_str

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "prod": "production",
    "production": "production",
    "stage": "staging",
    "staging": "staging",
}


@dataclass(frozen=True)
class BaseSettings:
    """Configuração base.

    Attributes:
        environment: development, staging ou production
        service_name: Valor do campo `service` em todo log
        debug: Ativa modo debug
        log_level: DEBUG, INFO, WARNING, ERROR ou CRITICAL
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    debug: bool = False
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_strict(self) -> bool:
        """Em staging/production configuração inválida impede o boot."""
        return self.environment != "development"

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME must not be empty")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}")
        return errors


def parse_environment(raw: str) -> Environment:
    """Normaliza ENVIRONMENT; valores desconhecidos viram development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings lida do ambiente uma vez por processo."""
    return BaseSettings(
        environment=parse_environment(env_str("ENVIRONMENT", "development")),
        service_name=env_str("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        debug=env_bool("DEBUG"),
        log_level=env_str("LOG_LEVEL", "INFO").upper(),
    )
