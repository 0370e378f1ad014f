# rimtrans/config.py
"""
RimTrans 配置（Pydantic v2）。

所有字段都可以通过 `RT_` 前缀的环境变量或 `.env` 文件覆盖，
嵌套字段使用 `__` 分隔，例如 `RT_API_KEYS__DEEPL=xxx`。
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rimtrans.core.types import ProviderName
from rimtrans.exceptions import ConfigurationError
from rimtrans.languages import resolve_language_code


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "console"] = "console"


class ConnectivityConfig(BaseModel):
    """联网预检配置。"""

    enabled: bool = True
    probe_url: str = "https://www.google.com"
    timeout: float = Field(default=5.0, gt=0)


class ProviderKeys(BaseModel):
    """各提供商的凭据。未配置的提供商若强制要求凭据，将直接失败。"""

    apicase: SecretStr | None = None
    google: SecretStr | None = None
    deepl: SecretStr | None = None
    yandex: SecretStr | None = None
    libretranslate: SecretStr | None = None
    mymemory: SecretStr | None = None

    def for_provider(self, provider: ProviderName) -> SecretStr | None:
        return getattr(self, provider.value, None)


class RimTransConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    target_language: str = "Russian"
    source_language: str = "English"
    active_provider: ProviderName = ProviderName.APICASE
    request_timeout: float = Field(default=30.0, gt=0)
    max_concurrency: int = Field(
        default=4, description="批量机器翻译时的最大并发请求数", gt=0
    )

    api_keys: ProviderKeys = Field(default_factory=ProviderKeys)
    provider_configs: dict[str, dict[str, Any]] = Field(default_factory=dict)
    connectivity: ConnectivityConfig = Field(default_factory=ConnectivityConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("target_language", "source_language")
    @classmethod
    def _strip_language(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("语言名称不能为空")
        return v

    @field_validator("provider_configs")
    @classmethod
    def _validate_provider_names(
        cls, v: dict[str, dict[str, Any]]
    ) -> dict[str, dict[str, Any]]:
        known = {p.value for p in ProviderName}
        unknown = sorted(set(v) - known)
        if unknown:
            raise ValueError(f"未知的提供商配置项: {', '.join(unknown)}")
        return v

    @property
    def source_lang_code(self) -> str:
        return resolve_language_code(self.source_language)

    @property
    def target_lang_code(self) -> str:
        return resolve_language_code(self.target_language)


def load_config(**overrides: Any) -> RimTransConfig:
    """
    从环境变量、`.env` 文件与显式参数加载配置。

    Raises:
        ConfigurationError: 任何字段校验失败时，附带 pydantic 的错误详情。

    """
    try:
        return RimTransConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"配置校验失败: {e}") from e
