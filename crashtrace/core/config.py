from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """CLI 기본 설정 (환경변수 CRASHTRACE_*)"""

    model_config = SettingsConfigDict(
        env_prefix="CRASHTRACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 출력
    prefix: str = "ERROR"
    color: bool = True

    # 디코딩
    filter_unknown: bool = True
    support_alternate_format: bool = True
    ignore_paths: list[str] = [r"^internal/modules/cjs"]

    # Logging
    log_level: str = "WARNING"


settings = Settings()
