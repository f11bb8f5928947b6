from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    host: str = '0.0.0.0'
    port: int = 4000
    database_url: str = 'sqlite+aiosqlite:///./sevenpro.db'
    log_level: str = 'INFO'

    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    email_from: Optional[str] = None
    email_api_url: str = 'https://api.resend.com/emails'
    email_timeout_seconds: float = 10.0

    @property
    def mail_configured(self) -> bool:
        return bool(self.email_user and self.email_pass)

    @property
    def mail_sender(self) -> Optional[str]:
        return self.email_from or self.email_user

@lru_cache
def get_settings() -> Settings:
    return Settings()
