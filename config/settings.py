from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	WISE_API_URL: str = 'https://api.wise.com'
	# httpx's own default
	HTTP_TIMEOUT: float = 5.0

	# Application
	APP_NAME: str = 'Transfer Quote Comparison API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
