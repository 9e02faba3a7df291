from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CHARMARKOV_")

    max_length: int = 12
    strict_decode: bool = False
    seed: int | None = None

settings = Settings()
