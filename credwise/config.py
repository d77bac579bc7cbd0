from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "CREDWISE_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Display only; every figure is in one currency
    currency_symbol: str = "₹"

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Dashboard
    dashboard_port: int = 8050


settings = Settings()
