from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Length Converter"
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    host: str = "127.0.0.1"
    port: int = 8000  # 0 = pick a free port
    log_level: str = "INFO"
    log_format: str = "json"  # json or console

    model_config = {
        "env_prefix": "LENGTHCONV_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
