from pathlib import Path
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str | None = None

    # Used to build the URL when database_url is not set
    db_scheme: str = "postgresql+asyncpg"
    db_user: str = "lessons"
    db_password: str = "lessons"
    db_host: str = "localhost:5432"
    db_name: str = "lessons"
    db_params: str = ""

    db_pool_size: int = 5
    db_max_overflow: int = 10

    cors_origins: list[str] = ["*"]
    static_dir: Path = Path("image")
    static_prefix: str = "/image"

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            # Convert sync URL to async URL for asyncpg
            return self.database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        # User and password may contain characters that are not URL-safe
        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)
        url = f"{self.db_scheme}://{user}:{password}@{self.db_host}/{self.db_name}"
        if self.db_params:
            url += self.db_params if self.db_params.startswith("?") else f"?{self.db_params}"
        return url


settings = Settings()
