from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Repository Test Generator"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True
    ENV: str = "dev"  # Environment: "dev", "staging", "prod"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3001"]

    # GitHub
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_AUTHORIZE_URL: str = "https://github.com/login/oauth/authorize"
    GITHUB_TOKEN_URL: str = "https://github.com/login/oauth/access_token"
    GITHUB_CLIENT_ID: Optional[str] = None
    GITHUB_CLIENT_SECRET: Optional[str] = None
    GITHUB_REDIRECT_URI: str = "http://localhost:8000/api/auth/callback"
    GITHUB_SCOPES: List[str] = [
        "read:user",
        "user:email",
        "repo",
    ]
    GITHUB_REQUEST_TIMEOUT: float = 30.0  # Seconds, per upstream call
    FRONTEND_BASE_URL: str = "http://localhost:3000"

    # Session
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "github_token"
    SESSION_TOKEN_EXPIRE_DAYS: int = 30

    # --- Repository browsing ---
    REPOSITORY_LIST_LIMIT: int = 50  # Most recently updated repos returned

    # --- Pull request workflow ---
    TESTS_DIRECTORY: str = "tests"  # Generated files land under this path
    FILE_WRITE_CONCURRENCY: int = 5  # Parallel file writes per pull request
    FILE_FETCH_CONCURRENCY: int = 5  # Parallel content fetches per analysis

    @property
    def secure_cookies(self) -> bool:
        return self.ENV.lower() != "dev"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
