from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Google Maps Platform
    google_api_key: str = ""
    google_geocode_url: str = "https://maps.googleapis.com/maps/api/geocode/json"
    google_text_search_url: str = "https://maps.googleapis.com/maps/api/place/textsearch/json"

    # Unsplash place imagery
    unsplash_access_key: str = ""
    unsplash_api_url: str = "https://api.unsplash.com/photos/random"

    # Upstream HTTP
    upstream_timeout_seconds: float = 10.0

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
