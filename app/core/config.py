from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Places Proxy"
    GOOGLE_MAPS_KEY: str
    PLACES_API_URL: str = "https://maps.googleapis.com/maps/api/place"
    PLACES_TIMEOUT_SECONDS: float = 20
    AUTOCOMPLETE_TYPES: str = "geocode"
    AUTOCOMPLETE_LANGUAGE: str = "en"
    DEFAULT_PLACE_QUERY: str = "Museum of Contemporary Art Australia"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
