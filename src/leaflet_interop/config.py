"""Map configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from leaflet_interop.geometry import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, Point


class MapSettings(BaseSettings):
    """Initial map view loaded from ``LEAFLET_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEAFLET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    map_id: str | None = "mapId"
    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    zoom: int = 13

    # Logging
    log_level: str = "info"

    @property
    def center(self) -> Point:
        """The configured initial map center."""
        return Point.create(self.latitude, self.longitude)


settings = MapSettings()
