# route_planner/core/config.py
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoutePolicy(BaseModel):
    """
    Tunable constants of the route engine, in one place.

    - waypoint_spacing_km: one synthesized waypoint per this many km of span
    - min_waypoints / max_waypoints: clamp for the waypoint count
    - jitter_fraction: waypoint jitter bound, as a fraction of the span in degrees
    - safety_factor_min / safety_factor_max: per-edge multiplier range ("safest")
    - average_speed_kmh: used to turn distance into an estimated travel time
    """

    model_config = ConfigDict(frozen=True)

    waypoint_spacing_km: float = 150.0
    min_waypoints: int = 2
    max_waypoints: int = 6
    jitter_fraction: float = 0.01
    safety_factor_min: float = 0.75
    safety_factor_max: float = 1.25
    average_speed_kmh: float = 60.0

    @model_validator(mode="after")
    def _check_bounds(self) -> "RoutePolicy":
        if self.waypoint_spacing_km <= 0:
            raise ValueError("waypoint_spacing_km must be positive")
        if self.min_waypoints < 0 or self.min_waypoints > self.max_waypoints:
            raise ValueError("expected 0 <= min_waypoints <= max_waypoints")
        if self.jitter_fraction < 0:
            raise ValueError("jitter_fraction must not be negative")
        if self.safety_factor_min < 0 or self.safety_factor_min > self.safety_factor_max:
            raise ValueError("expected 0 <= safety_factor_min <= safety_factor_max")
        if self.average_speed_kmh <= 0:
            raise ValueError("average_speed_kmh must be positive")
        return self


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (.env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    APP_NAME: str = "Route Planner API"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Route engine policy
    ROUTE_WAYPOINT_SPACING_KM: float = 150.0
    ROUTE_MIN_WAYPOINTS: int = 2
    ROUTE_MAX_WAYPOINTS: int = 6
    ROUTE_JITTER_FRACTION: float = 0.01
    ROUTE_SAFETY_FACTOR_MIN: float = 0.75
    ROUTE_SAFETY_FACTOR_MAX: float = 1.25
    ROUTE_AVERAGE_SPEED_KMH: float = 60.0

    # Location search (OpenStreetMap Nominatim)
    NOMINATIM_URL: str = "https://nominatim.openstreetmap.org/search"
    NOMINATIM_LIMIT: int = 10
    NOMINATIM_TIMEOUT_S: float = 10.0
    NOMINATIM_USER_AGENT: str = "route-planner-demo/0.1"

    def route_policy(self) -> RoutePolicy:
        return RoutePolicy(
            waypoint_spacing_km=self.ROUTE_WAYPOINT_SPACING_KM,
            min_waypoints=self.ROUTE_MIN_WAYPOINTS,
            max_waypoints=self.ROUTE_MAX_WAYPOINTS,
            jitter_fraction=self.ROUTE_JITTER_FRACTION,
            safety_factor_min=self.ROUTE_SAFETY_FACTOR_MIN,
            safety_factor_max=self.ROUTE_SAFETY_FACTOR_MAX,
            average_speed_kmh=self.ROUTE_AVERAGE_SPEED_KMH,
        )


settings = Settings()
