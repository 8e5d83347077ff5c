from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Hotdesk Seat Booking API"
    API_V1_STR: str = "/api/v1"
    SECRET_KEY: str = "changeme"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 8

    ADMIN_SECRET_KEY: str = "change-this-admin-secret"

    # Database: state is volatile by default (in-memory SQLite).
    # Point DATABASE_URL at another SQLAlchemy URL to keep it around.
    DATABASE_URL: str = "sqlite://"

    # Floor layout
    TOTAL_SEATS: int = 50
    FLOATER_SEAT_COUNT: int = 10

    # Booking policy
    LOCK_TTL_SECONDS: int = 120
    MAX_SEATS_PER_BOOKING: int = 5
    ATTENDANCE_REQUIRED: int = 5
    ADVANCE_BOOKING_HOUR: int = 15

    # Background sweeper for stale seat locks
    LOCK_SWEEP_INTERVAL_SECONDS: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


settings = Settings()
