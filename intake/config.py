from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreBackend(Enum):
    MEMORY = "memory"


class StoreConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="INTAKE_STORE_", env_file=".env", extra="ignore")

    backend: StoreBackend = StoreBackend.MEMORY
    seed_demo_data: bool = True

    # Simulated round-trip latency, in seconds, per operation kind.
    list_latency: float = Field(default=0.5, ge=0)
    create_latency: float = Field(default=0.8, ge=0)
    update_latency: float = Field(default=0.6, ge=0)
    delete_latency: float = Field(default=0.4, ge=0)
    get_latency: float = Field(default=0.3, ge=0)


class AuthConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="INTAKE_AUTH_", env_file=".env", extra="ignore")

    username: str = "admin"
    password: str = "admin"
    login_latency: float = Field(default=1.0, ge=0)


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    store: StoreConfig = Field(default_factory=lambda: StoreConfig())
    auth: AuthConfig = Field(default_factory=lambda: AuthConfig())
