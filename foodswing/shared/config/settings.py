# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_JWT_SECRET = "your-secret-key-change-in-production"


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///foodswing.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_by_name=True)


class AuthConfig(BaseSettings):
    jwt_secret: str = Field(DEFAULT_JWT_SECRET, alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    token_ttl_days: int = Field(7, ge=1, alias="TOKEN_TTL_DAYS")
    bcrypt_rounds: int = Field(10, ge=4, le=31, alias="BCRYPT_ROUNDS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_by_name=True)


class SecurityConfig(BaseSettings):
    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_by_name=True)

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(5000, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    auth: AuthConfig = Field(default_factory=_auth_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.auth.jwt_secret in (DEFAULT_JWT_SECRET, "dev", "test", ""):
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET detected in production!\n"
                "   JWT_SECRET must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print(
                "   Consider enabling these security features in production.\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "AuthConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
