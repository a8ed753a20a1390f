from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CXPLAN_", env_file=".env", extra="ignore")

    app_name: str = "cxplan"
    env: str = "dev"
    host: str = "0.0.0.0"  # nosec B104 - intentional for container deployments
    port: int = 8080
    log_level: str = "INFO"

    # Header set by the EDC data plane carrying the caller's BPNL
    partner_header: str = "edc-bpn"

    # Optional JSON seed for the in-memory PlannedProduction store
    seed_file: Path | None = None

    # Observability
    enable_metrics: bool = True

    # Security Headers
    enable_security_headers: bool = True
    enable_hsts: bool = False
    hsts_max_age: int = 31536000  # 1 year
    hsts_include_subdomains: bool = True
    hsts_preload: bool = False
    csp_policy: str | None = "default-src 'none'; frame-ancestors 'none'"


settings = Settings()
