from __future__ import annotations
import os
from dataclasses import dataclass

PRIVILEGED_ROLES = ("admin", "super_admin")


@dataclass(frozen=True)
class StoreConfig:
    data_path: str = "./report_data.json"


def get_store_config() -> StoreConfig:
    return StoreConfig(data_path=os.getenv("REPORTS_DATA_PATH", "./report_data.json"))


@dataclass(frozen=True)
class ExportConfig:
    output_dir: str = "./exports"


def get_export_config() -> ExportConfig:
    return ExportConfig(output_dir=os.getenv("EXPORT_OUTPUT_DIR", "./exports"))


@dataclass(frozen=True)
class AuthConfig:
    api_key: str | None = None


def get_auth_config() -> AuthConfig:
    return AuthConfig(api_key=os.getenv("ADMIN_API_KEY") or None)


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
