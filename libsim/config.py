import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Storage
    data_file: str = field(default_factory=lambda: os.getenv("LIBSIM_DATA_FILE", "library.txt"))

    # Startup policy: a brand-new installation has a legitimately empty catalog
    allow_empty_catalog: bool = field(default_factory=lambda: _env_bool("LIBSIM_ALLOW_EMPTY", "False"))

    # Catalog behaviour
    insert_on_add: bool = field(default_factory=lambda: _env_bool("LIBSIM_INSERT_ON_ADD", "True"))
    legacy_midpoint: bool = field(default_factory=lambda: _env_bool("LIBSIM_LEGACY_MIDPOINT", "False"))

    # Validation
    max_field_length: int = field(default_factory=lambda: int(os.getenv("LIBSIM_MAX_FIELD_LENGTH", "51")))  # 0 = no limit
    min_year: int = field(default_factory=lambda: int(os.getenv("LIBSIM_MIN_YEAR", "1440")))

    # Application
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "LibSim"))
    log_level: str = field(default_factory=lambda: os.getenv("LIBSIM_LOG_LEVEL", "WARNING"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", "False"))


settings = Settings()
