from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from foodweb.config.settings import FoodWebConfig, ModeConfig

settings = Dynaconf(
    envvar_prefix="FOODWEB",
    load_dotenv=True,
    settings_files=[],
)
for _key, _value in DEFAULTS.items():
    settings.setdefault(_key, _value)


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = settings.get("APP_NAME", "foodweb-backend")
    api_prefix: str = settings.get("API_PREFIX", "")
    host: str = settings.get("HOST", "127.0.0.1")
    port: int = settings.get("PORT", 8000)

    # ---------------- Food web policy ----------------
    foodweb: FoodWebConfig = FoodWebConfig(
        modes=ModeConfig(
            basic=settings.get("BASIC_MODE", False),
            debug=settings.get("DEBUG_MODE", False),
            quiet=settings.get("QUIET_MODE", False),
        ),
        max_name_length=settings.get("MAX_NAME_LENGTH", 19),
        log_level=settings.get("LOG_LEVEL", "WARNING"),
    )
