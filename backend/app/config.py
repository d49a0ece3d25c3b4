from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from contentgraph.config.settings import IdentityConfig, RegistryConfig

settings = Dynaconf(
    envvar_prefix="CONTENTGRAPH",
    load_dotenv=True,
    settings_files=[],
)
for _key, _value in DEFAULTS.items():
    # environment (CONTENTGRAPH_*) wins over defaults
    if not settings.exists(_key):
        settings.set(_key, _value)


def _parse_csv(value):
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    if isinstance(value, str):
        return tuple(v.strip() for v in value.split(",") if v.strip())
    return ()


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = settings.get("APP_NAME", "contentgraph-backend")
    api_prefix: str = settings.get("API_PREFIX", "")
    log_level: str = settings.get("LOG_LEVEL", "INFO")

    # ---------------- Identity ----------------
    system_owner: str = settings.get("SYSTEM_OWNER")
    caller_header: str = settings.get("CALLER_HEADER", "X-Caller-Identity")
    zero_sentinels: tuple = _parse_csv(settings.get("ZERO_SENTINELS"))

    # ---------------- Data Paths ----------------
    seed_dir: str = settings.get("SEED_DIR", "data/seed")

    # ---------------- API ----------------
    events_page_limit: int = settings.get("EVENTS_PAGE_LIMIT", 100)

    def registry_config(self) -> RegistryConfig:
        return RegistryConfig(
            initial_owner=self.system_owner,
            identity=IdentityConfig(zero_sentinels=self.zero_sentinels),
        )
