import logging
from typing import Any

from dynaconf import Dynaconf

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
DEFAULT_HELP_BASE_URL = "https://support.google.com/accessibility/android/answer/"


settings = Dynaconf(
    settings_files=["settings.toml"],
    load_dotenv=True,
    merge_enabled=True,
    envvar_prefix="A11YCHECK",
)


def get_setting(section: str, key: str, default: Any = None) -> Any:
    """
    Read a single nested setting, falling back to a default when the section or key is unset.

    Args:
        section (str): The top-level settings section, e.g. "registry".
        key (str): The key inside the section.
        default (Any): Returned when the section or key is missing.

    Returns:
        Any: The configured value or the default.
    """
    value = settings.get(section, {}).get(key)
    if value is None:
        return default
    return value


def get_extension_modules() -> list[str]:
    """Module names whose `A11YCHECK_KINDS` are registered into the default kind registry."""
    modules = get_setting("registry", "extension_modules", [])
    if isinstance(modules, str):
        # Env vars arrive as a comma separated string
        modules = [name.strip() for name in modules.split(",") if name.strip()]
    logger.debug("Configured kind extension modules: %s", modules)
    return list(modules)


def get_default_locale() -> str:
    return str(get_setting("strings", "default_locale", DEFAULT_LOCALE))


def get_help_base_url() -> str:
    return str(get_setting("help", "base_url", DEFAULT_HELP_BASE_URL))
