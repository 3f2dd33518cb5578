from reltime.i18n.loader import (
    DEFAULT_LOCALE,
    LocaleBundle,
    ResourceTable,
    available_locales,
    load_all,
    load_locale,
)

__all__ = [
    "DEFAULT_LOCALE",
    "LocaleBundle",
    "ResourceTable",
    "available_locales",
    "load_all",
    "load_locale",
]
