from .i18n import I18n, Localization, get_translator, init_i18n, t

__all__ = [
    "get_translator",
    "Localization",
    "init_i18n",
    "I18n",
    "t",
]
