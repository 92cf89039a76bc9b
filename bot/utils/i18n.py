import json
import logging
from pathlib import Path
from typing import NamedTuple



class _KeepMissing(dict):
    def __missing__(self, key):
        return "{" + key + "}"



class Localization(NamedTuple):
    name: tuple[str, str]
    description: tuple[str, str]



class I18n:

    """
    Internationalization manager used for both runtime messages and the slash-command manifest.

    This class loads JSON translation files from a locales directory and provides
    methods to retrieve formatted strings based on a locale identifier. Missing
    translations fall back to the base locale, then to the key itself.

    Attributes:
        locales_dir (Path): Directory containing one '<locale>.json' file per locale.
        default_lang (str): The base locale used as a fallback (default is "en-US").
        translations (dict): A dictionary storing loaded translation data.
    """


    def __init__(self, locales_dir="locales", default_lang="en-US"):
        self.locales_dir = Path(locales_dir)
        self.default_lang = default_lang
        self.translations = {}
        self.load_locales()




    def load_locales(self):

        """
        Scans the locales directory and loads all JSON translation files.

        Each file should be named after its locale code (e.g., 'en-US.json', 'it.json').
        The stem of the filename is used as the locale key in the translations dictionary.

        Returns:
            None
        """

        for file in sorted(self.locales_dir.glob("*.json")):
            lang = file.stem
            with open(file, encoding="utf-8") as f:
                self.translations[lang] = json.load(f)

        if self.default_lang not in self.translations:
            logging.warning(f"⚠️ Base locale '{self.default_lang}' not found in {self.locales_dir}")


    def locales(self) -> list[str]:
        return sorted(self.translations)


    @staticmethod
    def _lookup(data: dict, key: str) -> str | None:
        value = data.get(key)
        if value is None and "." in key:
            value = data
            for part in key.split("."):
                if not isinstance(value, dict):
                    return None
                value = value.get(part)
        return value if isinstance(value, str) else None


    def t(self, lang: str, key: str, **kwargs) -> str:

        """
        Translates a key into the specified locale and formats it with provided arguments.

        Args:
            lang (str): The target locale code.
            key (str): The translation key to look up (dotted keys may address nested objects).
            **kwargs: Dynamic values to be interpolated into the translation string.

        Returns:
            str: The formatted translation string, the base locale version,
                or the key itself if no translation is found.
        """

        data = self.translations.get(lang) or {}
        base = self.translations.get(self.default_lang) or {}
        text = self._lookup(data, key) or self._lookup(base, key) or key
        if not kwargs:
            return text
        try:
            return text.format_map(_KeepMissing(kwargs))
        except (IndexError, KeyError, TypeError, ValueError, AttributeError) as e:
            logging.warning(f"⚠️ Malformed translation '{key}' for {lang}: {e}")
            return text

    translate = t


    def localize(self, lang: str, name: str, description: str) -> Localization:
        return Localization(
            name=(lang, self.t(lang, name)),
            description=(lang, self.t(lang, description)),
        )



translator: I18n | None = None



def init_i18n(locales_dir="locales", default_lang="en-US") -> I18n:

    """
    Installs the process-wide translator used by the module-level helpers.

    Args:
        locales_dir (str | Path): Directory holding the translation files.
        default_lang (str): The base locale.

    Returns:
        I18n: The freshly loaded translator.
    """

    global translator
    translator = I18n(locales_dir=locales_dir, default_lang=default_lang)
    logging.info(f"🌍 Loaded {len(translator.locales())} locales from {translator.locales_dir}")
    return translator



def get_translator() -> I18n:
    if translator is None:
        raise RuntimeError("Translator not initialized")
    return translator



def t(lang: str, key: str, **kwargs):

    """
    Global helper function to access the translator instance more easily.

    Args:
        lang (str): The target locale code.
        key (str): The translation key.
        **kwargs: Arguments for string formatting.

    Returns:
        str: The translated and formatted string.
    """

    return get_translator().t(lang, key, **kwargs)
