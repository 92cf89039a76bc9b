"""
Bot plugins.

Every module in this package (except `_*`) exposes `initialize(context)`,
called once with the live BotContext after commands and events are loaded.
A failing plugin is logged and skipped; the others still load.
"""
import logging
import pkgutil
import importlib


def load_plugins(context, package: str = __name__, path=None) -> list[str]:
    loaded = []
    for mod in pkgutil.iter_modules(path if path is not None else __path__):
        if mod.name.startswith("_"):
            continue
        full_name = f"{package}.{mod.name}"
        try:
            module = importlib.import_module(full_name)
            initialize = getattr(module, "initialize", None)
            if initialize is None:
                logging.warning(f"⚠️ Plugin {full_name} has no initialize(context)")
                continue
            initialize(context)
            loaded.append(mod.name)
            logging.info(f"🔌 Plugin loaded: {mod.name}")
        except Exception:
            logging.exception(f"❌ Failed to load plugin {full_name}")
    return loaded


__all__ = ["load_plugins"]
