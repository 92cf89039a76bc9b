import sys
import logging
import importlib.util
from pathlib import Path
from typing import Any, NamedTuple



class HandlerLoadError(Exception):
    """A handler module could not be imported or instantiated."""



class LoadedHandler(NamedTuple):
    category: str
    handler: Any
    path: Path



class HandlerLoader:

    """
    Discovers handler modules laid out as `<root>/<category>/<file>.py`.

    Categories and files are visited in lexicographic order. Every module must
    define a module-level `setup(context)` factory returning the handler
    instance. Any failure aborts the load: a broken handler means a broken
    deployment.

    Args:
        context (BotContext): Passed to every factory.
        suffix (str): Only files ending with this suffix are loaded.
        namespace (str): Prefix for the synthetic module names.
    """

    def __init__(self, context, suffix: str = ".py", namespace: str = "handlers"):
        self.context = context
        self.suffix = suffix
        self.namespace = namespace


    def discover(self, root_dir) -> list[tuple[str, Path]]:
        root = Path(root_dir)
        if not root.is_dir():
            raise HandlerLoadError(f"Handler directory not found: {root}")

        found = []
        for category_dir in sorted(root.iterdir()):
            if not category_dir.is_dir() or category_dir.name.startswith(("_", ".")):
                continue
            for file in sorted(category_dir.iterdir()):
                if file.is_file() and file.name.endswith(self.suffix) and not file.name.startswith("_"):
                    found.append((category_dir.name, file))
        return found


    def import_module(self, category: str, path: Path):
        module_name = f"{self.namespace}.{category}.{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise HandlerLoadError(f"Cannot import {path}")

        module = importlib.util.module_from_spec(spec)
        # dataclasses and typing resolve names through sys.modules during exec
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(module_name, None)
            raise HandlerLoadError(f"Error importing {path}: {e}") from e
        return module


    def instantiate(self, module, path: Path):
        factory = getattr(module, "setup", None)
        if not callable(factory):
            raise HandlerLoadError(f"{path} does not define a setup(context) factory")
        try:
            return factory(self.context)
        except Exception as e:
            raise HandlerLoadError(f"setup() failed for {path}: {e}") from e


    def load(self, root_dir) -> list[LoadedHandler]:
        loaded = []
        for category, path in self.discover(root_dir):
            module = self.import_module(category, path)
            handler = self.instantiate(module, path)
            loaded.append(LoadedHandler(category, handler, path))
            logging.debug(f"📦 Loaded {category}/{path.name}")
        return loaded
