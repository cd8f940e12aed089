"""tlon-expose CLI layer.

``cli`` and ``main`` resolve on first access. Importing the library
(``import tlon_expose``) then never loads click commands or configures
logging, and the console script entry point still finds ``main`` here.
"""

__all__ = ["cli", "main"]


def __getattr__(name):
    if name in {"cli", "main"}:
        import importlib

        _main_module = importlib.import_module(".main", __name__)

        return getattr(_main_module, name)
    raise AttributeError(name)
