"""sitecontent: validated, single-flight cache for storefront content documents."""

from sitecontent.version import __version__

__all__ = ["__version__"]
