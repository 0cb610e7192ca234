"""Tools for mapping communication task graphs onto heterogeneous cores."""

from ctgmap.version import __version__  # noqa
