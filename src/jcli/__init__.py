"""jcli: weather, JSON pretty-printing and authenticated GETs from one menu."""

__version__ = "0.1.0"
