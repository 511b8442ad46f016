"""METAR Decoder API"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("metar-decoder")
except PackageNotFoundError:
    __version__ = "dev"
