# Tracks the upstream typos release this package installs
__version__ = "1.31.1"
