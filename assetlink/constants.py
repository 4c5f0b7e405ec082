"""Shared constants for assetlink manifests and state locations."""

ASSETLINK_HOME_EXT = ".assetlink"  # user-level state directory suffix

# Key under a manifest's "extra" section that carries asset settings
EXTRA_KEY = "assetlink"

# Namespace used when "target" or "source" is a single path
DEFAULT_NAMESPACE = "assets"

MANIFEST_FILENAME = "manifest.json"

# Domain name written into logfile entries
LOG_DOMAIN = "assets"
