"""assetlink - expose dependency asset directories inside a project via symlinks."""
