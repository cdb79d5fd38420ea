from .manifest import MANIFEST_FILENAME, BundleManifest, read_manifest

__all__ = ["MANIFEST_FILENAME", "BundleManifest", "read_manifest"]
