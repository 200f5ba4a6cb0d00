from .config import Profile, SyncFile, SyncSpec, VersionConfig

__all__ = ["Profile", "SyncFile", "SyncSpec", "VersionConfig"]
