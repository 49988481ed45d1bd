"""Version information for the tool."""

from __future__ import annotations

from dataclasses import dataclass

# Filled in at build time where available.
GIT_COMMIT = ""
GIT_DESCRIBE = ""

VERSION = "0.11.1"

# Empty for a final release, otherwise a marker such as "dev", "beta" or "rc1".
VERSION_PRERELEASE = "dev"

# Metadata further describing the build type.
VERSION_METADATA = ""


@dataclass
class VersionInfo:
    """A version number with its pre-release marker, metadata and revision."""

    revision: str = ""
    version: str = ""
    version_prerelease: str = ""
    version_metadata: str = ""

    def version_number(self) -> str:
        """Return the version as ``X.Y.Z[-pre][+meta]``."""
        result = self.version
        if self.version_prerelease:
            result = f"{result}-{self.version_prerelease}"
        if self.version_metadata:
            result = f"{result}+{self.version_metadata}"
        return result

    def full_version_number(self, rev: bool) -> str:
        """Return ``vX.Y.Z[-pre][+meta]``, with `` (revision)`` when asked for."""
        result = f"v{self.version_number()}"
        if rev and self.revision:
            result = f"{result} ({self.revision})"
        return result


def get_version() -> VersionInfo:
    """Return the version information of this build."""
    return VersionInfo(
        revision=GIT_COMMIT,
        version=GIT_DESCRIBE or VERSION,
        version_prerelease=VERSION_PRERELEASE,
        version_metadata=VERSION_METADATA,
    )