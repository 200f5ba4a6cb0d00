"""Pydantic models for the vrs.yml version document."""

from typing import Any, Dict, Iterator, List, Optional, Sequence

import yaml
from pydantic import BaseModel, Field, field_validator


class SyncFile(BaseModel):
    """A file whose content carries the version string."""

    name: str = Field(..., description="Path relative to the base directory")
    pattern: str = Field(
        "",
        description="Regular expression to replace. Empty means the previous "
        "version string is replaced literally.",
    )

    @field_validator("pattern", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "pattern": self.pattern}


class SyncSpec(BaseModel):
    """A list of sync targets."""

    files: List[SyncFile] = Field(default_factory=list)

    @field_validator("files", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def to_dict(self) -> Dict[str, Any]:
        return {"files": [f.to_dict() for f in self.files]}


class Profile(BaseModel):
    """A named bundle of extra sync targets, applied only when active."""

    name: str
    sync: Optional[SyncSpec] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sync": self.sync.to_dict() if self.sync is not None else None,
        }


class VersionConfig(BaseModel):
    """
    The persisted version state of a project.

    ``version`` is kept as a plain string: only its middle component has to be
    numeric, the other two are carried through a bump untouched.
    """

    version: str
    sync: Optional[SyncSpec] = None
    profiles: List[Profile] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        # Numbers passed in directly rather than read from a document
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("profiles", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def active_profiles(self, names: Sequence[str]) -> Iterator[Profile]:
        """Yield the profiles whose name is in ``names``, in document order."""
        for profile in self.profiles:
            if profile.name in names:
                yield profile

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"version": self.version}
        if self.sync is not None:
            data["sync"] = self.sync.to_dict()
        if self.profiles:
            data["profiles"] = [p.to_dict() for p in self.profiles]
        return data

    def to_yaml(self) -> str:
        """Serialize the whole document, keeping the key order of the file."""
        return yaml.safe_dump(
            self.to_dict(),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )

    @classmethod
    def from_yaml(cls, content: str) -> "VersionConfig":
        """
        Load a document from YAML content.

        Raises:
            yaml.YAMLError: If the content is not valid YAML
            ValueError: If the content is not a mapping
            pydantic.ValidationError: If fields are missing or have the wrong type
        """
        data = yaml.safe_load(content)
        if not isinstance(data, dict):
            raise ValueError(
                f"expected a mapping at the top level, got {type(data).__name__}"
            )
        version = data.get("version")
        if isinstance(version, (int, float)) and not isinstance(version, bool):
            # 1.10 resolves to the float 1.1, keep the text as written
            data["version"] = _scalar_text(content, "version") or str(version)
        return cls(**data)


def _scalar_text(content: str, key: str) -> Optional[str]:
    """Source text of the top level scalar ``key``, before tag resolution."""
    root = yaml.compose(content, Loader=yaml.SafeLoader)
    if not isinstance(root, yaml.MappingNode):
        return None
    text = None
    # Later duplicates win, as in safe_load
    for key_node, value_node in root.value:
        if key_node.value == key and isinstance(value_node, yaml.ScalarNode):
            text = value_node.value
    return text
