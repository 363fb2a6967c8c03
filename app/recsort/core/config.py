"""Fixed run configuration for recsort.

The constants that drive pruning and organizing live in one immutable
Pydantic model. The CLI always uses ``DEFAULT_CONFIG``; components take
the config as an argument so tests can inject their own values.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Files strictly smaller than this are deleted by the pruner (20 KiB).
MIN_FILE_SIZE_BYTES: int = 20 * 1024

# Infrastructure directories that are never entered, emptied or removed.
IGNORED_DIR_NAMES: tuple[str, ...] = ("target", "src", ".git", "node_modules")

# Build manifests that are never deleted or moved.
IGNORED_FILE_NAMES: tuple[str, ...] = ("Cargo.toml", "Cargo.lock")

# Recognized extensions; each one gets a category folder of the same name.
KNOWN_EXTENSIONS: tuple[str, ...] = (
    "png",
    "jpg",
    "jpeg",
    "zip",
    "mov",
    "gif",
    "mp3",
    "mp4",
    "mkv",
)

DEFAULT_CATEGORY: str = "others"


def _is_plain_name(name: str) -> bool:
    return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name


class RecsortConfig(BaseModel):
    """Immutable configuration for a prune or organize run.

    Attributes:
        min_size_bytes: Files smaller than this many bytes are pruned.
        ignored_dirs: Directory names skipped at any depth.
        ignored_files: File names never deleted or moved.
        categories: Lower-cased extension (without dot) to category folder name.
        default_category: Folder for files with no or unknown extension.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_size_bytes: Annotated[int, Field(ge=0, description="Prune threshold in bytes")] = (
        MIN_FILE_SIZE_BYTES
    )
    ignored_dirs: Annotated[
        frozenset[str],
        Field(default_factory=lambda: frozenset(IGNORED_DIR_NAMES)),
    ]
    ignored_files: Annotated[
        frozenset[str],
        Field(default_factory=lambda: frozenset(IGNORED_FILE_NAMES)),
    ]
    categories: Annotated[
        dict[str, str],
        Field(default_factory=lambda: {ext: ext for ext in KNOWN_EXTENSIONS}),
    ]
    default_category: str = DEFAULT_CATEGORY

    @field_validator("categories")
    @classmethod
    def normalize_extensions(cls, v: dict[str, str]) -> dict[str, str]:
        """Lower-case extension keys and strip any leading dot."""
        normalized: dict[str, str] = {}
        for ext, category in v.items():
            key = ext.lower().lstrip(".")
            if not key:
                msg = "Extension keys cannot be empty"
                raise ValueError(msg)
            if not _is_plain_name(category):
                msg = f"Invalid category folder name: {category!r}"
                raise ValueError(msg)
            normalized[key] = category
        return normalized

    @model_validator(mode="after")
    def validate_default_category(self) -> "RecsortConfig":
        """Validate the default category is a usable folder name."""
        if not _is_plain_name(self.default_category):
            msg = f"Invalid default category: {self.default_category!r}"
            raise ValueError(msg)
        overlap = set(self.category_names) & self.ignored_dirs
        if overlap:
            msg = f"Category folders cannot be ignored directories: {sorted(overlap)}"
            raise ValueError(msg)
        return self

    @property
    def category_names(self) -> tuple[str, ...]:
        """All category folder names in table order, default category last."""
        names: list[str] = []
        for category in self.categories.values():
            if category not in names:
                names.append(category)
        if self.default_category not in names:
            names.append(self.default_category)
        return tuple(names)

    def classify(self, filename: str) -> str:
        """Return the category folder for a file name.

        The extension is the text after the last dot, lower-cased.
        Names without an extension (including dotfiles such as
        ``.bashrc``) land in the default category.
        """
        stem, dot, ext = filename.rpartition(".")
        if not dot or not stem or not ext:
            return self.default_category
        return self.categories.get(ext.lower(), self.default_category)


DEFAULT_CONFIG = RecsortConfig()
