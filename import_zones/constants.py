from typing import Final


CONFIG_FILENAMES: Final[tuple[str, ...]] = (
    "import-zones.yaml",
    "import-zones.yml",
    "import-zones.json",
    ".import-zones.yaml",
)

SOURCE_SUFFIXES: Final[tuple[str, ...]] = (
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
    ".ts",
    ".tsx",
    ".mts",
    ".cts",
)

IGNORED_DIRS: Final[tuple[str, ...]] = (
    ".git",
    "node_modules",
    ".venv",
    "dist",
    "build",
)
