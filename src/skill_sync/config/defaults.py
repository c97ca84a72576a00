"""Built-in defaults for skill sync."""

# Environment variable overriding the Codex base directory
CODEX_HOME_ENV = "CODEX_HOME"

# Base directory used when CODEX_HOME is unset, relative to the home directory
DEFAULT_CODEX_DIRNAME = ".codex"

# Subdirectory of the Codex base directory that receives the skills
TARGET_SUBDIR = "skills"

# Subdirectory of the repository root holding the skills content
SOURCE_SUBDIR = "skills"

# OS metadata files that are never copied or deleted
DEFAULT_EXCLUDES = [".DS_Store"]

DEFAULT_SETTINGS_PATH = "~/.config/skill-sync/config.yaml"
