CONFIG_FILE_NAME = "vrs.yml"

INITIAL_VERSION = "0.0.0"

# Git
TAG_PREFIX = "v"
INIT_COMMIT_MESSAGE = "Initialized versioon file."
BUMP_COMMIT_MESSAGE = "Version bump."
SYNC_COMMIT_MESSAGE = "Bumped version."

# Files created by vrs are readable and writable by the owner only
FILE_MODE = 0o600
