"""Fixed names used to locate SDKMAN data on disk."""

SDKMAN_DIR_ENV_VAR = "SDKMAN_DIR"
DEFAULT_SDKMAN_HOME = ".sdkman"
VAR_DIR = "var"
CLI_VERSION_FILE = "version"

# Output and logging switches
PLAIN_OUTPUT_ENV_VAR = "SDKRAN_PLAIN_OUTPUT"
LOG_LEVEL_ENV_VAR = "SDKRAN_LOG_LEVEL"
