"""Exit codes for the version-checker CLI."""

EXIT_SUCCESS = 0
EXIT_OPERATION_FAILED = 1  # Operation exists but failed (VERSION_ERROR)
EXIT_UNSUPPORTED = 2  # Method name not implemented
EXIT_INVALID_USAGE = 3  # Bad arguments, config, or platform
