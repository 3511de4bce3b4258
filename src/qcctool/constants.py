PROGRAM_NAME: str = "qcctool"

EXIT_SUCCESS: int = 0
EXIT_FAILURE: int = 1
