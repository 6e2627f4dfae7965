from enum import StrEnum


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Part(StrEnum):
    ONE = "1"
    TWO = "2"
    BOTH = "both"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
