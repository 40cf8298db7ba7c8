# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class LoadState(str, Enum):
    # Anything other than LOADED behaves like an empty store.
    UNLOADED = "unloaded"
    LOADED = "loaded"
    FAILED = "failed"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    EMPTY_QUERY = ErrorInfo("Query must not be empty", status.HTTP_400_BAD_REQUEST)
