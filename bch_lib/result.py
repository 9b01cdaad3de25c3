from typing import Any, Optional


class Result:
    def __init__(self, success: bool, data: Any = None, error: Optional[str] = None,
                 exception: Optional[Exception] = None):
        self.success = success
        self.data = data
        self.error = error
        self.exception = exception

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        if self.success:
            return f"Result(True, {self.data!r})"
        return f"Result(False, error={self.error!r})"
