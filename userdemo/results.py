"""Uniform response envelope used by every HTTP endpoint."""

from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Tuple

SUCCESS_MESSAGE = "操作成功"
ERROR_MESSAGE = "操作失败"
ILLEGAL_ARGUMENT_MESSAGE = "参数非法"
ERROR_MESSAGE_INNER_EXCEPTION = "内部异常"

ILLEGAL_ARGUMENT_CODE = "415"
SUCCESS_CODE = "200"
ERROR_CODE = "500"


@dataclass
class Result:
    """A response envelope: a status code, a message and an optional payload.

    The transforming methods return a changed copy and leave the original alone.
    """

    code: str = ""
    message: str = ""
    message_data: Any = None
    data: Any = None
    encryption: Any = None
    type: str = ""
    timestamp: str = ""
    extend: Optional[dict] = None

    def success_is(self) -> bool:
        """Whether the code is the success code."""
        return self.code == SUCCESS_CODE

    def error_is(self) -> bool:
        """Whether the code is the generic error code."""
        return self.code == ERROR_CODE

    def rs2_string(self) -> Tuple[str, "Result"]:
        return self.code, self

    def rs2_bool(self) -> Tuple[bool, "Result"]:
        return self.success_is(), self

    def rs2(self) -> Tuple[bool, "Result"]:
        return self.rs2_bool()

    def ok(self) -> "Result":
        return replace(self, code=SUCCESS_CODE, message=SUCCESS_MESSAGE)

    def ok_data(self, data: Any) -> "Result":
        return replace(self, code=SUCCESS_CODE, message=SUCCESS_MESSAGE, data=data)

    def ok_message(self, msg: str) -> "Result":
        return replace(self, code=SUCCESS_CODE, message=msg)

    def ok_message_data(self, msg: str, data: Any) -> "Result":
        return replace(self, code=SUCCESS_CODE, message=msg, data=data)

    def error(self) -> "Result":
        return replace(self, code=ERROR_CODE, message=ERROR_MESSAGE)

    def error_data(self, data: Any) -> "Result":
        return replace(self, code=ERROR_CODE, message=ERROR_MESSAGE, data=data)

    def error_message_data(self, data: Any) -> "Result":
        return replace(self, code=ERROR_CODE, message=ERROR_MESSAGE, message_data=data)

    def error_message(self, msg: str) -> "Result":
        return replace(self, code=ERROR_CODE, message=msg)

    def wrap(self, code: str, message: str, data: Any) -> "Result":
        return replace(self, code=code, message=message, data=data)

    def set_error_message(self, msg: str) -> "Result":
        """Set the message in place, leaving the code as it is, and return self."""
        self.message = msg
        return self

    def to_dict(self) -> dict:
        """The JSON form: empty optional members are left out."""
        out: dict = {"code": self.code, "message": self.message}
        if self.message_data is not None:
            out["messageData"] = self.message_data
        out["data"] = self.data
        if self.encryption is not None:
            out["encryption"] = self.encryption
        if self.type:
            out["type"] = self.type
        if self.timestamp:
            out["timestamp"] = self.timestamp
        if self.extend:
            out["extend"] = self.extend
        return out


def ok_default() -> Result:
    return Result(code=SUCCESS_CODE, message=SUCCESS_MESSAGE)


def ok(message: str) -> Result:
    return Result(code=SUCCESS_CODE, message=message)


def ok_data(data: Any) -> Result:
    return Result(code=SUCCESS_CODE, message=SUCCESS_MESSAGE, data=data)


def ok_r2(message: str) -> Tuple[str, Result]:
    return SUCCESS_CODE, ok(message)


def error_default() -> Result:
    return Result(code=ERROR_CODE, message=ERROR_MESSAGE)


def error(message: str) -> Result:
    return Result(code=ERROR_CODE, message=message)


def error_message_data(message_data: Any) -> Result:
    return Result(code=ERROR_CODE, message=ERROR_MESSAGE, message_data=message_data)


def error_r2(message: str) -> Tuple[str, Result]:
    return ERROR_CODE, error(message)


def illegal_argument(message: str) -> Result:
    return Result(code=ILLEGAL_ARGUMENT_CODE, message=message)


def illegal_argument_r2(message: str) -> Tuple[str, Result]:
    return ILLEGAL_ARGUMENT_CODE, illegal_argument(message)


def wrap(code: str, message: str) -> Result:
    return Result(code=code, message=message)


def wrap_r2(code: str, message: str) -> Tuple[str, Result]:
    return code, wrap(code, message)


def wrap_data(code: str, message: str, data: Any) -> Result:
    return Result(code=code, message=message, data=data)


def wrap_data_r2(code: str, message: str, data: Any) -> Tuple[str, Result]:
    return code, wrap_data(code, message, data)


def of(*args: Callable[[Result], None]) -> Result:
    """Build a success result and let each option adjust it in turn."""
    result = Result(code=SUCCESS_CODE)
    for option in args:
        option(result)
    return result