"""Error categories surfaced to the caller.

Every error carries a user-displayable ``message`` (Vietnamese, like the rest
of the product copy) and an optional ``detail`` with the underlying cause.
"""


class GenerationError(RuntimeError):
    """Base for every failure a generation call can end in."""

    kind = "generation_error"
    default_message = "Đã xảy ra lỗi không xác định khi kết nối với AI. Vui lòng thử lại sau."

    def __init__(self, message: str | None = None, detail: str = "") -> None:
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class InvalidInput(GenerationError):
    kind = "invalid_input"
    default_message = "Vui lòng nhập nội dung bài viết."


class UnknownStyle(GenerationError):
    kind = "unknown_style"
    default_message = "Phong cách trả lời không hợp lệ."


class AuthenticationFailure(GenerationError):
    kind = "authentication_failure"
    default_message = "Khóa API không hợp lệ. Vui lòng kiểm tra cấu hình."


class MalformedResponse(GenerationError):
    kind = "malformed_response"
    default_message = (
        "Cấu trúc phản hồi từ AI không như mong đợi. Dữ liệu nhận được không hợp lệ."
    )


class TransportFailure(GenerationError):
    kind = "transport_failure"

    def __init__(self, message: str | None = None, detail: str = "") -> None:
        if message is None and detail:
            message = f"Đã xảy ra lỗi khi kết nối với AI: {detail}. Vui lòng thử lại."
        super().__init__(message, detail=detail)


class ConfigurationError(GenerationError):
    kind = "configuration_error"
    default_message = "Cấu hình ứng dụng không hợp lệ."
