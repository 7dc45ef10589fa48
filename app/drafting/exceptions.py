DRAFTING_FAILED_MESSAGE = "진정서 생성에 실패했습니다. 잠시 후 다시 시도해주세요."
UNREADABLE_DRAFT_MESSAGE = "AI 응답을 처리할 수 없습니다. 다시 시도해주세요."


class DraftingError(Exception):
    """Raised when the complaint draft cannot be produced."""

    def __init__(self, detail: str, user_message: str = DRAFTING_FAILED_MESSAGE) -> None:
        super().__init__(detail)
        self.user_message = user_message
