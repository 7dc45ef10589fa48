ANALYSIS_FAILED_MESSAGE = "증거 분석에 실패했습니다. 잠시 후 다시 시도해주세요."


class AnalysisError(Exception):
    """Raised when batch analysis fails for an unexpected reason.

    ``user_message`` is the only text meant for end users; details stay in logs.
    """

    def __init__(self, detail: str, user_message: str = ANALYSIS_FAILED_MESSAGE) -> None:
        super().__init__(detail)
        self.user_message = user_message
