"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from app.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns a fixed, valid extraction JSON.

    No network calls. The same payload also carries a ``complaintData``
    section so the drafting step can run against it offline.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "messages": [
            {
                "id": "1",
                "senderName": "팀장",
                "timestamp": "오후 9:40",
                "text": "오늘도 10시까지 남아서 마무리해. 야근수당은 없어.",
                "isViolation": True,
            }
        ],
        "violations": [
            {
                "type": "wage_theft",
                "name": "임금체불",
                "severity": "Critical",
                "description": "연장근로에 대한 가산수당을 지급하지 않겠다고 명시했습니다.",
                "lawArticle": "근로기준법 제56조",
                "evidenceQuotes": ["야근수당은 없어."],
            }
        ],
        "wageData": {
            "baseSalary": None,
            "overtimeHours": None,
            "periodStart": None,
            "periodEnd": None,
            "missingInfo": ["월 기본급"],
        },
        "complaintData": {
            "purpose": "피진정인은 진정인에게 미지급 연장근로수당을 지급하라는 지시를 구합니다.",
            "details": "진정인은 상시적인 연장근로에도 불구하고 가산수당을 지급받지 못하였습니다.",
            "attachments": ["카카오톡 대화 캡처 1부"],
        },
    }

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        instruction: str,
        payload: bytes | None = None,
        mime_type: str | None = None,
        json_output: bool = True,
    ) -> str:
        _ = model, temperature, instruction, payload, mime_type, json_output
        return json.dumps(self.DEFAULT_RESPONSE, ensure_ascii=False)
