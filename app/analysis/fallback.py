"""Fixed report served when the extraction service is not configured.

The content is a sample workplace dispute: one chat screenshot with three
violations and one recorded conversation. It lets the rest of the pipeline
(wage calculation, drafting, workflow) run without credentials.
"""

from typing import Any

from app.extraction.record_builder import build_record
from app.merge.models import ConsolidatedReport

FALLBACK_PAYLOAD: dict[str, Any] = {
    "messages": [
        {
            "id": "1",
            "senderName": "이과장",
            "timestamp": "오전 8:50",
            "text": "최지훈씨, 이번 토요일도 나와서 재고 정리 끝내요.",
            "isViolation": False,
        },
        {
            "id": "2",
            "senderName": "최지훈",
            "timestamp": "오전 8:53",
            "text": "과장님, 토요일 근무 수당은 나오나요? 지난달 야근 수당도 아직 못 받았습니다.",
            "isViolation": False,
        },
        {
            "id": "3",
            "senderName": "이과장",
            "timestamp": "오전 8:57",
            "text": "월급에 다 포함돼 있다고 했잖아요. 계속 이러면 평가 때 불리할 겁니다.",
            "isViolation": True,
        },
        {
            "id": "4",
            "senderName": "이과장",
            "timestamp": "오전 9:01",
            "text": "다음 주 월요일 연차는 반려합니다. 지금 바쁜 거 안 보여요?",
            "isViolation": True,
        },
    ],
    "violations": [
        {
            "type": "wage_theft",
            "name": "임금체불",
            "severity": "Critical",
            "description": "포괄임금 약정이 있더라도 실제 연장근로가 약정 시간을 넘으면 그 차액을 법정수당으로 지급해야 합니다.",
            "lawArticle": "근로기준법 제43조 및 제56조",
            "evidenceQuotes": [
                "지난달 야근 수당도 아직 못 받았습니다.",
                "월급에 다 포함돼 있다고 했잖아요.",
            ],
        },
        {
            "type": "forced_labor",
            "name": "강제근로 및 불이익 암시",
            "severity": "High",
            "description": "수당 요구를 이유로 평가상 불이익을 암시하며 휴일근로를 강요했습니다.",
            "lawArticle": "근로기준법 제7조",
            "evidenceQuotes": ["계속 이러면 평가 때 불리할 겁니다."],
        },
        {
            "type": "leave_denial",
            "name": "연차휴가 사용 방해",
            "severity": "High",
            "description": "사업 운영에 막대한 지장이 없는 한 근로자가 청구한 시기에 연차휴가를 주어야 합니다.",
            "lawArticle": "근로기준법 제60조",
            "evidenceQuotes": ["다음 주 월요일 연차는 반려합니다."],
        },
    ],
    "wageData": {
        "baseSalary": 2500000,
        "overtimeHours": 15,
        "periodStart": "2026-01-01",
        "periodEnd": "2026-01-31",
        "missingInfo": [],
    },
    "audioAnalysis": {
        "transcript": (
            "이과장: 수당 얘기는 그만하세요. 우리 회사는 포괄이라 따로 못 줍니다. "
            "불만이면 다음 달부터 안 나와도 돼요.\n"
            "최지훈: 매일 세 시간씩 더 일했는데 수당이 없다는 게 말이 됩니까? 지금 해고하시는 겁니까?"
        ),
        "speakers": ["이과장", "최지훈"],
        "labor_keywords_found": ["수당", "포괄", "해고", "연장근로"],
        "key_statements": [
            {
                "speaker": "이과장",
                "text": "우리 회사는 포괄이라 따로 못 줍니다. 불만이면 다음 달부터 안 나와도 돼요.",
                "timestamp_approximate": "00:03",
                "relevance_to_labor_law": "포괄임금 명목의 수당 미지급 및 해고 암시",
            },
            {
                "speaker": "최지훈",
                "text": "매일 세 시간씩 더 일했는데 수당이 없다는 게 말이 됩니까?",
                "timestamp_approximate": "00:14",
                "relevance_to_labor_law": "상시 연장근로 사실",
            },
        ],
    },
}


def fallback_report() -> ConsolidatedReport:
    record = build_record(FALLBACK_PAYLOAD)
    return ConsolidatedReport(
        messages=record.messages,
        violations=record.violations,
        wage_data=record.wage_data,
        audio_analysis=record.audio_analysis,
    )
