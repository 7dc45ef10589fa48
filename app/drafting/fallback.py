from app.drafting.models import ComplaintDraft


def fallback_draft() -> ComplaintDraft:
    """Fixed draft matching the fallback report (2,500,000 won base, 15 overtime hours)."""
    return ComplaintDraft(
        complainant_name="최지훈",
        complainant_phone="010-2345-6789",
        complainant_address="서울특별시 마포구 월드컵로 100",
        company_name="(주)샘플유통",
        company_rep="이과장",
        company_address="서울특별시 영등포구 국제금융로 10",
        purpose=(
            "피진정인은 진정인에게 미지급 연장근로수당 금 269,122원을 지급하고, "
            "근로기준법 제60조 등 노동관계법령 위반에 대하여 적법한 조치를 취할 것을 구합니다."
        ),
        details=(
            "1. 진정인은 피진정인의 사업장에서 근로하고 있습니다.\n\n"
            "2. 피진정인은 포괄임금 약정을 이유로 휴일 및 연장근로 수당의 지급을 거부하였고"
            "(근로기준법 제43조, 제56조 위반), 수당 지급 요구에 대하여 평가상 불이익을 암시하였습니다"
            "(근로기준법 제7조 위반).\n\n"
            "3. 또한 진정인이 청구한 연차유급휴가를 정당한 사유 없이 반려하였습니다"
            "(근로기준법 제60조 위반).\n\n"
            "4. 체불 내역\n"
            "- 월 기본급: 2,500,000원 (통상시급 11,961원)\n"
            "- 연장근로 시간: 15시간\n"
            "- 미지급 연장근로수당: 11,961원 × 1.5 × 15시간 = 269,122원\n\n"
            "5. 위 위법 사항을 조사하시어 체불 수당이 조속히 지급되도록 조치하여 주시기 바랍니다."
        ),
        attachments=["카카오톡 대화 캡처 1부", "통화 녹음 파일 1부"],
    )
