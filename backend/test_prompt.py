from access_copilot.inference.prompt import (
    SYSTEM_PROMPT,
    build_messages,
    compose_prompts,
)
from access_copilot.schemas import AnalysisRequest, DEFAULT_GOAL, DEFAULT_PERSONA


def test_user_prompt_carries_all_fields_verbatim():
    req = AnalysisRequest(
        callType="New Patient Scheduling",
        notes='Caller said {"urgent": true} twice',
        persona="Silvia",
        goal="Same-week visit",
    )

    system, user = compose_prompts(req)

    assert system == SYSTEM_PROMPT
    assert "CALL TYPE: New Patient Scheduling" in user
    assert "PERSONA (primary audience for explanation): Silvia" in user
    assert "GOAL: Same-week visit" in user
    assert 'Caller said {"urgent": true} twice' in user
    assert "Return ONLY the JSON object" in user


def test_defaults_fill_missing_or_empty_persona_and_goal():
    _, user = compose_prompts(AnalysisRequest(callType="x", notes="y", persona=""))

    assert DEFAULT_PERSONA in user
    assert DEFAULT_GOAL in user


def test_system_prompt_lists_taxonomy_and_template():
    for call_type in (
        "New Patient Scheduling (complex)",
        "Radiology w/ Pre-Auth (complex)",
        "Provider Referral Coordination (complex)",
        "Appointment Rescheduling (simple)",
        "Patient Demographics Update (simple)",
    ):
        assert call_type in SYSTEM_PROMPT

    for key in ('"riskLevel"', '"probingQuestions"', '"mudaTypes"', '"daysToAppointment"'):
        assert key in SYSTEM_PROMPT


def test_compose_is_deterministic():
    req = AnalysisRequest(callType="a", notes="b")
    assert compose_prompts(req) == compose_prompts(req)


def test_build_messages_is_system_then_user():
    messages = build_messages("sys", "usr")
    assert messages == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "usr"},
    ]
