import logging
from typing import Any

from access_copilot.errors import UpstreamParseError, UpstreamTransportError
from access_copilot.inference.base import LLMClient
from access_copilot.inference.prompt import compose_prompts, build_messages
from access_copilot.pipeline.request_validator import validate_analysis_request
from access_copilot.schemas import AnalysisRequest
from access_copilot.utils.json_extract import load_model_json

logger = logging.getLogger(__name__)


def _call_model(client: LLMClient, messages) -> str:
    try:
        return client.generate(messages)
    except UpstreamTransportError:
        raise
    except Exception as e:
        raise UpstreamTransportError.from_exception(e) from e


def run_patient_access_analysis(
    request: AnalysisRequest,
    client: LLMClient,
) -> Any:
    """
    validate -> compose -> one LLM call -> parse.

    Returns the parsed model JSON as-is (the analysis shape is not enforced).
    Raises ValidationError, UpstreamTransportError or UpstreamParseError.
    No retries.
    """
    validate_analysis_request(request)

    system_prompt, user_prompt = compose_prompts(request)
    messages = build_messages(system_prompt, user_prompt)

    try:
        raw = _call_model(client, messages)
    except UpstreamTransportError as e:
        logger.error(
            "OpenAI error status=%s type=%s message=%s",
            e.upstream_status,
            e.error_type,
            e.message,
            exc_info=True,
        )
        raise

    raw = raw or "{}"

    try:
        return load_model_json(raw)
    except UpstreamParseError:
        logger.error("JSON parse error, raw output: %s", raw)
        raise
