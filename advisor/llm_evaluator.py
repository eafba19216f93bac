# advisor/llm_evaluator.py
import logging
from typing import Optional
from langchain_core.prompts import ChatPromptTemplate

from advisor.errors import RemoteUnavailable
from advisor.llm_config import LLMConfig
from advisor.models import HardwareDescriptor, Verdict
from advisor.remote_verdict import build_prompt, extract_json_object, verdict_from_payload

logger = logging.getLogger(__name__)

prompt = ChatPromptTemplate.from_messages([
    ("system",
     "You are a Hackintosh hardware compatibility expert. "
     "Answer with a single JSON object and nothing else."),
    ("human", "{request}")
])

def evaluate_with_llm(descriptor: HardwareDescriptor, llm_config: LLMConfig, timeout: Optional[float] = None) -> Verdict:
    """
    Ask a chat model for a verdict on the given hardware.

    Raises RemoteUnavailable on a missing key, a failed call or a reply
    that does not parse into a Verdict.
    """
    try:
        llm = llm_config.get_compatibility_llm(timeout=timeout)
    except Exception as e:
        raise RemoteUnavailable(f"LLM not available: {e}") from e

    chain = prompt | llm
    logger.info(f"[LLM] Requesting verdict from {llm_config.provider.value}:{llm_config.default_model}")
    try:
        response = chain.invoke({"request": build_prompt(descriptor)})
    except Exception as e:
        raise RemoteUnavailable(f"LLM request failed: {e}") from e

    content = getattr(response, "content", response)
    if not isinstance(content, str):
        raise RemoteUnavailable(f"Unexpected LLM reply type: {type(content).__name__}")
    return verdict_from_payload(extract_json_object(content))
