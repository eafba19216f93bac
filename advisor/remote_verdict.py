# advisor/remote_verdict.py
"""
Prompt construction and reply parsing shared by the remote evaluators.

Both the proxy endpoint and the direct LLM path send the same prompt and
must hand back a `Verdict` of the same shape as the local rules produce.
Anything that cannot be turned into one raises `RemoteUnavailable`.
"""
import json
import logging
import re

from pydantic import ValidationError as SchemaError

from advisor.errors import RemoteUnavailable
from advisor.models import HardwareDescriptor, Verdict

logger = logging.getLogger(__name__)

EXPERT_PROMPT = """As a Hackintosh expert, evaluate if this hardware configuration would work well as a Hackintosh:
{hardware_info}

Please analyze:
1. Overall compatibility (Excellent/Good/Limited/Poor)
2. Known issues or limitations
3. Recommended macOS versions that would work best
4. Any specific configuration tips

Format your response as JSON with these fields:
- compatibility (string): "Excellent", "Good", "Limited", or "Poor"
- issues (array of strings): List of potential issues
- recommendedVersions (array of strings): List of recommended macOS versions
- tips (array of strings): List of configuration tips
- summary (string): Brief overall assessment"""

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


def describe_hardware(descriptor: HardwareDescriptor) -> str:
    return (
        f"CPU Brand: {descriptor.cpu_brand}\n"
        f"CPU Model: {descriptor.cpu_model}\n"
        f"Motherboard: {descriptor.motherboard}\n"
        f"Graphics Card: {descriptor.graphics_card}"
    )


def build_prompt(descriptor: HardwareDescriptor) -> str:
    return EXPERT_PROMPT.format(hardware_info=describe_hardware(descriptor))


def strip_reasoning(response: str) -> str:
    """Drop any <think> ... </think> preamble some models emit."""
    if "<think>" in response and "</think>" in response:
        end_index = response.index("</think>") + len("</think>")
        return response[end_index:].strip()
    return response.strip()


def extract_json_object(response: str) -> dict:
    text = strip_reasoning(response)
    fenced = _FENCE_RE.search(text)
    if fenced:
        text = fenced.group(1)
    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end <= start:
        raise RemoteUnavailable("Remote reply contains no JSON object")
    try:
        payload = json.loads(text[start:end + 1])
    except json.JSONDecodeError as exc:
        raise RemoteUnavailable(f"Remote reply is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise RemoteUnavailable("Remote reply is not a JSON object")
    return payload


def verdict_from_payload(payload) -> Verdict:
    if not isinstance(payload, dict):
        raise RemoteUnavailable(f"Expected a JSON object, got {type(payload).__name__}")
    try:
        verdict = Verdict.model_validate(payload)
    except SchemaError as exc:
        raise RemoteUnavailable(f"Remote verdict does not match the expected shape: {exc}") from exc
    logger.info(f"[Remote] parsed verdict: {verdict.compatibility.value}")
    logger.debug(f"[Remote] verdict payload: {json.dumps(verdict.to_payload())}")
    return verdict
