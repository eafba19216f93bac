# advisor/evaluation.py
import logging

from advisor.configuration import AgentConfiguration
from advisor.errors import RemoteUnavailable
from advisor.llm_config import LLMConfig
from advisor.llm_evaluator import evaluate_with_llm
from advisor.models import HardwareDescriptor, Verdict
from advisor.proxy_client import request_remote_verdict
from advisor.static_evaluator import evaluate_descriptor

logger = logging.getLogger(__name__)

def run_remote_evaluator(descriptor: HardwareDescriptor, agent_config: AgentConfiguration) -> Verdict:
    if agent_config.remote_evaluator == "proxy":
        return request_remote_verdict(descriptor, agent_config.proxy_url, agent_config.remote_timeout)
    llm_config = LLMConfig(provider=agent_config.llm_provider, timeout=agent_config.remote_timeout)
    return evaluate_with_llm(descriptor, llm_config, timeout=agent_config.remote_timeout)

def evaluate_compatibility(state, config):
    """
    1) Ask the configured remote evaluator, if any.
    2) On RemoteUnavailable, or with no remote configured, use the local rules.
    The verdict shape is the same either way.
    """
    agent_config = AgentConfiguration.from_runnable_config(config)
    descriptor = state.hardware

    evaluator = "static"
    if agent_config.remote_evaluator == "none":
        verdict = evaluate_descriptor(descriptor)
    else:
        try:
            verdict = run_remote_evaluator(descriptor, agent_config)
            evaluator = agent_config.remote_evaluator
        except RemoteUnavailable as e:
            logger.warning(f"Remote evaluator '{agent_config.remote_evaluator}' unavailable ({e}); using rule-based evaluator.")
            verdict = evaluate_descriptor(descriptor)

    state.verdict = verdict
    state.evaluator = evaluator
    logger.info(f"Compatibility verdict: {verdict.compatibility.value} (evaluator: {evaluator})")
    return {"verdict": verdict, "evaluator": evaluator}
