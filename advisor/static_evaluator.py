# advisor/static_evaluator.py
import logging

from advisor.models import HardwareDescriptor, Verdict
from advisor.normalize_input import NormalizedHardware, normalize
from advisor.rules import GENERAL_TIPS, RULE_TABLES, VerdictDraft, first_match

logger = logging.getLogger(__name__)


def evaluate_normalized(hardware: NormalizedHardware) -> Verdict:
    """
    Run the CPU, GPU and motherboard rule tables in order and fold their
    effects into one verdict. The general tips are always appended last.
    """
    draft = VerdictDraft()
    for dimension, rules in RULE_TABLES:
        rule = first_match(rules, hardware)
        if rule is None:
            logger.debug(f"[Static] {dimension}: no rule matched")
            continue
        rule.apply(draft)
        logger.debug(f"[Static] {dimension}: {rule.name} -> {draft.compatibility.value}")
    draft.tips.extend(GENERAL_TIPS)
    logger.info(
        f"[Static] verdict {draft.compatibility.value} "
        f"(rules: {', '.join(draft.matched_rules) or 'none'})"
    )
    return draft.to_verdict()


def evaluate_descriptor(descriptor: HardwareDescriptor) -> Verdict:
    return evaluate_normalized(normalize(descriptor))


def evaluate(cpu_brand: str, cpu_model: str, motherboard: str, graphics_card: str) -> Verdict:
    """Pure, total rule-based evaluation of the four hardware fields."""
    return evaluate_descriptor(
        HardwareDescriptor(
            cpu_brand=cpu_brand,
            cpu_model=cpu_model,
            motherboard=motherboard,
            graphics_card=graphics_card,
        )
    )
