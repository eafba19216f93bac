# advisor/rules.py
"""
Rule tables for the static compatibility check.

Every hardware dimension (CPU, GPU, motherboard) is an ordered tuple of
`Rule`s. Within a table the first rule whose predicate matches is applied
and the rest are skipped. Tables run in order CPU -> GPU -> motherboard, and
later effects overwrite `compatibility` / `summary` written by earlier ones.
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from advisor.models import CompatibilityLevel, Verdict
from advisor.normalize_input import NormalizedHardware

DEFAULT_VERSIONS = ("macOS Monterey", "macOS Big Sur")
DEFAULT_SUMMARY = "Based on static analysis, your hardware may work with some configuration."

GENERAL_TIPS = (
    "Follow a detailed guide for your specific hardware combination",
    "Use OpenCore as your bootloader for the best compatibility",
)

# Plain substring tokens. Single digits overlap on purpose; table order decides.
INTEL_CORE = ("i5", "i7", "i9")
INTEL_CURRENT_GEN = ("10", "11", "12", "8", "9")
INTEL_PREVIOUS_GEN = ("6", "7")
INTEL_LEGACY_GEN = ("3", "4", "5")
RYZEN_SUPPORTED_TIER = ("5", "7", "9")

RADEON_NATIVE = ("rx 5", "rx 6", "rx 580", "rx 570", "rx 560", "rx 550")
NVIDIA_MODERN = ("gtx 10", "rtx")

HACKINTOSH_CHIPSETS = ("z390", "z490", "z590", "b450", "b550", "x570")
BUDGET_CHIPSETS = ("h110", "h310", "b360")


def contains_any(text: str, tokens: Sequence[str]) -> bool:
    return any(token in text for token in tokens)


@dataclass
class VerdictDraft:
    """Mutable verdict the rule effects write into, seeded with the defaults."""

    compatibility: CompatibilityLevel = CompatibilityLevel.LIMITED
    issues: List[str] = field(default_factory=list)
    recommended_versions: List[str] = field(default_factory=lambda: list(DEFAULT_VERSIONS))
    tips: List[str] = field(default_factory=list)
    summary: str = DEFAULT_SUMMARY
    matched_rules: List[str] = field(default_factory=list)

    def to_verdict(self) -> Verdict:
        return Verdict(
            compatibility=self.compatibility,
            issues=list(self.issues),
            recommended_versions=list(self.recommended_versions),
            tips=list(self.tips),
            summary=self.summary,
        )


@dataclass(frozen=True)
class Rule:
    name: str
    predicate: Callable[[NormalizedHardware], bool]
    effect: Callable[[VerdictDraft], None]

    def matches(self, hardware: NormalizedHardware) -> bool:
        return self.predicate(hardware)

    def apply(self, draft: VerdictDraft) -> None:
        self.effect(draft)
        draft.matched_rules.append(self.name)


def outcome(
    level: Optional[CompatibilityLevel] = None,
    versions: Optional[Sequence[str]] = None,
    issue: Optional[str] = None,
    tip: Optional[str] = None,
    summary: Optional[str] = None,
) -> Callable[[VerdictDraft], None]:
    """Build an effect that overwrites/appends only the fields it is given."""

    def effect(draft: VerdictDraft) -> None:
        if level is not None:
            draft.compatibility = level
        if versions is not None:
            draft.recommended_versions = list(versions)
        if issue is not None:
            draft.issues.append(issue)
        if tip is not None:
            draft.tips.append(tip)
        if summary is not None:
            draft.summary = summary

    return effect


def first_match(rules: Sequence[Rule], hardware: NormalizedHardware) -> Optional[Rule]:
    for rule in rules:
        if rule.matches(hardware):
            return rule
    return None


# ---------------------------
# CPU
# ---------------------------
def _intel_core(hw: NormalizedHardware) -> bool:
    return hw.cpu_brand == "Intel" and contains_any(hw.cpu_model, INTEL_CORE)


def _ryzen(hw: NormalizedHardware) -> bool:
    return hw.cpu_brand == "AMD" and "ryzen" in hw.cpu_model


CPU_RULES = (
    Rule(
        name="intel_core_current",
        predicate=lambda hw: _intel_core(hw) and contains_any(hw.cpu_model, INTEL_CURRENT_GEN),
        effect=outcome(
            level=CompatibilityLevel.GOOD,
            versions=("macOS Sonoma", "macOS Ventura", "macOS Monterey"),
            summary="Your Intel CPU is well-supported in Hackintosh builds.",
        ),
    ),
    Rule(
        name="intel_core_previous",
        predicate=lambda hw: _intel_core(hw) and contains_any(hw.cpu_model, INTEL_PREVIOUS_GEN),
        effect=outcome(
            level=CompatibilityLevel.GOOD,
            versions=("macOS Monterey", "macOS Big Sur", "macOS Catalina"),
            summary="Your Intel CPU is supported, but newer macOS versions may have limitations.",
        ),
    ),
    Rule(
        name="intel_core_legacy",
        predicate=lambda hw: _intel_core(hw) and contains_any(hw.cpu_model, INTEL_LEGACY_GEN),
        effect=outcome(
            level=CompatibilityLevel.LIMITED,
            versions=("macOS Catalina", "macOS Mojave", "macOS High Sierra"),
            issue="Older Intel CPUs have limited compatibility with newer macOS versions",
            summary="Your CPU is aging but can still work with older macOS versions.",
        ),
    ),
    Rule(
        name="amd_ryzen_supported",
        predicate=lambda hw: _ryzen(hw) and contains_any(hw.cpu_model, RYZEN_SUPPORTED_TIER),
        effect=outcome(
            level=CompatibilityLevel.GOOD,
            versions=("macOS Sonoma", "macOS Ventura", "macOS Monterey"),
            issue="Some applications that use Apple's Hypervisor framework may not work correctly",
            summary="Your Ryzen CPU is well-supported, but some virtualization features may not work.",
        ),
    ),
    Rule(
        name="amd_ryzen_patched",
        predicate=_ryzen,
        effect=outcome(
            level=CompatibilityLevel.LIMITED,
            issue="Older AMD CPUs require special patches",
            summary="Your AMD CPU will need specific patches for compatibility.",
        ),
    ),
    Rule(
        name="amd_pre_ryzen",
        predicate=lambda hw: hw.cpu_brand == "AMD",
        effect=outcome(
            level=CompatibilityLevel.POOR,
            issue="Pre-Ryzen AMD CPUs have very limited macOS support",
            summary="Your AMD CPU may not be suitable for a Hackintosh build.",
        ),
    ),
)


# ---------------------------
# GPU
# ---------------------------
def _radeon_native(draft: VerdictDraft) -> None:
    # Only lifts a Poor verdict; never lowers a better one.
    if draft.compatibility == CompatibilityLevel.POOR:
        draft.compatibility = CompatibilityLevel.LIMITED
    draft.tips.append("AMD Radeon cards offer native support in macOS")


GPU_RULES = (
    Rule(
        name="amd_radeon_native",
        predicate=lambda hw: contains_any(hw.graphics_card, RADEON_NATIVE),
        effect=_radeon_native,
    ),
    Rule(
        name="nvidia_modern",
        predicate=lambda hw: "nvidia" in hw.graphics_card and contains_any(hw.graphics_card, NVIDIA_MODERN),
        effect=outcome(
            level=CompatibilityLevel.POOR,
            issue="Modern NVIDIA GPUs are not supported in recent macOS versions",
            tip="Consider replacing your NVIDIA GPU with an AMD card for better compatibility",
            summary="Your NVIDIA GPU is not compatible with recent macOS versions.",
        ),
    ),
    Rule(
        name="nvidia_legacy",
        predicate=lambda hw: "nvidia" in hw.graphics_card,
        effect=outcome(
            level=CompatibilityLevel.LIMITED,
            issue="Older NVIDIA GPUs require additional drivers and are limited to macOS High Sierra",
            tip="Install NVIDIA web drivers for older macOS versions",
        ),
    ),
)


# ---------------------------
# Motherboard (tips only)
# ---------------------------
MOTHERBOARD_RULES = (
    Rule(
        name="hackintosh_chipset",
        predicate=lambda hw: contains_any(hw.motherboard, HACKINTOSH_CHIPSETS),
        effect=outcome(tip="Your motherboard is commonly used in Hackintosh builds"),
    ),
    Rule(
        name="budget_chipset",
        predicate=lambda hw: contains_any(hw.motherboard, BUDGET_CHIPSETS),
        effect=outcome(tip="Your motherboard should work but may need specific BIOS settings"),
    ),
)

RULE_TABLES = (
    ("cpu", CPU_RULES),
    ("gpu", GPU_RULES),
    ("motherboard", MOTHERBOARD_RULES),
)
