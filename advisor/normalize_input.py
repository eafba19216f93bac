# advisor/normalize_input.py
from dataclasses import dataclass

from advisor.models import HardwareDescriptor


@dataclass(frozen=True)
class NormalizedHardware:
    # Brand is matched exactly ("Intel" / "AMD"), everything else case-insensitively.
    cpu_brand: str
    cpu_model: str
    motherboard: str
    graphics_card: str


def normalize(descriptor: HardwareDescriptor) -> NormalizedHardware:
    """Lowercase the free-text fields for substring matching. No trimming."""
    return NormalizedHardware(
        cpu_brand=descriptor.cpu_brand,
        cpu_model=descriptor.cpu_model.lower(),
        motherboard=descriptor.motherboard.lower(),
        graphics_card=descriptor.graphics_card.lower(),
    )
