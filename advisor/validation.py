# advisor/validation.py
import logging

from advisor.errors import ValidationError
from advisor.models import HardwareDescriptor

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("cpu_brand", "cpu_model", "motherboard", "graphics_card")


def validate_descriptor(descriptor: HardwareDescriptor) -> HardwareDescriptor:
    # Only empty values are rejected; whitespace is left to the rules.
    missing = [name for name in REQUIRED_FIELDS if not getattr(descriptor, name)]
    if missing:
        logger.info(f"Validation failed, missing fields: {missing}")
        raise ValidationError(missing)
    return descriptor


def validate_input(state, config):
    descriptor = HardwareDescriptor(
        cpu_brand=getattr(state, "cpu_brand", None) or "",
        cpu_model=getattr(state, "cpu_model", None) or "",
        motherboard=getattr(state, "motherboard", None) or "",
        graphics_card=getattr(state, "graphics_card", None) or "",
    )
    validate_descriptor(descriptor)
    state.hardware = descriptor
    logger.info(f"Validated hardware input: {descriptor.cpu_brand} {descriptor.cpu_model}")
    return {"hardware": descriptor}
