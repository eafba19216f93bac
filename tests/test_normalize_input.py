from advisor.models import HardwareDescriptor
from advisor.normalize_input import normalize

def test_normalize_lowercases_free_text_but_not_brand():
    hw = normalize(HardwareDescriptor("Intel", "Core I7-12700K ", "ASUS Z490", "AMD Radeon RX 6800"))
    assert hw.cpu_brand == "Intel"
    assert hw.cpu_model == "core i7-12700k "   # no trimming
    assert hw.motherboard == "asus z490"
    assert hw.graphics_card == "amd radeon rx 6800"

def test_normalize_keeps_brand_case():
    assert normalize(HardwareDescriptor("intel", "", "", "")).cpu_brand == "intel"
