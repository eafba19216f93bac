import pytest
from advisor.errors import ValidationError
from advisor.configuration import AgentConfiguration
from advisor.models import CompatibilityLevel
from agent import check_compatibility, run_check

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in AgentConfiguration.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)

def test_local_check_end_to_end():
    result = run_check("Intel", "Core i7-9700K", "Gigabyte Z390 Aorus Pro", "AMD Radeon RX 580")
    verdict = result["verdict"]
    assert result["evaluator"] == "static"
    assert verdict.compatibility is CompatibilityLevel.GOOD
    assert "Compatibility: Good" in result["final_results"]
    assert "macOS Sonoma" in result["final_results"]

def test_gpu_override_end_to_end():
    verdict = check_compatibility("Intel", "i9-12900k", "z490", "NVIDIA RTX 4090")
    assert verdict.compatibility is CompatibilityLevel.POOR

def test_empty_field_fails_before_evaluation(monkeypatch):
    def forbidden(*args, **kwargs):
        raise AssertionError("evaluator must not run on invalid input")
    monkeypatch.setattr("advisor.evaluation.evaluate_descriptor", forbidden)
    with pytest.raises(ValidationError):
        check_compatibility("AMD", "Ryzen 5 3600", "", "RX 6600")

def test_proxy_failure_is_invisible_to_caller(monkeypatch):
    import httpx

    async def refused(self, url, json=None):
        raise httpx.ConnectError("connection refused")
    monkeypatch.setattr(httpx.AsyncClient, "post", refused)
    config = {"configurable": {"remote_evaluator": "proxy", "remote_timeout": 0.5}}
    remote = check_compatibility("AMD", "FX-8350", "generic", "RX 580", config=config)
    local = check_compatibility("AMD", "FX-8350", "generic", "RX 580")
    assert remote == local
    assert remote.compatibility is CompatibilityLevel.LIMITED

def test_proxy_fallback_inside_running_event_loop(monkeypatch):
    import asyncio
    import httpx

    async def refused(self, url, json=None):
        raise httpx.ConnectError("connection refused")
    monkeypatch.setattr(httpx.AsyncClient, "post", refused)
    config = {"configurable": {"remote_evaluator": "proxy", "remote_timeout": 0.5}}

    async def main():
        return check_compatibility("AMD", "FX-8350", "generic", "RX 580", config=config)

    verdict = asyncio.run(main())
    assert verdict == check_compatibility("AMD", "FX-8350", "generic", "RX 580")
    assert verdict.compatibility is CompatibilityLevel.LIMITED

def test_proxy_verdict_inside_running_event_loop(monkeypatch):
    import asyncio
    import httpx

    class DummyResponse:
        status_code = 200
        def json(self):
            return {"compatibility": "Excellent", "recommendedVersions": ["macOS Sonoma"], "summary": "Remote."}

    async def answered(self, url, json=None):
        return DummyResponse()
    monkeypatch.setattr(httpx.AsyncClient, "post", answered)
    config = {"configurable": {"remote_evaluator": "proxy"}}

    async def main():
        return run_check("AMD", "FX-8350", "generic", "RX 580", config=config)

    result = asyncio.run(main())
    assert result["evaluator"] == "proxy"
    assert result["verdict"].compatibility is CompatibilityLevel.EXCELLENT
