import pytest
from advisor.configuration import AgentConfiguration
from advisor.errors import RemoteUnavailable
from advisor.evaluation import evaluate_compatibility
from advisor.models import CompatibilityLevel, HardwareDescriptor, Verdict
from advisor.static_evaluator import evaluate_descriptor

REMOTE_VERDICT = Verdict(
    compatibility=CompatibilityLevel.EXCELLENT,
    recommended_versions=["macOS Sonoma"],
    summary="Remote says yes.",
)

class DummyState:
    def __init__(self):
        self.hardware = HardwareDescriptor("AMD", "FX-8350", "generic", "RX 580")

def dummy_config(**configurable):
    return {"configurable": configurable}

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in AgentConfiguration.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)

def test_no_remote_uses_static_rules(monkeypatch):
    def forbidden(*args, **kwargs):
        raise AssertionError("remote evaluator must not be called")
    monkeypatch.setattr("advisor.evaluation.request_remote_verdict", forbidden)
    monkeypatch.setattr("advisor.evaluation.evaluate_with_llm", forbidden)
    state = DummyState()
    result = evaluate_compatibility(state, dummy_config())
    assert result["evaluator"] == "static"
    assert result["verdict"] == evaluate_descriptor(state.hardware)

def test_proxy_verdict_is_used_when_available(monkeypatch):
    calls = []
    def dummy_proxy(descriptor, url, timeout):
        calls.append((url, timeout))
        return REMOTE_VERDICT
    monkeypatch.setattr("advisor.evaluation.request_remote_verdict", dummy_proxy)
    state = DummyState()
    result = evaluate_compatibility(state, dummy_config(
        remote_evaluator="proxy", remote_base_url="http://example.test", remote_timeout=3
    ))
    assert result["evaluator"] == "proxy"
    assert result["verdict"] is REMOTE_VERDICT
    assert calls == [("http://example.test/api/openai-compatibility", 3.0)]

@pytest.mark.parametrize("mode, target", [
    ("proxy", "advisor.evaluation.request_remote_verdict"),
    ("llm", "advisor.evaluation.evaluate_with_llm"),
])
def test_remote_failure_falls_back_to_static(monkeypatch, mode, target):
    def failing(*args, **kwargs):
        raise RemoteUnavailable("down")
    monkeypatch.setattr(target, failing)
    state = DummyState()
    result = evaluate_compatibility(state, dummy_config(remote_evaluator=mode))
    assert result["evaluator"] == "static"
    assert result["verdict"] == evaluate_descriptor(state.hardware)
    assert result["verdict"].compatibility is CompatibilityLevel.LIMITED

def test_environment_overrides_runnable_config(monkeypatch):
    monkeypatch.setenv("REMOTE_EVALUATOR", "llm")
    monkeypatch.setattr("advisor.evaluation.evaluate_with_llm", lambda descriptor, llm_config, timeout=None: REMOTE_VERDICT)
    result = evaluate_compatibility(DummyState(), dummy_config(remote_evaluator="none"))
    assert result["evaluator"] == "llm"

def test_unknown_remote_mode_is_rejected():
    with pytest.raises(ValueError):
        AgentConfiguration.from_runnable_config(dummy_config(remote_evaluator="carrier-pigeon"))

def test_absolute_endpoint_wins_over_base_url():
    cfg = AgentConfiguration(remote_endpoint="https://api.example.com/check")
    assert cfg.proxy_url == "https://api.example.com/check"

def test_llm_mode_dispatches_to_llm_evaluator(monkeypatch):
    seen = []
    def dummy_llm(descriptor, llm_config, timeout=None):
        seen.append((llm_config.provider.value, timeout))
        return REMOTE_VERDICT
    monkeypatch.setattr("advisor.evaluation.evaluate_with_llm", dummy_llm)
    monkeypatch.setattr("advisor.evaluation.request_remote_verdict",
                        lambda *args, **kwargs: pytest.fail("proxy must not be called in llm mode"))
    result = evaluate_compatibility(DummyState(), dummy_config(remote_evaluator="llm", llm_provider="groq", remote_timeout=2))
    assert result["evaluator"] == "llm"
    assert seen == [("groq", 2.0)]
