# advisor/configuration.py
import os
from typing import Any, Literal

import httpx
from pydantic import BaseModel, Field

from advisor.llm_config import LLMProvider

class AgentConfiguration(BaseModel):
    remote_evaluator: Literal["none", "proxy", "llm"] = Field(
        "none", title="Remote Evaluator", description="Remote back-end to try before the local rules"
    )
    remote_base_url: str = Field("http://localhost:8000", title="Proxy Base URL")
    remote_endpoint: str = Field("/api/openai-compatibility", title="Proxy Endpoint")
    remote_timeout: float = Field(10.0, gt=0, title="Remote Timeout", description="Seconds before falling back")
    llm_provider: LLMProvider = Field(LLMProvider.OPENAI, title="LLM Provider")

    @property
    def proxy_url(self) -> str:
        return str(httpx.URL(self.remote_base_url).join(self.remote_endpoint))

    @classmethod
    def from_runnable_config(cls, config: Any = None) -> "AgentConfiguration":
        cfg = (config or {}).get("configurable", {})
        raw = {k: os.environ.get(k.upper(), cfg.get(k)) for k in cls.model_fields.keys()}
        values = {k: v for k, v in raw.items() if v is not None}
        return cls(**values)
