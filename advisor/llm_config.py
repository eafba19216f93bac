import os
from enum import Enum
from typing import Optional
from langchain_openai import ChatOpenAI as OpenAIChat
from langchain_groq import ChatGroq as GroqChat
from langchain_core.language_models import BaseChatModel
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, Field

class LLMProvider(str, Enum):
    OPENAI = "openai"
    GROQ = "groq"

class GroqModelType(str, Enum):
    LLAMA_VERSATILE = "llama-3.3-70b-versatile"  # Structured compatibility answers
    LLAMA_INSTANT = "llama-3.1-8b-instant"      # Cheaper, faster fallback choice

API_KEY_VARS = {
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.GROQ: "GROQ_API_KEY",
}

class LLMConfig(BaseModel):
    provider: LLMProvider = Field(default=LLMProvider.OPENAI)
    model: str = Field(default="gpt-4o-mini")
    groq_model: GroqModelType = Field(default=GroqModelType.LLAMA_VERSATILE)
    temperature: float = Field(default=0.2)
    max_tokens: int = Field(default=800)
    max_retries: int = Field(default=0)
    timeout: Optional[float] = Field(default=None)

    def _load_env(self):
        """Load environment variables from .env file"""
        dotenv_path = Path(__file__).resolve().parent.parent / ".env"
        if dotenv_path.exists():
            load_dotenv(dotenv_path)

    def _validate_api_keys(self):
        """Fail fast when the provider's API key is not configured"""
        key_var = API_KEY_VARS[self.provider]
        if not os.environ.get(key_var):
            raise ValueError(f"{key_var} is not set; cannot reach {self.provider.value}")

    def get_llm(self, **kwargs) -> BaseChatModel:
        """
        Get the configured LLM instance with the specified parameters.

        Args:
            model_name: Optional model name override
            temperature: Model temperature (0.0 to 1.0)
            max_tokens: Maximum tokens in response
            max_retries: Number of retries on failure
            timeout: Request timeout in seconds

        Returns:
            Configured LLM instance
        """
        self._load_env()
        self._validate_api_keys()
        if self.provider == LLMProvider.GROQ:
            return GroqChat(
                model=kwargs.get("model_name", self.groq_model.value),
                temperature=kwargs.get("temperature", self.temperature),
                max_tokens=kwargs.get("max_tokens", self.max_tokens),
                max_retries=kwargs.get("max_retries", self.max_retries),
                timeout=kwargs.get("timeout", self.timeout)
            )
        elif self.provider == LLMProvider.OPENAI:
            return OpenAIChat(
                model=kwargs.get("model_name", self.model),
                temperature=kwargs.get("temperature", self.temperature),
                max_tokens=kwargs.get("max_tokens", self.max_tokens),
                max_retries=kwargs.get("max_retries", self.max_retries),
                timeout=kwargs.get("timeout", self.timeout)
            )
        else:
            raise ValueError(f"Unsupported LLM provider: {self.provider}")

    @property
    def default_model(self) -> str:
        """Get the default model name for the current provider"""
        if self.provider == LLMProvider.GROQ:
            return self.groq_model.value
        return self.model

    def get_compatibility_llm(self, timeout: Optional[float] = None) -> BaseChatModel:
        """Get LLM configured for hardware compatibility verdicts"""
        return self.get_llm(
            temperature=0.2,
            max_tokens=800,
            max_retries=0,
            timeout=timeout if timeout is not None else self.timeout
        )
