from pydantic import BaseModel, Field, HttpUrl


class LLMConfig(BaseModel):
    """OpenAI-compatible LLM provider configuration"""

    base_url: HttpUrl = "https://openrouter.ai/api/v1"
    api_key: str = ""
    model_name: str = "anthropic/claude-3.5-sonnet"
    temperature: float = Field(0.7)
    max_tokens: int = Field(2000, ge=0)
    timeout_seconds: float = Field(8.0, gt=0)

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)
