from .openai_llm import OpenAILLM

__all__ = ["OpenAILLM"]
