from .model_client import ModelClient, ModelResponse, OpenAIModelClient

__all__ = ['ModelClient', 'ModelResponse', 'OpenAIModelClient']
