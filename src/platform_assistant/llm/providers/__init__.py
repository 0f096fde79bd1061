from .azure import AzureOpenAIResponder

__all__ = ["AzureOpenAIResponder"]
