"""Text generation gateway.

Import from submodules:
- abc: TextGenerator
- real: OpenAITextGenerator
- fake: FakeTextGenerator
- types: ChatMessage, CompletionRequest
"""
