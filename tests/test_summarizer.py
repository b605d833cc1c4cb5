"""
Tests for the transcript summarizer module.
"""

import os
import httpx
import pytest
from unittest.mock import patch

from groq import AuthenticationError, RateLimitError
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from tubesummarize.core.errors import UpstreamError, UpstreamReason
from tubesummarize.core.summarizer import TranscriptSummarizer
from tubesummarize.models.schemas import SummaryConfig


class RecordingModel:
    """Stands in for the chat model and remembers every prompt it receives."""

    def __init__(self, respond):
        self.respond = respond
        self.prompts = []

    def invoke_model(self, prompt_value):
        text = prompt_value.to_string()
        self.prompts.append(text)
        return AIMessage(content=self.respond(text))

    def as_runnable(self):
        return RunnableLambda(self.invoke_model)


@pytest.fixture
def summary_config():
    """Fixture to create a SummaryConfig object."""
    return SummaryConfig(model="llama-3.3-70b-versatile", temperature=0.0, max_tokens=800)


def _patch_model(model):
    return patch('tubesummarize.core.summarizer.init_chat_model', return_value=model.as_runnable())


@patch.dict(os.environ, {"GROQ_API_KEY": "test_api_key"})
def test_init_summarizer():
    """Test initializing the summarizer."""
    summarizer = TranscriptSummarizer()
    assert summarizer.api_key == "test_api_key"


@patch.dict(os.environ, {}, clear=True)
def test_init_without_key_is_auth_error():
    with pytest.raises(UpstreamError) as exc_info:
        TranscriptSummarizer()

    assert exc_info.value.reason == UpstreamReason.AUTH


@patch.dict(os.environ, {"GROQ_API_KEY": "test_api_key"})
def test_summarize_short_transcript(summary_config):
    """Short transcripts are summarized with a single call."""
    model = RecordingModel(lambda prompt: "This is a summarized transcript of the video.")

    with _patch_model(model) as mock_init:
        summary = TranscriptSummarizer().summarize("This is a short test transcript.", "Test Video", summary_config)

    assert summary == "This is a summarized transcript of the video."
    assert len(model.prompts) == 1
    assert 'title: "Test Video"' in model.prompts[0]
    assert "This is a short test transcript." in model.prompts[0]
    assert mock_init.call_args.kwargs["model_provider"] == "groq"


@patch.dict(os.environ, {"GROQ_API_KEY": "test_api_key"})
def test_summarize_long_transcript():
    """Long transcripts are summarized chunk by chunk, then combined."""
    config = SummaryConfig(model="llama-3.3-70b-versatile", chunk_size=200, chunk_overlap=0)
    model = RecordingModel(
        lambda prompt: "final summary" if "PARTIAL SUMMARIES" in prompt else "partial summary"
    )
    long_transcript = "This is a really long transcript. " * 20

    with _patch_model(model):
        summary = TranscriptSummarizer().summarize(long_transcript, "Long Video", config)

    assert len(model.prompts) > 2
    assert "partial summary" in model.prompts[-1]
    assert summary == "final summary"


def _groq_error(error_class, status_code):
    request = httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions")
    response = httpx.Response(status_code, request=request)
    return error_class("provider error", response=response, body=None)


@pytest.mark.parametrize("error, reason", [
    (_groq_error(AuthenticationError, 401), UpstreamReason.AUTH),
    (_groq_error(RateLimitError, 429), UpstreamReason.RATE_LIMIT),
])
@patch.dict(os.environ, {"GROQ_API_KEY": "test_api_key"})
def test_provider_errors_are_classified(summary_config, error, reason):
    def failing_model(prompt_value):
        raise error

    with patch('tubesummarize.core.summarizer.init_chat_model', return_value=RunnableLambda(failing_model)):
        with pytest.raises(UpstreamError) as exc_info:
            TranscriptSummarizer().summarize("transcript", "Title", summary_config)

    assert exc_info.value.reason == reason
    assert exc_info.value.dependency == "Groq"
