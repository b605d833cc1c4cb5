"""
Module for summarizing transcripts using LLM models.
"""

import os
from typing import Optional

from groq import APIConnectionError, APIStatusError, APITimeoutError
from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter
from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from tubesummarize.core.errors import UpstreamError, UpstreamReason
from tubesummarize.core.prompts import (
    SUMMARY_SYSTEM_PROMPT,
    SUMMARY_USER_PROMPT,
    CHUNK_SYSTEM_PROMPT,
    COMBINE_USER_PROMPT,
)
from tubesummarize.models.schemas import SummaryConfig
from tubesummarize.utils.logger import logging

DEPENDENCY = "Groq"


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize the summarizer with API key.

        Args:
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.api_key = api_key or os.getenv("GROQ_API_KEY")
        if not self.api_key:
            raise UpstreamError(
                DEPENDENCY,
                "API key is required. Set GROQ_API_KEY in the .env file or pass it directly.",
                UpstreamReason.AUTH,
            )

        os.environ["GROQ_API_KEY"] = self.api_key

    def summarize(self, transcript_text: str, title: str, config: SummaryConfig) -> str:
        """
        Summarize a transcript text.

        Args:
            transcript_text: Full transcript text to summarize
            title: Title of the video, included in the prompt
            config: Configuration for summarization

        Returns:
            Summarized text
        """
        try:
            return self._summarize(transcript_text, title, config)
        except APITimeoutError as e:
            logging.error(f"Summary request timed out: {str(e)}")
            raise UpstreamError(DEPENDENCY, "request timed out", UpstreamReason.TIMEOUT) from e
        except APIStatusError as e:
            reason = UpstreamError.reason_for_status(e.status_code)
            logging.error(f"Summary request failed with status {e.status_code}: {str(e)}")
            if reason == UpstreamReason.AUTH:
                message = "invalid API key. Please check your API key and try again."
            elif reason == UpstreamReason.RATE_LIMIT:
                message = "rate limit exceeded. Please try again later."
            else:
                message = f"failed to generate summary: {e.message}"
            raise UpstreamError(DEPENDENCY, message, reason, e.status_code) from e
        except APIConnectionError as e:
            logging.error(f"Could not reach summary provider: {str(e)}")
            raise UpstreamError(DEPENDENCY, f"connection failed: {str(e)}") from e

    def _summarize(self, transcript_text: str, title: str, config: SummaryConfig) -> str:
        # Create a Document object
        document = Document(page_content=transcript_text)

        # For longer transcripts, split into chunks
        text_splitter = RecursiveCharacterTextSplitter(
            chunk_size=config.chunk_size,
            chunk_overlap=config.chunk_overlap
        )
        docs = text_splitter.split_documents([document])

        llm = init_chat_model(
            model=config.model,
            model_provider="groq",
            temperature=config.temperature,
            max_tokens=config.max_tokens
        )

        summary_prompt = ChatPromptTemplate.from_messages([
            ("system", SUMMARY_SYSTEM_PROMPT),
            ("human", SUMMARY_USER_PROMPT),
        ])

        # For shorter transcripts: use the "stuff" method
        if len(docs) <= 1:
            chain = summary_prompt | llm
            summary = chain.invoke({"title": title, "transcript": transcript_text})
            return summary.content or "No summary could be generated."

        # For longer transcripts: use map-reduce
        logging.info(f"Transcript split into {len(docs)} chunks, summarizing with map-reduce")
        map_prompt = ChatPromptTemplate.from_messages([
            ("system", CHUNK_SYSTEM_PROMPT),
            ("human", "{text}"),
        ])
        map_chain = map_prompt | llm

        interim_summaries = []
        for doc in docs:
            interim_summary = map_chain.invoke({"title": title, "text": doc.page_content})
            interim_summaries.append(interim_summary.content)

        reduce_prompt = ChatPromptTemplate.from_messages([
            ("system", SUMMARY_SYSTEM_PROMPT),
            ("human", COMBINE_USER_PROMPT),
        ])
        reduce_chain = reduce_prompt | llm

        final_summary = reduce_chain.invoke({"title": title, "summaries": "\n\n".join(interim_summaries)})
        return final_summary.content or "No summary could be generated."
