"""
Command line entry point for TubeSummarize.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from tubesummarize.config import config
from tubesummarize.core.duration import format_timestamp
from tubesummarize.core.errors import TubeSummarizeError
from tubesummarize.core.orchestrator import TranscriptOrchestrator, create_orchestrator
from tubesummarize.models.schemas import VideoRecord
from tubesummarize.utils.helpers import save_json
from tubesummarize.utils.logger import logging


def save_record(record: VideoRecord, output_file: str) -> Path:
    """Save a processed video to a JSON file."""
    output_path = Path(output_file)
    save_json(record.model_dump(mode="json"), str(output_path))
    logging.info(f"Video record saved to: {output_path}")
    return output_path


def process_youtube_video(
    url: str,
    summarize: bool = False,
    model: Optional[str] = None,
    output_file: Optional[str] = None,
    orchestrator: Optional[TranscriptOrchestrator] = None,
) -> VideoRecord:
    """
    Process a YouTube video: resolve metadata, get the transcript, and optionally summarize.

    Args:
        url: YouTube video URL
        summarize: Whether to generate a summary
        model: Groq language model to use for summarization
        output_file: Optional file path to save the record

    Returns:
        VideoRecord object
    """
    orchestrator = orchestrator or create_orchestrator()
    if model:
        orchestrator.summary_model = model

    logging.info(f"Extracting transcript from: {url}")
    record = orchestrator.acquire_transcript(url)

    if summarize:
        logging.info("Generating summary...")
        record = orchestrator.summarize(record.id)

    if output_file:
        save_record(record, output_file)

    return record


def print_record(record: VideoRecord) -> None:
    print("\n" + "=" * 80)
    print(f"{record.title} by {record.channel_title} ({record.duration})")
    print("=" * 80)
    for segment in record.transcript:
        print(f"[{format_timestamp(segment.timestamp)}] {segment.text}")
    if record.summary:
        print("=" * 80)
        print(record.summary)
    print("=" * 80)


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube transcript extractor and summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--summarize", action="store_true", help="Generate a summary of the transcript")
    parser.add_argument("--model", default=config.DEFAULT_SUMMARY_MODEL,
                        help="Groq language model for summarization")
    parser.add_argument("--output", help="Output file path for the video record")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    try:
        record = process_youtube_video(args.url, args.summarize, args.model, args.output)
    except TubeSummarizeError as e:
        logging.error(f"Failed to process {args.url}: {e.message}")
        print(f"Error ({e.kind.value}): {e.message}", file=sys.stderr)
        sys.exit(1)

    print_record(record)


if __name__ == "__main__":
    main()
