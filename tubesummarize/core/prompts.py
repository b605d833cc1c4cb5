SUMMARY_SYSTEM_PROMPT = """
    You are an expert video summarizer. Analyze the transcript of a YouTube video
    and provide a detailed summary following the requested structure. Be specific
    and extract the most important information, organizing it into the
    Main Topic/Theme, Key Points, Important Details, and Conclusions/Takeaways sections.

    If the transcript starts with a note saying it was generated from the video
    description, say so at the top of the summary.
    """

SUMMARY_USER_PROMPT = """Create a detailed summary of the YouTube video transcript with title: "{title}".
Please structure the summary as follows:
1. Main Topic/Theme
2. Key Points
3. Important Details
4. Conclusions/Takeaways

TRANSCRIPT:
{transcript}"""

CHUNK_SYSTEM_PROMPT = """
    Summarize this part of the transcript of the YouTube video "{title}".
    Keep every key point, name, and figure it mentions.
    """

COMBINE_USER_PROMPT = """Combine these partial summaries of the YouTube video with title: "{title}" into one summary.
Please structure the summary as follows:
1. Main Topic/Theme
2. Key Points
3. Important Details
4. Conclusions/Takeaways

PARTIAL SUMMARIES:
{summaries}"""
